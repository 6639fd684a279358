# src/mergkol/config.py

DEFAULT_DIR = "src"
DEFAULT_OUTPUT_FILE = "Merged.kt"

# Wildcard extension filter: every file matches
MATCH_ALL = "*"
DEFAULT_EXTENSION_FILTER = MATCH_ALL

IMPORT_KEYWORD = "import"
PACKAGE_KEYWORD = "package"

# Compared against the lower-cased base name
TEST_MARKER = "test"

LINE_ENDINGS = {
    "crlf": "\r\n",
    "lf": "\n",
}
DEFAULT_LINE_ENDING = "crlf"
