# src/mergkol/core/classifier.py
from enum import Enum
from typing import NamedTuple

from mergkol.config import IMPORT_KEYWORD, PACKAGE_KEYWORD

class LineKind(Enum):
    IMPORT = "import"
    PACKAGE = "package"
    BLANK = "blank"
    CODE = "code"

class ClassifiedLine(NamedTuple):
    kind: LineKind
    # Verbatim line for IMPORT and CODE, the package name for PACKAGE
    text: str

def classify_line(line: str) -> ClassifiedLine:
    """
    Categorizes a single line by its leading keyword.
    The line is not trimmed before the prefix test, so an indented
    'import' is treated as code. First match wins.
    """
    if line.startswith(IMPORT_KEYWORD):
        return ClassifiedLine(LineKind.IMPORT, line)
    if line.startswith(PACKAGE_KEYWORD):
        return ClassifiedLine(LineKind.PACKAGE, line[len(PACKAGE_KEYWORD):].strip())
    if not line.strip():
        return ClassifiedLine(LineKind.BLANK, "")
    return ClassifiedLine(LineKind.CODE, line)
