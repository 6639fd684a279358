# src/mergkol/core/parser.py
from pathlib import Path
from typing import List, Union

from mergkol.core.classifier import LineKind, classify_line
from mergkol.errors import ReadError
from mergkol.models import SourceFile

def _strip_line_ending(raw: str) -> str:
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw

def parse(path: Union[str, Path]) -> SourceFile:
    """
    Reads one file line by line and sorts every line into imports,
    code or the package declaration. Blank lines are dropped.
    Raises ReadError if the file cannot be opened, read or decoded.
    """
    imports: List[str] = []
    code: List[str] = []
    package = ""

    try:
        # newline="\n": only \n splits lines, a lone \r stays in the line
        with open(path, "r", encoding="utf-8", newline="\n") as f:
            name = f.name
            for raw in f:
                classified = classify_line(_strip_line_ending(raw))
                if classified.kind is LineKind.IMPORT:
                    imports.append(classified.text)
                elif classified.kind is LineKind.PACKAGE:
                    # Last package line wins
                    package = classified.text
                elif classified.kind is LineKind.CODE:
                    code.append(classified.text)
    except UnicodeDecodeError as e:
        raise ReadError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise ReadError(path, e.strerror or str(e)) from e

    return SourceFile(
        name=str(name),
        package=package,
        imports=tuple(imports),
        code=tuple(code),
    )
