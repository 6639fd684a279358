# src/mergkol/core/writer.py
from pathlib import Path
from typing import Union

from mergkol.config import DEFAULT_LINE_ENDING, LINE_ENDINGS
from mergkol.errors import WriteError
from mergkol.models import MergedFile

def serialize(merged: MergedFile, line_ending: str = LINE_ENDINGS[DEFAULT_LINE_ENDING]) -> str:
    """Imports, one blank separator line, then code; every line terminated."""
    parts = [line + line_ending for line in merged.imports]
    parts.append(line_ending)
    parts.extend(line + line_ending for line in merged.code)
    return "".join(parts)

def write(
    merged: MergedFile,
    output_path: Union[str, Path],
    line_ending: str = LINE_ENDINGS[DEFAULT_LINE_ENDING],
) -> None:
    """Writes the merged file, replacing any existing file at output_path."""
    text = serialize(merged, line_ending)
    try:
        # newline="" keeps the requested line endings untranslated
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise WriteError(output_path, e.strerror or str(e)) from e
