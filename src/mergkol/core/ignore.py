# src/mergkol/core/ignore.py
import re
import sys
from pathlib import Path
from typing import List, Optional, Union

import pathspec

_GLOB_SPECIAL = re.compile(r"[\\\[\]*?]")

def load_ignore_spec(
    ignore_file: Optional[Union[str, Path]] = None,
    extra_patterns: Optional[List[str]] = None,
) -> pathspec.PathSpec:
    """
    Builds a gitwildmatch PathSpec from an optional ignore file plus any
    extra patterns (e.g. --exclude values or the output file).
    A missing ignore file only produces a warning.
    """
    lines: List[str] = []

    if ignore_file is not None:
        ignore_path = Path(ignore_file)
        if ignore_path.is_file():
            with open(ignore_path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        else:
            print(f"  > [Warning] Ignore file not found: {ignore_path}", file=sys.stderr)

    if extra_patterns:
        lines.extend(extra_patterns)

    return pathspec.PathSpec.from_lines("gitwildmatch", lines)

def escape_pattern(path: str) -> str:
    """Escapes gitwildmatch metacharacters so path only matches itself."""
    return _GLOB_SPECIAL.sub(r"\\\g<0>", path)

def output_exclusion_pattern(root_dir: Path, output_file: Path) -> Optional[str]:
    """
    Returns an anchored pattern matching output_file when it lies inside
    root_dir, so a re-run does not merge its own previous output.
    """
    try:
        rel_path = output_file.resolve().relative_to(root_dir.resolve())
    except ValueError:
        return None
    return "/" + escape_pattern(rel_path.as_posix())
