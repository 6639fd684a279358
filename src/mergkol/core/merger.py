# src/mergkol/core/merger.py
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

import pathspec

from mergkol.config import IMPORT_KEYWORD, MATCH_ALL
from mergkol.core.parser import parse
from mergkol.core.walker import discover
from mergkol.errors import ReadError
from mergkol.models import MergedFile, SourceFile

def remove_duplicates_unordered(elements: Iterable[str]) -> List[str]:
    """
    Returns the distinct elements. The order of the result is not part
    of the contract (currently first appearance).
    """
    return list(dict.fromkeys(elements))

def remove_package_imports(imports: Iterable[str], package: str) -> List[str]:
    """
    Drops every import whose target starts with the given package name.
    This is a plain string prefix test: package 'foo' also removes
    'import foo2.Bar'.
    """
    kept = []
    for line in imports:
        target = line.split(IMPORT_KEYWORD, 1)[-1].strip()
        if not target.startswith(package):
            kept.append(line)
    return kept

def merge(files: Sequence[SourceFile], sort_imports: bool = False) -> MergedFile:
    """
    Merges parsed files into one record: imports are deduplicated and
    imports of any merged-in package are removed, code is concatenated
    in input order.
    """
    imports: List[str] = []
    code: List[str] = []
    packages: List[str] = []

    for f in files:
        packages.append(f.package)
        imports.extend(f.imports)
        code.extend(f.code)

    imports = remove_duplicates_unordered(imports)
    for package in packages:
        if package:
            imports = remove_package_imports(imports, package)

    if sort_imports:
        imports.sort()

    return SourceFile.merged(imports, code)

def parse_all(paths: Iterable[Union[str, Path]]) -> List[SourceFile]:
    """Parses each path, skipping (with a warning) files that cannot be read."""
    files = []
    for path in paths:
        try:
            files.append(parse(path))
        except ReadError as e:
            print(f"  > [Warning] Skipping {e.path} (read error: {e.reason})", file=sys.stderr)
    return files

def merge_directory(
    root_dir: Union[str, Path],
    extension_filter: str = MATCH_ALL,
    skip_test_files: bool = False,
    ignore_spec: Optional[pathspec.PathSpec] = None,
    sort_imports: bool = False,
) -> MergedFile:
    """
    Discovers, parses and merges every matching file under root_dir.
    A WalkError from discovery propagates; unreadable files are skipped.
    """
    paths = discover(root_dir, extension_filter, skip_test_files, ignore_spec)
    for path in paths:
        print(f"\t{path}")
    return merge(parse_all(paths), sort_imports=sort_imports)
