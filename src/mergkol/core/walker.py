# src/mergkol/core/walker.py
import os
from pathlib import Path
from typing import List, Optional, Union

import pathspec

from mergkol.config import MATCH_ALL, TEST_MARKER
from mergkol.errors import WalkError

def is_test_file(file_name: str) -> bool:
    return TEST_MARKER in file_name.lower()

def matches_extension(file_name: str, extension_filter: str) -> bool:
    if extension_filter == MATCH_ALL:
        return True
    return file_name.endswith(extension_filter)

class _Walker:
    def __init__(self, root_path: Path, extension_filter: str, skip_test_files: bool,
                 ignore_spec: Optional[pathspec.PathSpec]):
        self.root_path = root_path
        self.extension_filter = extension_filter
        self.skip_test_files = skip_test_files
        self.ignore_spec = ignore_spec
        self.paths: List[Path] = []

    def _is_ignored(self, path: Path, is_directory: bool) -> bool:
        if self.ignore_spec is None:
            return False
        rel_path = path.relative_to(self.root_path).as_posix()
        if is_directory:
            rel_path += "/"
        return self.ignore_spec.match_file(rel_path)

    def walk(self, directory: Path):
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            raise WalkError(directory, e.strerror or str(e)) from e

        # Files and directories share one lexical order, depth-first
        for entry in entries:
            path = directory / entry.name
            if entry.is_dir(follow_symlinks=False):
                if not self._is_ignored(path, is_directory=True):
                    self.walk(path)
                continue

            if self._is_ignored(path, is_directory=False):
                continue
            if self.skip_test_files and is_test_file(entry.name):
                continue
            if matches_extension(entry.name, self.extension_filter):
                self.paths.append(path)

def discover(
    root_dir: Union[str, Path],
    extension_filter: str = MATCH_ALL,
    skip_test_files: bool = False,
    ignore_spec: Optional[pathspec.PathSpec] = None,
) -> List[Path]:
    """
    Recursively collects the files under root_dir that pass the filters.
    Every returned path starts with root_dir. The entries of each
    directory are visited in name order, descending into a subdirectory
    where it sorts. Raises WalkError on the first traversal failure;
    nothing collected so far is returned.
    """
    root_path = Path(root_dir)
    if not root_path.is_dir():
        raise WalkError(root_path, "no such directory")

    walker = _Walker(root_path, extension_filter, skip_test_files, ignore_spec)
    walker.walk(root_path)
    return walker.paths
