# src/mergkol/errors.py
from pathlib import Path
from typing import Union


class MergeError(Exception):
    """Base class for every failure raised while merging sources."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ReadError(MergeError):
    """A single source file could not be opened, read or decoded."""


class WalkError(MergeError):
    """The input directory could not be traversed."""


class WriteError(MergeError):
    """The merged output could not be written."""
