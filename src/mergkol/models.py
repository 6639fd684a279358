# src/mergkol/models.py
from dataclasses import dataclass
from typing import Iterable, Tuple

@dataclass(frozen=True)
class SourceFile:
    """Immutable record of one parsed source file."""
    name: str
    package: str
    imports: Tuple[str, ...]
    code: Tuple[str, ...]

    @classmethod
    def merged(cls, imports: Iterable[str], code: Iterable[str]) -> "SourceFile":
        # Identity is dissolved on merge
        return cls(name="", package="", imports=tuple(imports), code=tuple(code))

# A merge result has the same shape, with empty name and package
MergedFile = SourceFile
