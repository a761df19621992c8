from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class LocationKind(StrEnum):
    ARCHIVE = "archive"
    DIRECTORY = "directory"
    MISSING = "missing"


class ClasspathLocation(BaseModel):
    """One classpath entry, classified once when the repository is built."""

    model_config = ConfigDict(frozen=True)

    path: Path
    kind: LocationKind

    @classmethod
    def classify(cls, path: str | Path) -> ClasspathLocation:
        """Stat *path* once: a regular file is an archive, a directory is a directory.

        Anything else (nonexistent, broken symlink, unreadable) is ``missing``
        and contributes nothing to lookups or enumeration.
        """
        path = Path(path)
        try:
            if path.is_file():
                kind = LocationKind.ARCHIVE
            elif path.is_dir():
                kind = LocationKind.DIRECTORY
            else:
                kind = LocationKind.MISSING
        except OSError:
            kind = LocationKind.MISSING
        return cls(path=path, kind=kind)
