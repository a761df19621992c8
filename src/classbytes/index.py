"""Per-location class file indexes.

Each classpath location gets one index, chosen by its classification:

- ``ArchiveIndex`` reads entries from a zip/jar through a handle owned by the
  repository (opened lazily via the ``open_archive`` callback).
- ``DirectoryIndex`` resolves class file paths against a directory root.
- ``MissingIndex`` stands in for locations that were neither; it finds nothing.

An index never reads bytes during lookup. It returns a supplier that performs
the read each time it is called, so callers decide when (and whether) to pay
for the I/O.
"""

from __future__ import annotations

import os
import zipfile
import zlib
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from classbytes.errors import ClassBytesError, ErrorCode
from classbytes.models.location import LocationKind
from classbytes.naming import is_class_file_path
from classbytes.paths import normalise_file_separators

if TYPE_CHECKING:
    from classbytes.models.location import ClasspathLocation

ClassBytesSupplier = Callable[[], bytes]
ArchiveOpener = Callable[[Path], zipfile.ZipFile]


class LocationIndex(ABC):
    """Lookup and enumeration of the class files under one classpath location."""

    @abstractmethod
    def lookup(self, class_file_path: str) -> ClassBytesSupplier | None:
        ...

    @abstractmethod
    def class_file_paths(self) -> Iterator[str]:
        ...

    def __call__(self, class_file_path: str) -> ClassBytesSupplier | None:
        return self.lookup(class_file_path)


class MissingIndex(LocationIndex):
    def lookup(self, class_file_path: str) -> ClassBytesSupplier | None:
        return None

    def class_file_paths(self) -> Iterator[str]:
        return iter(())


class ArchiveIndex(LocationIndex):
    def __init__(self, archive_path: Path, open_archive: ArchiveOpener) -> None:
        self._archive_path = archive_path
        self._open_archive = open_archive

    def lookup(self, class_file_path: str) -> ClassBytesSupplier | None:
        archive = self._open_archive(self._archive_path)
        try:
            entry = archive.getinfo(class_file_path)
        except KeyError:
            return None
        archive_path = self._archive_path

        def read_entry() -> bytes:
            try:
                with archive.open(entry) as stream:
                    return stream.read()
            except (
                OSError,
                ValueError,
                RuntimeError,
                NotImplementedError,
                zipfile.BadZipFile,
                zlib.error,
            ) as exc:
                raise ClassBytesError(
                    ErrorCode.CLASS_READ_FAILED,
                    f"Failed to read {class_file_path!r} from {str(archive_path)!r}: {exc}",
                ) from exc

        return read_entry

    def class_file_paths(self) -> Iterator[str]:
        archive = self._open_archive(self._archive_path)
        for entry in archive.infolist():
            if is_class_file_path(entry.filename):
                yield entry.filename


class DirectoryIndex(LocationIndex):
    def __init__(self, root: Path) -> None:
        self._root = root

    def lookup(self, class_file_path: str) -> ClassBytesSupplier | None:
        if class_file_path.startswith("/") or os.path.isabs(class_file_path):
            return None
        class_file = self._root / class_file_path
        if not class_file.is_file():
            return None

        def read_file() -> bytes:
            try:
                return class_file.read_bytes()
            except OSError as exc:
                raise ClassBytesError(
                    ErrorCode.CLASS_READ_FAILED,
                    f"Failed to read {str(class_file)!r}: {exc}",
                ) from exc

        return read_file

    def class_file_paths(self) -> Iterator[str]:
        """Walk the tree top-down; files before subdirectories, each sorted by name."""
        for dirpath, dirnames, filenames in os.walk(self._root):
            dirnames.sort()
            for filename in sorted(filenames):
                if not is_class_file_path(filename):
                    continue
                file_path = os.path.join(dirpath, filename)
                if not os.path.isfile(file_path):
                    continue
                yield normalise_file_separators(os.path.relpath(file_path, self._root))


def index_for(location: ClasspathLocation, open_archive: ArchiveOpener) -> LocationIndex:
    if location.kind is LocationKind.ARCHIVE:
        return ArchiveIndex(location.path, open_archive)
    if location.kind is LocationKind.DIRECTORY:
        return DirectoryIndex(location.path)
    return MissingIndex()
