"""Class bytes repository: lookup by source name across a classpath.

Follows the one directory per package segment convention. Archives are kept
open after first use so repeated lookups do not reopen them; the repository
must therefore be closed (or used as a context manager).

Error policy is deliberately asymmetric:

- ``class_bytes_for`` propagates read failures to the caller.
- ``all_classes_bytes_by_source_name`` skips an entry whose lookup fails and
  keeps going, so one corrupt entry does not abort a bulk scan.
"""

from __future__ import annotations

import os
import zipfile
from collections.abc import Iterable, Iterator
from contextlib import ExitStack
from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING

import structlog

from classbytes.errors import ClassBytesError, ErrorCode
from classbytes.index import ClassBytesSupplier, index_for
from classbytes.models.location import ClasspathLocation
from classbytes.naming import class_file_path_candidates_for, source_name_of

if TYPE_CHECKING:
    from classbytes.config import Settings
    from classbytes.index import LocationIndex

log = structlog.get_logger()


class ClassBytesRepository:
    """Access to class file bytes by source name over an ordered classpath."""

    def __init__(self, class_path: Iterable[str | os.PathLike[str]]) -> None:
        self._open_archives: dict[Path, zipfile.ZipFile] = {}
        self._closed = False
        self._locations = tuple(ClasspathLocation.classify(entry) for entry in class_path)
        self._indexes: list[LocationIndex] = [
            index_for(location, self._open_archive) for location in self._locations
        ]
        log.debug(
            "repository_created",
            locations=len(self._locations),
            kinds=[location.kind.value for location in self._locations],
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> ClassBytesRepository:
        return cls(settings.classpath)

    @property
    def locations(self) -> tuple[ClasspathLocation, ...]:
        return self._locations

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def class_bytes_for(self, source_name: str) -> bytes | None:
        """Class file bytes for *source_name*, or ``None`` if no location has it."""
        found = self._find(source_name)
        if found is None:
            log.debug("class_not_found", source_name=source_name)
            return None
        _, supplier = found
        return supplier()

    def class_file_path_for(self, source_name: str) -> str | None:
        """The class file path *source_name* resolves to, without reading it."""
        found = self._find(source_name)
        return found[0] if found is not None else None

    def all_classes_bytes_by_source_name(self) -> Iterator[tuple[str, ClassBytesSupplier]]:
        """Every class file on the classpath as ``(source_name, supplier)`` pairs.

        Lazy: locations are visited in classpath order and an archive is only
        opened once iteration reaches it. Two files may decode to the same
        source name (``a/B.class`` and ``a/BKt.class``); both are yielded.
        """
        for index in self._indexes:
            for class_file_path in index.class_file_paths():
                try:
                    supplier = self._supplier_for_file_path(class_file_path)
                except ClassBytesError as exc:
                    log.debug(
                        "class_entry_skipped",
                        class_file_path=class_file_path,
                        code=exc.code.value,
                        reason=exc.message,
                    )
                    continue
                if supplier is None:
                    log.debug("class_entry_skipped", class_file_path=class_file_path)
                    continue
                yield source_name_of(class_file_path), supplier

    def _find(self, source_name: str) -> tuple[str, ClassBytesSupplier] | None:
        for class_file_path in class_file_path_candidates_for(source_name):
            supplier = self._supplier_for_file_path(class_file_path)
            if supplier is not None:
                return class_file_path, supplier
        return None

    def _supplier_for_file_path(self, class_file_path: str) -> ClassBytesSupplier | None:
        for index in self._indexes:
            supplier = index.lookup(class_file_path)
            if supplier is not None:
                return supplier
        return None

    # ------------------------------------------------------------------
    # Archive handles
    # ------------------------------------------------------------------

    def _open_archive(self, archive_path: Path) -> zipfile.ZipFile:
        archive = self._open_archives.get(archive_path)
        if archive is not None:
            return archive
        if self._closed:
            raise ClassBytesError(
                ErrorCode.REPOSITORY_CLOSED,
                f"Repository is closed; cannot open {str(archive_path)!r}",
            )
        try:
            archive = zipfile.ZipFile(archive_path)
        except (OSError, zipfile.BadZipFile) as exc:
            raise ClassBytesError(
                ErrorCode.ARCHIVE_OPEN_FAILED,
                f"Failed to open archive {str(archive_path)!r}: {exc}",
            ) from exc
        self._open_archives[archive_path] = archive
        log.debug("archive_opened", path=str(archive_path))
        return archive

    def close(self) -> None:
        """Close every archive opened so far. Directories need no cleanup.

        Every archive gets its close attempt even if another one raises; a
        close failure is re-raised once all of them have been tried.
        """
        archives = list(self._open_archives.items())
        self._closed = True
        try:
            with ExitStack() as stack:
                for archive_path, archive in archives:
                    stack.callback(self._close_archive, archive_path, archive)
        finally:
            self._open_archives.clear()
        log.debug("repository_closed", archives_closed=len(archives))

    @staticmethod
    def _close_archive(archive_path: Path, archive: zipfile.ZipFile) -> None:
        archive.close()
        log.debug("archive_closed", path=str(archive_path))

    def __enter__(self) -> ClassBytesRepository:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def classpath_bytes_repository_for(
    jars_or_dirs: Iterable[str | os.PathLike[str]],
) -> ClassBytesRepository:
    """Repository over archives and directories, in the given order."""
    return ClassBytesRepository(jars_or_dirs)
