"""Lookup of compiled class file bytes by source name across a classpath."""

from __future__ import annotations

from classbytes.errors import ClassBytesError, ErrorCode
from classbytes.index import ClassBytesSupplier
from classbytes.naming import class_file_path_candidates_for, source_name_of
from classbytes.repository import ClassBytesRepository, classpath_bytes_repository_for

__all__ = [
    "ClassBytesError",
    "ClassBytesRepository",
    "ClassBytesSupplier",
    "ErrorCode",
    "class_file_path_candidates_for",
    "classpath_bytes_repository_for",
    "source_name_of",
]
