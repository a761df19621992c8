"""Mapping between source names and class file paths.

A class file path such as ``a/b/Outer$Inner.class`` decodes to exactly one
source name (``a.b.Outer.Inner``). The reverse is ambiguous: a dotted source
name does not say which dots are package separators and which are nesting
boundaries, nor whether the compiler emitted a ``Kt`` file facade. Encoding
therefore produces every plausible path, most specific first.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

CLASS_FILE_PATH_SUFFIX = ".class"
FACADE_MARKER = "Kt"

_FACADE_SUFFIX = FACADE_MARKER + CLASS_FILE_PATH_SUFFIX
_SLASH_OR_DOLLAR = re.compile(r"[/$]")


def is_class_file_path(path: str) -> bool:
    return path.endswith(CLASS_FILE_PATH_SUFFIX)


def source_name_of(class_file_path: str) -> str:
    """Decode a class file path into its dotted source name.

    ``a/b/C.class``, ``a/b/CKt.class`` and ``a/b$C.class`` all decode to
    ``a.b.C``.
    """
    if class_file_path.endswith(_FACADE_SUFFIX):
        stem = class_file_path[: -len(_FACADE_SUFFIX)]
    else:
        stem = class_file_path[: -len(CLASS_FILE_PATH_SUFFIX)]
    return _SLASH_OR_DOLLAR.sub(".", stem)


def class_file_path_candidates_for(source_name: str) -> Iterator[str]:
    """Yield the class file paths *source_name* may be stored under.

    The order is the lookup priority: the name read as a plain package path
    first, then with the last segment moved one nesting level up at a time
    (``a/b$C``, ``a$b$C``). Every guess is followed by its ``Kt`` facade
    variant. The generator is restartable by calling the function again and
    cheap to abandon after the first hit.
    """
    path = source_name.replace(".", "/")
    while True:
        yield path + CLASS_FILE_PATH_SUFFIX
        yield path + _FACADE_SUFFIX
        head, sep, tail = path.rpartition("/")
        if not sep:
            return
        path = f"{head}${tail}"
