"""Unit-specific fixtures (filesystem I/O confined to tmp_path)."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from classbytes.models.location import ClasspathLocation

if TYPE_CHECKING:
    from pathlib import Path

    from tests.conftest import ClassFiles


@pytest.fixture()
def class_dir_location(
    make_class_dir: Callable[[str, ClassFiles], Path],
) -> ClasspathLocation:
    root = make_class_dir(
        "classes",
        {
            "a/B.class": b"B",
            "a/BKt.class": b"BKt",
            "a/C$D.class": b"C$D",
            "a/README.txt": b"not a class",
        },
    )
    return ClasspathLocation.classify(root)


@pytest.fixture()
def jar_location(make_jar: Callable[[str, ClassFiles], Path]) -> ClasspathLocation:
    jar = make_jar(
        "lib.jar",
        {
            "META-INF/MANIFEST.MF": b"Manifest-Version: 1.0\n",
            "x/Y.class": b"Y",
            "x/": b"",
            "x/Y$Z.class": b"Y$Z",
        },
    )
    return ClasspathLocation.classify(jar)
