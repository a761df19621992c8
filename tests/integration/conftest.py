"""Integration test fixtures.

Provides a mixed classpath (jar, directory, missing entry, second jar) the way
a host tool would hand it over, plus a repository built from it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from classbytes.repository import ClassBytesRepository, classpath_bytes_repository_for

if TYPE_CHECKING:
    from pathlib import Path

    from tests.conftest import ClassFiles


@pytest.fixture()
def classpath(
    tmp_path: Path,
    make_jar: Callable[[str, ClassFiles], Path],
    make_class_dir: Callable[[str, ClassFiles], Path],
) -> list[Path]:
    api_jar = make_jar(
        "api.jar",
        {
            "META-INF/MANIFEST.MF": b"Manifest-Version: 1.0\n",
            "com/example/api/": b"",
            "com/example/api/Service.class": b"jar:Service",
            "com/example/api/Service$Config.class": b"jar:Service$Config",
            "com/example/api/ExtensionsKt.class": b"jar:ExtensionsKt",
        },
    )
    classes = make_class_dir(
        "classes",
        {
            "com/example/api/Service.class": b"dir:Service",
            "com/example/app/Main.class": b"dir:Main",
            "com/example/app/MainKt.class": b"dir:MainKt",
            "com/example/app/Main$Companion.class": b"dir:Main$Companion",
            "com/example/app/resources.properties": b"key=value\n",
        },
    )
    impl_jar = make_jar(
        "impl.jar",
        {"com/example/impl/ServiceImpl.class": b"jar:ServiceImpl"},
    )
    return [api_jar, classes, tmp_path / "not-built-yet", impl_jar]


@pytest.fixture()
def repository(classpath: list[Path]) -> ClassBytesRepository:
    with classpath_bytes_repository_for(classpath) as repo:
        yield repo
