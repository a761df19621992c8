"""Shared fixtures: builders for class directories and jars under tmp_path."""

from __future__ import annotations

import zipfile
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

ClassFiles = Mapping[str, bytes]


@pytest.fixture()
def make_class_dir(tmp_path: Path) -> Callable[[str, ClassFiles], Path]:
    """Create a directory under tmp_path holding the given class files."""

    def _make(name: str, files: ClassFiles) -> Path:
        root = tmp_path / name
        root.mkdir()
        for rel_path, content in files.items():
            target = root / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        return root

    return _make


@pytest.fixture()
def make_jar(tmp_path: Path) -> Callable[[str, ClassFiles], Path]:
    """Create a jar under tmp_path; entries are written in the given order."""

    def _make(name: str, entries: ClassFiles) -> Path:
        jar = tmp_path / name
        with zipfile.ZipFile(jar, "w", zipfile.ZIP_DEFLATED) as zf:
            for entry_name, content in entries.items():
                zf.writestr(entry_name, content)
        return jar

    return _make
