"""Path separator normalisation for directory-relative class file paths."""

from __future__ import annotations

import os


def normalise_file_separators(path: str) -> str:
    """Return *path* with the host separator replaced by ``/``."""
    if os.sep == "/":
        return path
    return path.replace(os.sep, "/")
