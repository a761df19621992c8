from __future__ import annotations

from classbytes.models.location import ClasspathLocation, LocationKind

__all__ = [
    "ClasspathLocation",
    "LocationKind",
]
