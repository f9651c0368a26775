"""Data models for versions and dependencies."""

from __future__ import annotations

from .dependency import (
    DEPENDENCY_TYPE_CLIENT,
    DEPENDENCY_TYPE_DOGU,
    DEPENDENCY_TYPE_PACKAGE,
    Dependency,
)
from .version import Version, sort_newest_first

__all__ = [
    "DEPENDENCY_TYPE_CLIENT",
    "DEPENDENCY_TYPE_DOGU",
    "DEPENDENCY_TYPE_PACKAGE",
    "Dependency",
    "Version",
    "sort_newest_first",
]
