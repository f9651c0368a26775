"""version-constraints core package.

Parses constraint expressions such as ``>=1.2.3`` and answers whether a
concrete version fulfills them.
"""

from .errors import (
    ConfigError,
    ConstraintError,
    InvalidOperatorError,
    UnsupportedOperatorError,
    VersionParseError,
)
from .models import Dependency, Version, sort_newest_first
from .parsers.comparator import (
    SUPPORTED_OPERATORS,
    VersionComparator,
    parse_operator,
    parse_version_comparator,
)

__all__ = [
    "ConfigError",
    "ConstraintError",
    "Dependency",
    "InvalidOperatorError",
    "SUPPORTED_OPERATORS",
    "UnsupportedOperatorError",
    "Version",
    "VersionComparator",
    "VersionParseError",
    "parse_operator",
    "parse_version_comparator",
    "sort_newest_first",
]
