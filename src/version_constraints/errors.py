"""Exception types raised while parsing and evaluating version constraints."""

from __future__ import annotations


class ConstraintError(ValueError):
    """Base error for failures while parsing or evaluating a constraint."""


class InvalidOperatorError(ConstraintError):
    """Raised when a constraint starts with a malformed operator."""


class VersionParseError(ConstraintError):
    """Raised when a version string cannot be parsed."""


class UnsupportedOperatorError(ConstraintError):
    """Raised when a comparator holds an operator it cannot evaluate."""

    def __init__(self, operator: str) -> None:
        super().__init__(f"could not find suitable comparator for '{operator}' operator")
        self.operator = operator


class ConfigError(RuntimeError):
    """Raised when the dependency manifest cannot be loaded or is invalid."""
