"""Dependency model for manifest entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import ConfigError

DEPENDENCY_TYPE_DOGU = "dogu"
DEPENDENCY_TYPE_CLIENT = "client"
DEPENDENCY_TYPE_PACKAGE = "package"

_VALID_TYPES = {DEPENDENCY_TYPE_DOGU, DEPENDENCY_TYPE_CLIENT, DEPENDENCY_TYPE_PACKAGE}


@dataclass(frozen=True)
class Dependency:
    """Describe a dependency towards another entity.

    ``version`` is a constraint such as ``">=4.1.1-2"``; an empty constraint
    accepts any installed version. A constraint no version can meet, like
    ``"<=0.0.0"``, prohibits the entity from being present.
    """

    name: str
    type: str = DEPENDENCY_TYPE_DOGU
    version: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Dependency name must be non-empty")
        if self.type not in _VALID_TYPES:
            raise ValueError(f"Invalid dependency type: {self.type}")

    def to_dict(self) -> dict[str, str]:
        return {
            "type": self.type,
            "name": self.name,
            "version": self.version,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], index: int) -> Dependency:
        """Create a Dependency from a manifest entry, validating its fields."""
        name = data.get("name")
        if not name or not isinstance(name, str):
            raise ConfigError(f"Dependency at index {index} is missing required 'name' field")

        dependency_type = data.get("type") or DEPENDENCY_TYPE_DOGU
        if dependency_type not in _VALID_TYPES:
            valid = ", ".join(sorted(_VALID_TYPES))
            raise ConfigError(
                f"Dependency '{name}' has invalid 'type' field (must be one of {valid})"
            )

        version = data.get("version", "")
        if not isinstance(version, str):
            raise ConfigError(f"Dependency '{name}' has invalid 'version' field (must be string)")

        return cls(name=name, type=dependency_type, version=version)
