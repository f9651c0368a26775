"""Loader for dependency manifests.

Reads a JSON manifest (default: dependencies.json) listing mandatory and
optional dependencies together with the versions currently installed. The
document is validated against ``schemas/manifest.schema.json`` before the
entries are turned into models.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any
from collections.abc import Iterable, Mapping

from jsonschema import Draft202012Validator

from .errors import ConfigError
from .models.dependency import Dependency

DEFAULT_MANIFEST_PATH = Path("dependencies.json")
MANIFEST_PATH_ENV_VAR = "VERSION_CONSTRAINTS_MANIFEST"
SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "manifest.schema.json"


@dataclass(frozen=True)
class Manifest:
    """Declared dependencies and the installed versions to check them against."""

    dependencies: tuple[Dependency, ...] = ()
    optional_dependencies: tuple[Dependency, ...] = ()
    installed: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only copy, later changes to the caller's dict do not leak in
        object.__setattr__(self, "installed", MappingProxyType(dict(self.installed)))

    def get_dependencies_of_type(self, dependency_type: str) -> list[Dependency]:
        return [dep for dep in self.dependencies if dep.type == dependency_type]

    def get_optional_dependencies_of_type(self, dependency_type: str) -> list[Dependency]:
        return [dep for dep in self.optional_dependencies if dep.type == dependency_type]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Manifest:
        installed = data.get("installed", {})
        if not isinstance(installed, dict):
            raise ConfigError("'installed' must be an object")
        return cls(
            dependencies=_parse_dependencies(data.get("dependencies", [])),
            optional_dependencies=_parse_dependencies(data.get("optionalDependencies", [])),
            installed={str(k): str(v) for k, v in installed.items()},
        )


def _parse_dependencies(entries: Iterable[Any]) -> tuple[Dependency, ...]:
    dependencies: list[Dependency] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigError(f"Dependency at index {index} must be an object")
        dependencies.append(Dependency.from_dict(entry, index))
    return tuple(dependencies)


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_manifest(document: Any, schema_path: Path = SCHEMA_PATH) -> None:
    """Validate a decoded manifest against the JSON schema.

    Raises:
        ConfigError: Listing every schema violation.
    """
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise ConfigError("Manifest failed validation:\n" + _format_errors(errors))


def _resolve_manifest_path(path: Path | str | None = None) -> Path:
    """Resolve the manifest path.

    Priority:
    1. Explicit path argument
    2. VERSION_CONSTRAINTS_MANIFEST environment variable
    3. dependencies.json in the working directory
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(MANIFEST_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return DEFAULT_MANIFEST_PATH


def load_manifest(path: Path | str | None = None) -> Manifest:
    """Load and validate a dependency manifest.

    Args:
        path: Optional path to the manifest. If not provided, uses the
            VERSION_CONSTRAINTS_MANIFEST env var or falls back to dependencies.json.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    manifest_path = _resolve_manifest_path(path)

    if not manifest_path.exists():
        raise ConfigError(f"Manifest file not found: {manifest_path}")

    try:
        content = manifest_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read manifest file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in manifest file: {exc}") from exc

    validate_manifest(data)
    return Manifest.from_dict(data)
