"""Check declared dependencies against installed versions.

Each dependency is evaluated on its own: the installed version either fulfills
its constraint or it does not. No version is ever searched for or selected.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .config import Manifest
from .errors import ConstraintError, UnsupportedOperatorError, VersionParseError
from .models.dependency import DEPENDENCY_TYPE_DOGU, Dependency
from .models.version import Version
from .parsers.comparator import parse_version_comparator
from .report import aggregate

log = logging.getLogger(__name__)


def check_dependency(
    dependency: Dependency,
    installed: str | None,
    optional: bool = False,
    logger: logging.Logger | None = None,
) -> str | None:
    """Return None when ``installed`` fulfills ``dependency``, else the problem.

    ``installed`` is None when the entity is not present at all; that is only a
    problem for mandatory dependencies.
    """
    logger = logger or log
    logger.debug("checking %s dependency %s:%s", dependency.type, dependency.name, dependency.version)

    if installed is None:
        if optional:
            return None
        return f"dependency {dependency.name} seems not to be installed"

    # the version field is optional, any installed version will do
    if dependency.version == "":
        return None

    try:
        installed_version = Version.parse(installed)
    except VersionParseError as exc:
        return f"failed to parse version of dependency {dependency.name}: {exc}"

    try:
        comparator = parse_version_comparator(dependency.version, logger=logger)
    except ConstraintError as exc:
        return (
            f"failed to parse constraint {dependency.version} "
            f"for dependency {dependency.name}: {exc}"
        )

    try:
        allowed = comparator.allows(installed_version)
    except UnsupportedOperatorError as exc:
        return f"an error occurred when comparing the versions: {exc}"

    if not allowed:
        return (
            f"{installed} does not fulfill version requirement of {dependency.version} "
            f"{dependency.type} {dependency.name}"
        )
    return None


def _check_all(
    dependencies: Iterable[Dependency],
    installed: Mapping[str, str],
    optional: bool,
    logger: logging.Logger,
) -> list[dict[str, Any]]:
    results: list[dict[str, Any]] = []
    for dependency in dependencies:
        installed_version = installed.get(dependency.name)
        problem = check_dependency(dependency, installed_version, optional=optional, logger=logger)
        results.append(
            {
                **dependency.to_dict(),
                "optional": optional,
                "installed": installed_version,
                "ok": problem is None,
                "problem": problem,
            }
        )
    return results


def check_manifest(
    manifest: Manifest,
    dependency_type: str = DEPENDENCY_TYPE_DOGU,
    logger: logging.Logger | None = None,
) -> dict[str, Any]:
    """Check the manifest's dependencies of one type and return a report dict.

    Only ``dependency_type`` entries are looked up in ``installed``; client and
    package dependencies are left to whatever processes or provides them.
    Mandatory dependencies come first, then optional ones, each in manifest order.
    """
    logger = logger or log
    mandatory = manifest.get_dependencies_of_type(dependency_type)
    optional = manifest.get_optional_dependencies_of_type(dependency_type)
    results = _check_all(mandatory, manifest.installed, False, logger)
    results += _check_all(optional, manifest.installed, True, logger)

    report = aggregate(results)
    if report["hasFindings"]:
        logger.warning("%d dependency problem(s) found", report["totals"]["findings"])
    return report
