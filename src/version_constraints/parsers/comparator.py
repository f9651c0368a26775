"""Version constraint parsing and evaluation.

Supported expressions:
- exact versions (e.g., "1.2.3", "=1.2.3", "==1.2.3")
- strict bounds ">1.2.3" and "<1.2.3"
- inclusive bounds ">=1.2.3" and "<=1.2.3"
- the empty string, which accepts every version
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..errors import InvalidOperatorError, UnsupportedOperatorError, VersionParseError
from ..models.version import OPERATOR_CHARS, Version

OPERATOR_EQUAL = "="
OPERATOR_EQUAL_DOUBLE = "=="
OPERATOR_LESS_THAN = "<"
OPERATOR_GREATER_THAN = ">"
OPERATOR_LESS_OR_EQUAL_THAN = "<="
OPERATOR_GREATER_OR_EQUAL_THAN = ">="

SUPPORTED_OPERATORS = frozenset(
    {
        OPERATOR_EQUAL,
        OPERATOR_EQUAL_DOUBLE,
        OPERATOR_LESS_THAN,
        OPERATOR_GREATER_THAN,
        OPERATOR_LESS_OR_EQUAL_THAN,
        OPERATOR_GREATER_OR_EQUAL_THAN,
    }
)

_MAX_OPERATOR_LENGTH = 2

log = logging.getLogger(__name__)


def parse_operator(raw: str, logger: logging.Logger | None = None) -> str:
    """Return the operator run at the start of ``raw``, or "" if there is none.

    Raises:
        InvalidOperatorError: If the run is longer than two characters.
    """
    logger = logger or log

    end = 0
    while end < len(raw) and raw[end] in OPERATOR_CHARS:
        end += 1
    op = raw[:end]

    if len(op) > _MAX_OPERATOR_LENGTH:
        err = InvalidOperatorError(
            f"dependency operator {op} of version {raw} cannot contain more than two characters. "
            "Allowed operators are =,==,>,<,>= and <="
        )
        logger.error("%s", err)
        raise err

    if not op:
        logger.debug("no dependency operator in %r could be found", raw)
    return op


@dataclass(frozen=True)
class VersionComparator:
    """Check whether versions fulfill a constraint such as ``>=1.2.3``."""

    version: Version = field(default_factory=Version)
    operator: str = ""

    @classmethod
    def parse(cls, raw: str, logger: logging.Logger | None = None) -> VersionComparator:
        return parse_version_comparator(raw, logger=logger)

    @property
    def is_unconstrained(self) -> bool:
        """True when the comparator accepts every version."""
        return self.operator == "" and self.version.raw == ""

    def allows(self, candidate: Version) -> bool:
        """Return whether ``candidate`` fulfills this constraint.

        Raises:
            UnsupportedOperatorError: If the operator is not one of the known
                ones. It is never mapped to a default relation.
        """
        op = self.operator
        bound = self.version
        if op in (OPERATOR_EQUAL, OPERATOR_EQUAL_DOUBLE):
            return bound.is_equal_to(candidate)
        if op == OPERATOR_GREATER_THAN:
            return bound.is_older_than(candidate)
        if op == OPERATOR_LESS_THAN:
            return bound.is_newer_than(candidate)
        if op == OPERATOR_GREATER_OR_EQUAL_THAN:
            return bound.is_older_or_equal_than(candidate)
        if op == OPERATOR_LESS_OR_EQUAL_THAN:
            return bound.is_newer_or_equal_than(candidate)
        if op == "":
            # no version given upstream: accept anything
            if bound.raw == "":
                return True
            return bound.is_equal_to(candidate)
        raise UnsupportedOperatorError(op)

    def __str__(self) -> str:
        return f"{self.operator}{self.version.raw}"


def parse_version_comparator(raw: str, logger: logging.Logger | None = None) -> VersionComparator:
    """Create a comparator by parsing a raw constraint string.

    Raises:
        InvalidOperatorError: If the operator prefix is malformed.
        VersionParseError: If the text after the operator is not a version.
    """
    try:
        op = parse_operator(raw, logger=logger)
    except InvalidOperatorError as exc:
        raise InvalidOperatorError(f"failed to parse operator: {exc}") from exc

    if raw == "":
        return VersionComparator()

    try:
        version = Version.parse(raw[len(op):])
    except VersionParseError as exc:
        raise VersionParseError(f"failed to parse version: {exc}") from exc

    return VersionComparator(version=version, operator=op)
