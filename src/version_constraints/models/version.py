"""Version model built atop packaging.version.

Versions carry up to four dot separated numbers plus an optional extra number
divided by a hyphen, e.g. ``4.0.7.11-3`` => 4 major, 0 minor, 7 patch, 11 nano
and 3 extra. Missing parts count as zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable

from packaging.version import InvalidVersion
from packaging.version import Version as _PackagingVersion

from ..errors import VersionParseError

OPERATOR_CHARS = "=<>"

_ALLOWED_CHARS = frozenset("0123456789.-")
_MAX_RELEASE_PARTS = 4


def _parse_packaging_version(text: str) -> _PackagingVersion:
    if not text:
        raise VersionParseError("version must be non-empty")
    if not set(text) <= _ALLOWED_CHARS:
        raise VersionParseError(f"version {text} contains characters other than digits, '.' and '-'")
    if text.count("-") > 1:
        raise VersionParseError(f"found more than one hyphen in version {text}")
    try:
        return _PackagingVersion(text)
    except InvalidVersion as exc:
        raise VersionParseError(f"invalid version {text}: {exc}") from exc


@dataclass(frozen=True)
class Version:
    """Comparable version with the text it was parsed from."""

    raw: str = ""
    major: int = 0
    minor: int = 0
    patch: int = 0
    nano: int = 0
    extra: int = 0

    @classmethod
    def parse(cls, raw: str) -> Version:
        """Parse ``raw`` into a Version, ignoring a leading operator.

        Raises:
            VersionParseError: If the remaining text is not a valid version.
        """
        text = raw.lstrip(OPERATOR_CHARS)
        parsed = _parse_packaging_version(text)

        release = parsed.release
        if len(release) > _MAX_RELEASE_PARTS:
            raise VersionParseError(
                f"version {text} has more than {_MAX_RELEASE_PARTS} dot separated parts"
            )
        parts = list(release) + [0] * (_MAX_RELEASE_PARTS - len(release))
        return cls(
            raw=raw,
            major=parts[0],
            minor=parts[1],
            patch=parts[2],
            nano=parts[3],
            extra=parsed.post or 0,
        )

    @property
    def parts(self) -> tuple[int, int, int, int, int]:
        return (self.major, self.minor, self.patch, self.nano, self.extra)

    def _compare(self, other: Version) -> int:
        if self.parts > other.parts:
            return 1
        if self.parts < other.parts:
            return -1
        return 0

    def is_newer_than(self, other: Version) -> bool:
        return self._compare(other) > 0

    def is_older_than(self, other: Version) -> bool:
        return self._compare(other) < 0

    def is_equal_to(self, other: Version) -> bool:
        """Compare numerically; ``raw`` is ignored so ``1.0`` equals ``1.0.0``."""
        return self._compare(other) == 0

    def is_older_or_equal_than(self, other: Version) -> bool:
        return self._compare(other) <= 0

    def is_newer_or_equal_than(self, other: Version) -> bool:
        return self._compare(other) >= 0

    def __str__(self) -> str:
        if self.raw:
            return self.raw

        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.nano != 0 or self.extra != 0:
            text += f".{self.nano}"
        if self.extra != 0:
            text += f"-{self.extra}"
        return text


def sort_newest_first(versions: Iterable[Version]) -> list[Version]:
    """Return the versions ordered from newest to oldest."""
    return sorted(versions, key=lambda version: version.parts, reverse=True)
