"""
Version
Parsing and ordering of build-tool release version strings.

A version is a dot-separated run of integers (the release) followed by an
arbitrary suffix, e.g. ``7.1.0``, ``7.1.0rc2`` or ``8.0.0-pre.20240101.1``.
The empty string is a sentinel meaning "unspecified" and orders above every
concrete version.
"""

import functools
import re
from dataclasses import dataclass
from typing import Callable, Tuple

from bazel_version.errors import MalformedVersionError
from bazel_version.utils.logger import get_logger


# Release numbers are kept within a signed 32-bit int.
MAX_RELEASE_NUMBER = 2**31 - 1

# A dot right after a digit run always belongs to the release, so "1.", "1..2"
# and "1.2.x" fail on the empty token instead of turning into a suffix.
_PATTERN = re.compile(r"(?P<release>[0-9]+(?:\.[0-9]*)*)(?P<suffix>.*)")

_PRERELEASE_PREFIXES = ("-pre", "rc")


@dataclass(frozen=True)
class Version:
    """
    Immutable parsed version.

    Equality and hashing are structural over all three fields. Ordering
    (``<``, ``<=``, ``>``, ``>=``) follows :func:`compare`, which is coarser:
    ``1.0.0rc1`` and ``1.0.0-pre2`` are ordered equal but are not ``==``.
    """
    release: Tuple[int, ...] = ()
    suffix: str = ""
    original: str = ""

    def __post_init__(self):
        if not isinstance(self.release, tuple) or not all(
            type(n) is int and n >= 0 for n in self.release
        ):
            raise TypeError("release must be a tuple of non-negative ints")
        if not isinstance(self.suffix, str) or not isinstance(self.original, str):
            raise TypeError("suffix and original must be strings")
        if self.original == "":
            if self.release or self.suffix:
                raise ValueError("only the empty version may have an empty original")
        elif not self.release:
            raise ValueError(f"version {self.original!r} needs at least one release number")

    def is_empty(self) -> bool:
        """Whether this is the empty-string sentinel."""
        return self.original == ""

    def is_prerelease_or_candidate(self) -> bool:
        """Whether the suffix marks a prerelease (``-pre``) or candidate (``rc``)."""
        return bool(self.suffix) and self.suffix.startswith(_PRERELEASE_PREFIXES)

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) >= 0

    def __str__(self) -> str:
        return self.original


EMPTY_VERSION = Version(release=(), suffix="", original="")


def _reject(version: str, reason: str) -> MalformedVersionError:
    get_logger().debug(f"Rejected version {version!r}: {reason}")
    return MalformedVersionError(version, reason)


def parse(version: str) -> Version:
    """
    Parse a version string.

    The empty string yields :data:`EMPTY_VERSION`. Anything else must start
    with ``digits(.digits)*``; whatever follows becomes the suffix.

    Raises:
        MalformedVersionError: if the string cannot be decomposed.
        TypeError: if ``version`` is not a string.
    """
    if not isinstance(version, str):
        raise TypeError(f"version must be a string, not {type(version).__name__}")
    if version == "":
        return EMPTY_VERSION

    match = _PATTERN.fullmatch(version)
    if not match:
        raise _reject(version, "does not match pattern")

    release = []
    for token in match.group("release").split("."):
        try:
            number = int(token)
        except ValueError as e:
            raise _reject(version, "invalid release number") from e
        if number > MAX_RELEASE_NUMBER:
            raise _reject(version, "invalid release number")
        release.append(number)

    return Version(
        release=tuple(release),
        suffix=match.group("suffix") or "",
        original=version,
    )


def _sign(left, right) -> int:
    return (left > right) - (left < right)


def _compare_emptiness(a: Version, b: Version) -> int:
    # Non-empty first: the empty sentinel is the maximum.
    return _sign(a.is_empty(), b.is_empty())


def _compare_release(a: Version, b: Version) -> int:
    # Tuples compare lexicographically and a strict prefix sorts first.
    return _sign(a.release, b.release)


def _compare_prerelease(a: Version, b: Version) -> int:
    # Prereleases and candidates first. Different -pre/rc suffixes on the same
    # release tie; telling them apart needs numeric suffix comparison here.
    return _sign(not a.is_prerelease_or_candidate(), not b.is_prerelease_or_candidate())


_TIERS: Tuple[Callable[[Version, Version], int], ...] = (
    _compare_emptiness,
    _compare_release,
    _compare_prerelease,
)


def compare(a: Version, b: Version) -> int:
    """
    Total order over versions: negative if ``a`` sorts before ``b``, zero if
    they rank equal, positive otherwise.

    Tiers are checked in order and the first non-zero one decides:
    emptiness, release numbers, then the prerelease/candidate flag.
    """
    for tier in _TIERS:
        result = tier(a, b)
        if result:
            return result
    return 0


version_key = functools.cmp_to_key(compare)
