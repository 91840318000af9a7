"""
Ranking helpers built on the version order.

Inputs may be version strings or already-parsed :class:`Version` values.
"""

from typing import Iterable, List, Union

from bazel_version.version import Version, compare, parse, version_key


VersionLike = Union[str, Version]


def as_version(value: VersionLike) -> Version:
    """Return ``value`` parsed, or unchanged if it already is a Version."""
    if isinstance(value, Version):
        return value
    return parse(value)


def sort_versions(values: Iterable[VersionLike]) -> List[Version]:
    """Sort ascending; versions that rank equal keep their input order."""
    return sorted((as_version(v) for v in values), key=version_key)


def latest(values: Iterable[VersionLike]) -> Version:
    """
    Return the highest version.

    On ties the first one seen wins. The empty version, if present, is
    always the result.

    Raises:
        ValueError: if ``values`` is empty.
    """
    versions = [as_version(v) for v in values]
    if not versions:
        raise ValueError("latest() requires at least one version")
    best = versions[0]
    for candidate in versions[1:]:
        if compare(candidate, best) > 0:
            best = candidate
    return best


def satisfies_minimum(version: VersionLike, minimum: VersionLike) -> bool:
    """
    Check a lower-bound constraint.

    An empty ``version`` (unspecified) satisfies any minimum.
    """
    return compare(as_version(version), as_version(minimum)) >= 0
