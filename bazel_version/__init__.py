"""
bazel-version
Parse and rank build-tool release version strings.
"""

__version__ = "0.1.0"
__package_name__ = "bazel-version"

from .errors import MalformedVersionError, VersionParseError
from .version import (
    EMPTY_VERSION,
    MAX_RELEASE_NUMBER,
    Version,
    compare,
    parse,
    version_key,
)
from .ranking import latest, satisfies_minimum, sort_versions

__all__ = [
    "Version",
    "EMPTY_VERSION",
    "MAX_RELEASE_NUMBER",
    "parse",
    "compare",
    "version_key",
    # Errors
    "VersionParseError",
    "MalformedVersionError",
    # Ranking
    "sort_versions",
    "latest",
    "satisfies_minimum",
]
