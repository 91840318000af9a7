"""
Errors
Exceptions raised while parsing version strings.
"""


class VersionParseError(ValueError):
    """Base error for version strings that cannot be parsed."""


class MalformedVersionError(VersionParseError):
    """
    The input does not look like ``digits(.digits)*`` followed by a suffix.

    Raised for grammar mismatches as well as for release numbers that are
    not valid integers or do not fit the supported range.
    """

    def __init__(self, version: str, reason: str = "does not match pattern"):
        self.version = version
        self.reason = reason
        super().__init__(f"bad version ({reason}): {version}")
