# SPDX-License-Identifier: MIT
"""Semantic version value type, rendering and parsing.

A version renders as MAJOR.MINOR.PATCH with optional pre-release and build
metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1
- Build metadata: +build, +build.123, +20240101

Empty strings mean "absent" for both the pre-release and the build fields.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """A semantic version.

    Dataclass equality compares all five fields, so two versions that differ
    only in build metadata are not equal even though they share the same
    precedence. Use :func:`ordered_semver.compare.compare_versions` for
    ordering.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Dot-separated pre-release identifiers, "" if none
        build: Build metadata, "" if none
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    build: str = ""

    def __str__(self) -> str:
        """Return the full representation, MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]."""
        version = self.short()
        if self.build:
            version += f"+{self.build}"
        return version

    def short(self) -> str:
        """Return the version without build metadata."""
        version = self.core()
        if self.prerelease:
            version += f"-{self.prerelease}"
        return version

    def core(self) -> str:
        """Return MAJOR.MINOR.PATCH only."""
        return f"{self.major:d}.{self.minor:d}.{self.patch:d}"

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease != ""

    @property
    def is_zero(self) -> bool:
        """Return True for the zero version sentinel ``Version()``."""
        return is_zero(self)

    def equal(self, other: Version) -> bool:
        """Return True if every field, build metadata included, matches."""
        return content_equal(self, other)

    def without_build(self) -> Version:
        """Return a copy of this version with the build metadata removed."""
        return replace(self, build="")


def render_full(version: Version) -> str:
    return str(version)


def render_short(version: Version) -> str:
    return version.short()


def render_core(version: Version) -> str:
    return version.core()


def content_equal(v1: Version, v2: Version) -> bool:
    """Compare two versions field by field.

    Unlike precedence comparison, build metadata is significant here.
    """
    return (
        v1.major == v2.major
        and v1.minor == v2.minor
        and v1.patch == v2.patch
        and v1.prerelease == v2.prerelease
        and v1.build == v2.build
    )


def is_zero(version: Version) -> bool:
    """Return True if all fields hold their zero values."""
    return content_equal(version, Version())


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build='')

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease='alpha.1', build='')

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', build='build.456')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.match(version_string)
    if not match:
        raise InvalidVersionError(version_string)

    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=match.group("prerelease") or "",
        build=match.group("buildmetadata") or "",
    )


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.match(version_string.strip()) is not None
