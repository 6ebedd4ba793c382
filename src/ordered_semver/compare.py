# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0 section 11.

Pre-release versions sort below the release they precede, and pre-release
identifiers are compared one at a time: numbers numerically, everything else
in ASCII order, numbers below non-numbers. Build metadata is ignored.
"""

from __future__ import annotations

import functools
import re
from typing import Iterable, Optional, Union

from .semver import Version, parse_version

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)


def try_parse_integer(identifier: str) -> Optional[int]:
    """Return the integer value of a pre-release identifier, or None.

    Accepts an optional sign followed by ASCII digits. Leading zeros are
    allowed; a strict parser rejects them but comparison must stay total.
    """
    if _INTEGER.fullmatch(identifier) is None:
        return None
    return int(identifier)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _compare_prerelease(pre1: str, pre2: str) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        n1 = try_parse_integer(p1)
        n2 = try_parse_integer(p2)

        if n1 is not None and n2 is not None:
            result = _cmp(n1, n2)
        elif n1 is not None:
            # Numeric < alphanumeric, whatever the text
            return -1
        elif n2 is not None:
            return 1
        else:
            result = _cmp(p1, p2)
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _cmp(len(parts1), len(parts2))


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have the same precedence
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Note:
        Build metadata is ignored, so a result of 0 does not mean the two
        versions are equal. Use ``content_equal`` for that.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+a", "1.0.0+b")
        0
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    for attr in ("major", "minor", "patch"):
        result = _cmp(getattr(v1, attr), getattr(v2, attr))
        if result:
            return result

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def less(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    """Return True if version1 has lower precedence than version2."""
    return compare_versions(version1, version2) < 0


_precedence_key = functools.cmp_to_key(compare_versions)


def version_key(version: Union[str, Version]):
    """Return a sort key for a version, suitable for sorting.

    The key orders by precedence through :func:`compare_versions`.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _precedence_key(version)


def sort_versions(versions: Iterable[Union[str, Version]], reverse: bool = False) -> list:
    """Return the versions sorted by precedence.

    The sort is stable, so versions of equal precedence (for example, ones
    differing only in build metadata) keep their input order.
    """
    return sorted(versions, key=version_key, reverse=reverse)
