# SPDX-License-Identifier: MIT
"""Adapter exposing a list of versions to in-place sort routines.

Routines that sort by index (insertion sort, heap sort, and so on) only need
a length, a "should sort before" test and a swap. ``VersionOrdering`` provides
exactly those over any mutable sequence of versions; it adds no state and no
ordering logic of its own.
"""

from __future__ import annotations

from typing import MutableSequence, Protocol

from .compare import less
from .semver import Version


class SortableSequence(Protocol):
    """Operations an index-based in-place sort needs."""

    def __len__(self) -> int: ...

    def less(self, i: int, j: int) -> bool: ...

    def swap(self, i: int, j: int) -> None: ...


class VersionOrdering:
    """Sort view over a mutable sequence of versions.

    Example:
        >>> versions = [Version(1, 0, 0, "beta"), Version(1, 0, 0)]
        >>> ordering = VersionOrdering(versions)
        >>> ordering.less(0, 1)
        True
        >>> ordering.swap(0, 1)
        >>> versions[0]
        Version(major=1, minor=0, patch=0, prerelease='', build='')
    """

    __slots__ = ("versions",)

    def __init__(self, versions: MutableSequence[Version]) -> None:
        self.versions = versions

    def __len__(self) -> int:
        return len(self.versions)

    def less(self, i: int, j: int) -> bool:
        """Report whether the version at index i sorts before the one at j."""
        return less(self.versions[i], self.versions[j])

    def swap(self, i: int, j: int) -> None:
        self.versions[i], self.versions[j] = self.versions[j], self.versions[i]
