# SPDX-License-Identifier: MIT
"""Semantic version values and SemVer 2.0.0 precedence ordering.

Example:
    >>> from ordered_semver import Version, compare_versions, sort_versions
    >>>
    >>> version = Version(1, 0, 0, "beta", "0002")
    >>> str(version)
    '1.0.0-beta+0002'
    >>> version.short()
    '1.0.0-beta'
    >>>
    >>> compare_versions(Version(1, 0, 0), Version(1, 0, 0, "alpha"))
    1
    >>> [str(v) for v in sort_versions([Version(1, 0, 0), Version(0, 9, 0)])]
    ['0.9.0', '1.0.0']
"""

__version__ = "0.3.0"

from .semver import (
    Version,
    render_full,
    render_short,
    render_core,
    content_equal,
    is_zero,
    parse_version,
    is_valid_semver,
    InvalidVersionError,
    SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    less,
    try_parse_integer,
    version_key,
    sort_versions,
)
from .ordering import SortableSequence, VersionOrdering
from .vcs import BuildInfo, VcsConfig, VcsError, commit
from .release import current

__all__ = [
    # Version values
    "Version",
    "render_full",
    "render_short",
    "render_core",
    "content_equal",
    "is_zero",
    # Parsing
    "parse_version",
    "is_valid_semver",
    "InvalidVersionError",
    "SEMVER_PATTERN",
    # Precedence
    "compare_versions",
    "less",
    "try_parse_integer",
    "version_key",
    "sort_versions",
    "SortableSequence",
    "VersionOrdering",
    # Build provenance
    "BuildInfo",
    "VcsConfig",
    "VcsError",
    "commit",
    "current",
]
