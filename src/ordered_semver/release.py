# SPDX-License-Identifier: MIT
"""Version of the ordered-semver package itself."""

from __future__ import annotations

import functools
from dataclasses import replace

from . import __version__
from .semver import Version, parse_version
from .vcs import commit

RELEASE = parse_version(__version__)


@functools.lru_cache(maxsize=None)
def current() -> Version:
    """Return this package's version, with build provenance as metadata.

    Provenance is read once per process.
    """
    return replace(RELEASE, build=commit())
