# SPDX-License-Identifier: MIT
"""Build provenance for the build-metadata field of a version.

``commit()`` summarizes where the running code came from as a short string:

- ``"a1b2c3d"`` for a clean checkout at revision a1b2c3d...
- ``"a1b2c3d-dirty"`` when the working tree has local modifications
- ``"*-dirty"`` when the tree is modified but the revision is unknown
- ``""`` when nothing is known

Revision and modification state come from environment variables (set by CI
or a release script) and otherwise from ``git`` in the configured directory.
"""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Length of Git's short revision format
SHORT_REVISION_LENGTH = 7

ENV_PREFIX = "ORDERED_SEMVER_VCS_"


class VcsError(Exception):
    """Raised when version control state cannot be read."""

    def __init__(self, message: str, command: Optional[list[str]] = None, returncode: Optional[int] = None):
        self.command = command
        self.returncode = returncode
        super().__init__(message)


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class VcsConfig:
    """Where to look for build provenance.

    Attributes:
        revision: Revision supplied by the environment, overrides git
        modified: Modification state supplied by the environment
        use_git: Query git when the environment does not say
        directory: Working directory for git, None for the process cwd
        timeout: Seconds to wait for each git command
    """

    revision: Optional[str] = None
    modified: Optional[bool] = None
    use_git: bool = True
    directory: Optional[Path] = None
    timeout: float = 5.0

    @classmethod
    def from_env(cls) -> "VcsConfig":
        """Create configuration from environment variables."""
        config = cls()

        if revision := os.getenv(f"{ENV_PREFIX}REVISION", "").strip():
            config.revision = revision
        config.modified = _env_flag(f"{ENV_PREFIX}MODIFIED")

        config.use_git = not _env_flag(f"{ENV_PREFIX}DISABLE_GIT")
        if directory := os.getenv(f"{ENV_PREFIX}DIRECTORY"):
            config.directory = Path(directory)
        if timeout := os.getenv(f"{ENV_PREFIX}TIMEOUT"):
            config.timeout = float(timeout)

        return config


@dataclass(frozen=True)
class BuildInfo:
    """Revision and working tree state of a build."""

    revision: str = ""
    modified: bool = False

    @property
    def short_revision(self) -> str:
        return self.revision[:SHORT_REVISION_LENGTH]

    def format(self) -> str:
        """Render the build provenance string."""
        if self.revision and self.modified:
            return f"{self.short_revision}-dirty"
        if self.revision:
            return self.short_revision
        if self.modified:
            return "*-dirty"
        return ""


def run_git(args: list[str], directory: Optional[Path] = None, timeout: float = 5.0) -> str:
    """Run a git command and return its stripped standard output.

    Raises:
        VcsError: If git is missing, times out, or exits with an error
    """
    cmd = ["git", *args]
    try:
        result = subprocess.run(
            cmd,
            cwd=directory,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError:
        raise VcsError("git executable not found", command=cmd) from None
    except subprocess.TimeoutExpired as e:
        raise VcsError(f"git timed out after {timeout}s", command=cmd) from e

    if result.returncode != 0:
        raise VcsError(
            f"{' '.join(cmd)} failed:\n{result.stderr.strip()}",
            command=cmd,
            returncode=result.returncode,
        )
    return result.stdout.strip()


def read_git(directory: Optional[Path] = None, timeout: float = 5.0) -> BuildInfo:
    """Read the current revision and modification state from git.

    A work tree without commits yet has no revision but can still be
    modified.

    Raises:
        VcsError: If the directory is not inside a git work tree
    """
    status = run_git(["status", "--porcelain"], directory, timeout)
    try:
        revision = run_git(["rev-parse", "--verify", "HEAD"], directory, timeout)
    except VcsError as e:
        logger.debug("No git revision available: %s", e)
        revision = ""
    return BuildInfo(revision=revision, modified=bool(status))


def read_build_info(config: Optional[VcsConfig] = None) -> BuildInfo:
    """Collect build provenance from the environment, then from git.

    Environment values win over git for each field they set.
    """
    if config is None:
        config = VcsConfig.from_env()

    revision = config.revision or ""
    modified = config.modified

    if config.use_git and (not revision or modified is None):
        try:
            info = read_git(config.directory, config.timeout)
        except VcsError as e:
            logger.debug("No git build info available: %s", e)
        else:
            revision = revision or info.revision
            if modified is None:
                modified = info.modified

    return BuildInfo(revision=revision, modified=bool(modified))


def commit(config: Optional[VcsConfig] = None) -> str:
    """Return the build provenance string, or "" if none is available."""
    info = read_build_info(config)
    logger.debug("Build info: revision=%r modified=%r", info.revision, info.modified)
    return info.format()
