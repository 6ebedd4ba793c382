# SPDX-License-Identifier: MIT
"""CLI entry point for the ordered-semver command."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from . import __version__
from .compare import compare_versions, sort_versions
from .release import current
from .semver import InvalidVersionError, Version, is_valid_semver, parse_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def _parse_or_exit(text: str) -> Version:
    try:
        return parse_version(text)
    except InvalidVersionError as e:
        echo_error(e.message)
        sys.exit(1)


@click.group()
@click.version_option(__version__)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Semantic version ordering tool.

    Compare, sort, render and validate SemVer 2.0.0 versions.

    \b
    Examples:
        ordered-semver compare 1.0.0-alpha 1.0.0
        ordered-semver sort 1.0.0 1.0.0-rc.1 0.9.0
        ordered-semver render 1.0.0-beta+0002 --form short
        ordered-semver validate 1.0.0 1.0
    """
    ctx.verbose = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 has lower, equal or higher precedence."""
    v1 = _parse_or_exit(version1)
    v2 = _parse_or_exit(version2)
    echo_info(str(compare_versions(v1, v2)))


@cli.command("sort")
@click.argument("versions", nargs=-1)
@click.option("--reverse", "-r", is_flag=True, help="Highest precedence first.")
def sort_command(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in precedence order.

    With no arguments, versions are read from standard input, one per line.
    """
    if not versions:
        stdin = click.get_text_stream("stdin")
        versions = tuple(line.strip() for line in stdin if line.strip())

    parsed = [_parse_or_exit(text) for text in versions]
    for version in sort_versions(parsed, reverse=reverse):
        echo_info(str(version))


@cli.command()
@click.argument("version")
@click.option(
    "--form",
    "-f",
    type=click.Choice(["full", "short", "core"]),
    default="full",
    show_default=True,
    help="Which parts of the version to print.",
)
def render(version: str, form: str) -> None:
    """Print VERSION in canonical form."""
    v = _parse_or_exit(version)
    if form == "short":
        echo_info(v.short())
    elif form == "core":
        echo_info(v.core())
    else:
        echo_info(str(v))


@cli.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that each of VERSIONS follows semantic versioning."""
    invalid = [text for text in versions if not is_valid_semver(text)]

    for text in versions:
        if text in invalid:
            echo_error(f"'{text}' is not a valid semantic version")
        elif ctx.verbose:
            echo_info(f"'{text}' is valid")

    if invalid:
        sys.exit(1)
    echo_success("Validation passed")


@cli.command("current")
def current_command() -> None:
    """Print the version of this tool, with build metadata."""
    echo_info(str(current()))


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the CLI."""
    try:
        cli(argv)
    except InvalidVersionError as e:
        echo_error(e.message)
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
