"""CLI entry point for license-resolver."""

from __future__ import annotations

import asyncio
import sys

import click
from rich.console import Console
from rich.markup import escape

from license_resolver import __version__
from license_resolver.config import ResolverConfig, apply_credentials, load_config
from license_resolver.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_UNRESOLVED
from license_resolver.exceptions import LicenseResolverError
from license_resolver.models.result import ResolutionResult
from license_resolver.output.json_output import JsonFormatter
from license_resolver.output.terminal import TerminalFormatter
from license_resolver.resolution import resolve_license_urls

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """GitHub License Resolver - Identify licenses from LICENSE file URLs.

    Looks up the license of GitHub repositories whose LICENSE file URL
    is given, using the GitHub license API.

    \b
    Examples:
        license-resolver resolve https://github.com/owner/repo/blob/master/LICENSE
        license-resolver resolve --format json URL [URL ...]
    """
    pass


@main.command()
@click.argument("urls", nargs=-1, required=True)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for results (default: terminal).",
)
@click.option(
    "--github-username",
    envvar="GITHUB_USERNAME",
    default=None,
    help="GitHub username for authenticated API requests. "
    "Requires --github-token (or GITHUB_TOKEN).",
)
@click.option(
    "--github-token",
    envvar="GITHUB_TOKEN",
    default=None,
    help="GitHub personal access token for authenticated API requests. "
    "Requires --github-username (or GITHUB_USERNAME).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Suppress progress output.",
)
def resolve(
    urls: tuple[str, ...],
    output_format: str,
    github_username: str | None,
    github_token: str | None,
    config_path: str | None,
    quiet_flag: bool,
) -> None:
    """Resolve licenses for GitHub LICENSE file URLs.

    Supports github.com blob URLs and raw.githubusercontent.com URLs
    for LICENSE, LICENSE.md and LICENSE.txt on the master branch.

    \b
    Exit codes:
        0  every URL resolved to a license
        1  one or more URLs had no license on record
        2  error (configuration, credentials, rate limit)
    """
    format_value = output_format.lower()
    try:
        config = apply_credentials(
            load_config(config_path), github_username, github_token
        )
        show_progress = format_value == "terminal" and not quiet_flag
        results = _run_resolution(list(urls), config, show_progress)
        _display_results(results, format_value)

        if any(result.is_error for result in results):
            sys.exit(EXIT_ERROR)
        if not all(result.found for result in results):
            sys.exit(EXIT_UNRESOLVED)
        sys.exit(EXIT_SUCCESS)

    except LicenseResolverError as e:
        _display_error(e, format_value)
        sys.exit(EXIT_ERROR)


def _run_resolution(
    urls: list[str], config: ResolverConfig, show_progress: bool
) -> list[ResolutionResult]:
    """Execute the resolution of all URLs."""
    return asyncio.run(
        resolve_license_urls(
            urls,
            config,
            console=_console if show_progress else None,
            show_progress=show_progress,
            error_console=_error_console,
        )
    )


def _display_results(results: list[ResolutionResult], format_type: str) -> None:
    """Display resolution results in the specified format.

    Args:
        results: The resolution results to display.
        format_type: Output format (terminal, json).
    """
    if format_type == "json":
        click.echo(JsonFormatter().format_results(results))
    else:
        TerminalFormatter(console=_console).format_results(results)


def _display_error(error: LicenseResolverError, format_type: str) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    message = f"Error: {type(error).__name__}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{escape(message)}[/red bold]")
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
