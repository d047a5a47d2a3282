"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from license_resolver.models.result import ResolutionResult, ResolutionStatus

# Rich markup per resolution status
STATUS_STYLES: dict[ResolutionStatus, str] = {
    ResolutionStatus.FOUND: "[green]found[/green]",
    ResolutionStatus.NOT_APPLICABLE: "[yellow]no answer[/yellow]",
    ResolutionStatus.INVALID_CREDENTIALS: "[red]invalid credentials[/red]",
    ResolutionStatus.RATE_LIMITED: "[red]rate limited[/red]",
}


class TerminalFormatter:
    """Format resolution results for terminal display using Rich."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
        """
        self._console = console if console is not None else Console()

    def format_results(self, results: list[ResolutionResult]) -> None:
        """Format and display resolution results as a Rich table.

        Args:
            results: The resolution results to display.
        """
        if not results:
            self._console.print("[yellow]No license URLs given[/yellow]")
            return

        table = Table(title="License Resolution Results")

        table.add_column("URL", style="cyan", overflow="fold")
        table.add_column("SPDX ID", style="green")
        table.add_column("Name", style="magenta")
        table.add_column("Status")

        for result in results:
            license_id = "[yellow]Unknown[/yellow]"
            license_name = ""
            if result.license is not None:
                license_id = escape(result.license.id or "Unknown")
                license_name = escape(result.license.name or "")
            table.add_row(
                escape(result.url or ""),
                license_id,
                license_name,
                STATUS_STYLES[result.status],
            )

        self._console.print(table)

        found = sum(1 for result in results if result.found)
        self._console.print(f"\n[bold]Resolved:[/bold] {found} of {len(results)}")
        for result in results:
            if result.error:
                self._console.print(
                    f"[red]{escape(result.url or '')}: {escape(result.error)}[/red]"
                )
