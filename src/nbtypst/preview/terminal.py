"""Terminal overview of a notebook using Rich."""

from collections import Counter
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from nbtypst.models import Notebook


class NotebookOverview:
    """Print diagnostic information about a notebook being converted."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the overview.

        Args:
            console: Rich console to use (creates a stderr console if None)
        """
        self.console = console or Console(stderr=True)

    def show(self, notebook: Notebook) -> None:
        """Show keys, format version, and kernel language of a notebook.

        Args:
            notebook: Parsed notebook
        """
        keys = escape(", ".join(notebook.top_level_keys))
        self.console.print(
            Panel.fit(
                f"Notebook with keys [cyan]{keys}[/cyan]\n"
                f"Version: [bold]{notebook.version}[/bold]\n"
                f"[green]=> Well-formed![/green]\n"
                f"Language: [yellow]{escape(notebook.language)}[/yellow]",
                border_style="cyan",
                title="[bold]Notebook[/bold]",
            )
        )

        counts = Counter(cell.cell_type for cell in notebook.cells)
        table = Table(title="Cells", show_header=True, header_style="bold cyan")
        table.add_column("Type")
        table.add_column("Count", justify="right")
        for cell_type, count in sorted(counts.items()):
            table.add_row(cell_type, str(count))
        self.console.print(table)

    def show_unsupported(self, kinds: list[str]) -> None:
        """Report markdown node kinds that produced no output.

        Args:
            kinds: Node kind names, one entry per occurrence
        """
        if not kinds:
            return
        counts = Counter(kinds)
        listing = ", ".join(f"{kind} ({count})" for kind, count in sorted(counts.items()))
        self.console.print(
            f"[yellow]Warning:[/yellow] markdown without Typst translation was skipped: {listing}"
        )
