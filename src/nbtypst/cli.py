"""Command-line interface for nbtypst."""

import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from nbtypst import ConfigurationError, NbTypstError, __version__
from nbtypst.config import get_config, parse_cell_selection
from nbtypst.generation.cells import CellFormatter
from nbtypst.models import ConversionContext
from nbtypst.output.template import DocumentTemplate
from nbtypst.output.writer import DocumentAssembler, TypstWriter
from nbtypst.parsing.notebook import NotebookParser
from nbtypst.preview.terminal import NotebookOverview

# Diagnostics go to stderr so that stdout can carry the document
console = Console(stderr=True)


@click.command()
@click.version_option(version=__version__)
@click.argument("notebook", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path), required=False)
@click.option("--verbose", "-v", is_flag=True, help="Print a notebook overview to stderr")
@click.option(
    "--cells",
    "-c",
    type=str,
    default=None,
    help="Cells to include, e.g. '0,1,-1' or '0:12,-1' (default: all)",
)
@click.option(
    "--backtick-policy",
    type=click.Choice(["reject", "escape"]),
    default=None,
    help="Reject code cells containing backticks, or escape them (default: reject)",
)
@click.option("--no-strip-ansi", is_flag=True, help="Keep terminal escape sequences in outputs")
@click.option(
    "--allow-unexecuted",
    is_flag=True,
    help="Accept code cells that were never executed",
)
@click.option(
    "--strict-markdown",
    is_flag=True,
    help="Fail on markdown that has no Typst translation",
)
def main(
    notebook: Path,
    output: Optional[Path],
    verbose: bool,
    cells: Optional[str],
    backtick_policy: Optional[str],
    no_strip_ansi: bool,
    allow_unexecuted: bool,
    strict_markdown: bool,
):
    """Convert a Jupyter notebook into Typst source code.

    NOTEBOOK: Path to the .ipynb file to convert

    OUTPUT: Path of the .typ file to write (default: print to stdout)
    """
    try:
        try:
            config = get_config()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        verbose = verbose or config.verbose
        allow_unexecuted = allow_unexecuted or config.allow_unexecuted
        selection = parse_cell_selection(cells if cells is not None else config.cells)

        parser = NotebookParser(allow_unexecuted=allow_unexecuted)
        parsed_notebook = parser.parse(notebook)

        context = ConversionContext(
            language=parsed_notebook.language,
            verbose=verbose,
            strip_ansi=config.strip_ansi and not no_strip_ansi,
            backtick_policy=backtick_policy or config.backtick_policy,
            allow_unexecuted=allow_unexecuted,
            strict_markdown=strict_markdown or config.strict_markdown,
        )

        overview = NotebookOverview(console=console)
        if verbose:
            overview.show(parsed_notebook)

        template = DocumentTemplate(
            input_notebook=notebook.name,
            code_background=config.code_background,
            result_background=config.result_background,
        )
        formatter = CellFormatter()
        assembler = DocumentAssembler(template, formatter=formatter, selection=selection)

        if output:
            written = TypstWriter().write(assembler, context, parsed_notebook, output)
        else:
            click.echo(assembler.assemble(context, parsed_notebook), nl=False)

        if verbose:
            overview.show_unsupported(formatter.unsupported)
            if output:
                console.print(f"[green]✓[/green] Wrote [yellow]{escape(str(written))}[/yellow]")

    except NbTypstError as e:
        cause = f"\n[dim]Caused by: {escape(str(e.__cause__))}[/dim]" if e.__cause__ else ""
        console.print(
            Panel.fit(
                f"[red]Error ({e.kind}):[/red] {escape(str(e))}{cause}",
                border_style="red",
                title="[bold red]Conversion Failed[/bold red]",
            )
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
