"""Assembly and writing of Typst documents."""

from pathlib import Path
from typing import Iterator, Optional

from nbtypst import OutputIOError
from nbtypst.config import CellSelection
from nbtypst.generation.cells import CellFormatter
from nbtypst.models import ConversionContext, Notebook
from nbtypst.output.template import DocumentTemplate


class DocumentAssembler:
    """Concatenate the preamble and the formatted cells of a notebook.

    Cells are emitted in notebook order. Which cells are included is decided
    by an explicit CellSelection; the default includes all of them.
    """

    def __init__(
        self,
        template: DocumentTemplate,
        formatter: Optional[CellFormatter] = None,
        selection: Optional[CellSelection] = None,
    ):
        """Initialize the assembler.

        Args:
            template: Document preamble
            formatter: Cell formatter (creates a default one if None)
            selection: Cells to include (all if None)
        """
        self.template = template
        self.formatter = formatter or CellFormatter()
        self.selection = selection or CellSelection()

    def iter_chunks(self, context: ConversionContext, notebook: Notebook) -> Iterator[str]:
        """Yield the preamble, then each selected cell's markup in order.

        Args:
            context: Conversion context
            notebook: Notebook to assemble

        Yields:
            str: Document chunks
        """
        yield self.template.render()
        for index in self.selection.indices(len(notebook.cells)):
            yield self.formatter.format_cell(context, notebook.cells[index], index=index)

    def assemble(self, context: ConversionContext, notebook: Notebook) -> str:
        """Assemble the complete document.

        Args:
            context: Conversion context
            notebook: Notebook to assemble

        Returns:
            str: Typst document text
        """
        return "".join(self.iter_chunks(context, notebook))


class TypstWriter:
    """Write assembled Typst documents to disk.

    The document is assembled completely in memory before the file is
    opened, so a conversion error never leaves a truncated file behind.
    """

    def write(
        self,
        assembler: DocumentAssembler,
        context: ConversionContext,
        notebook: Notebook,
        output_path: Path | str,
    ) -> Path:
        """Assemble a notebook and write it to a file.

        Args:
            assembler: Document assembler
            context: Conversion context
            notebook: Notebook to convert
            output_path: Output file path (truncated or created)

        Returns:
            Path: Path to written file

        Raises:
            OutputIOError: If the file cannot be written
        """
        output_path = Path(output_path)
        document = assembler.assemble(context, notebook)

        try:
            # Ensure parent directory exists
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(document)
        except OSError as e:
            raise OutputIOError(f"Failed to write {output_path}: {e}") from e

        return output_path
