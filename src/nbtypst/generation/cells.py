"""Formatting of notebook cells as Typst markup."""

from typing import Optional

from nbtypst import SourcePreconditionError
from nbtypst.generation.markdown import MarkdownTranslator, convert_markdown
from nbtypst.generation.outputs import select_output
from nbtypst.generation.typst import typst_string
from nbtypst.models import Cell, ConversionContext
from nbtypst.parsing.markdown import MarkdownParser

BADGE = (
    "#move(align(right, box(text([[{label}]], fill: blue), fill: red, "
    "inset: 0pt, height: 0pt)), dx: -25pt, dy: 10pt)"
)


class CodeCellFormatter:
    """Format a code cell: execution-count badge, source block, result block."""

    def format_code_cell(self, context: ConversionContext, cell: Cell) -> str:
        """Format a single code cell.

        Args:
            context: Conversion context (kernel language, formatting options)
            cell: Code cell to format

        Returns:
            str: Typst markup for the cell
        """
        label = "" if cell.execution_count is None else str(cell.execution_count)
        parts = [
            "",
            BADGE.format(label=label),
            f"#codeblock(lang: {typst_string(context.language)}, {self._source(context, cell)})",
        ]

        result = select_output(cell.outputs, strip=context.strip_ansi)
        if result:
            parts.append(
                f'#codeblock(lang: "text", bgcolor: bgcolor_result, {typst_string(result)})'
            )

        return "\n".join(parts)

    def _source(self, context: ConversionContext, cell: Cell) -> str:
        if context.backtick_policy == "escape":
            return typst_string(cell.source)
        return f"`{cell.source}`.text"


class CellFormatter:
    """Dispatch a notebook cell to markdown translation or code formatting.

    Markdown cells are translated to Typst, code cells are formatted with
    their selected output, and any other cell type yields an empty string.
    """

    def __init__(
        self,
        parser: Optional[MarkdownParser] = None,
        code_formatter: Optional[CodeCellFormatter] = None,
    ):
        """Initialize the cell formatter.

        Args:
            parser: Markdown parser for markdown cells
            code_formatter: Formatter for code cells
        """
        self.parser = parser or MarkdownParser()
        self.code_formatter = code_formatter or CodeCellFormatter()
        self.unsupported: list[str] = []

    def format_cell(self, context: ConversionContext, cell: Cell, index: int = 0) -> str:
        """Format one cell.

        Args:
            context: Conversion context
            cell: Cell to format
            index: Position of the cell in the notebook (for error messages)

        Returns:
            str: Typst markup, empty for cell types other than markdown and code

        Raises:
            MarkdownConversionError: If a markdown cell cannot be converted
            SourcePreconditionError: If a code cell contains a backtick and
                the backtick policy is ``reject``
        """
        if cell.cell_type == "markdown":
            translator = MarkdownTranslator(strict=context.strict_markdown)
            text = convert_markdown(cell.source, parser=self.parser, translator=translator)
            self.unsupported.extend(translator.unsupported)
            return text

        if cell.cell_type == "code":
            if context.backtick_policy == "reject" and "`" in cell.source:
                raise SourcePreconditionError(
                    f"Code cell {index} contains a backtick; backticks in code are "
                    f"not supported with backtick_policy 'reject' (use 'escape')"
                )
            return self.code_formatter.format_code_cell(context, cell)

        return ""
