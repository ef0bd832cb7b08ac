"""Markdown parsing into a syntax tree."""

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from nbtypst import MarkdownConversionError


class MarkdownParser:
    """Parse markdown source into a markdown-it syntax tree.

    Uses the CommonMark preset, with raw HTML disabled so that inline tags
    come through as text.
    """

    def __init__(self, preset: str = "commonmark"):
        self.md = MarkdownIt(preset, {"html": False})

    def parse(self, source: str) -> SyntaxTreeNode:
        """Parse markdown source.

        Args:
            source: Markdown text of one cell

        Returns:
            SyntaxTreeNode: Root node of the syntax tree

        Raises:
            MarkdownConversionError: If the source cannot be parsed
        """
        try:
            return SyntaxTreeNode(self.md.parse(source))
        except Exception as e:
            raise MarkdownConversionError(f"Failed to parse markdown: {e}") from e
