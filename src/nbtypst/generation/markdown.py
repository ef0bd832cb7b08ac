"""Markdown to Typst translation."""

from typing import Callable, Optional

from markdown_it.tree import SyntaxTreeNode

from nbtypst import MarkdownConversionError
from nbtypst.generation.typst import raw_fence
from nbtypst.parsing.markdown import MarkdownParser

HEADING_MARKER = "="


class MarkdownTranslator:
    """Translate a markdown syntax tree into Typst markup.

    Every node kind is dispatched through ``handlers``. Kinds without a
    handler go through ``unsupported``, which emits nothing and records the
    kind in ``self.unsupported`` (or raises in strict mode), so a construct
    is never dropped without a trace.

    Handled kinds:
        root, inline: children concatenated with no separator
        heading: ``=`` repeated depth times, a space, children, blank line
        paragraph: children, newline
        text: literal value
        softbreak: newline
        code_inline: value between single backticks
        fence, code_block: fenced raw block with the language tag
    """

    def __init__(self, strict: bool = False):
        """Initialize the translator.

        Args:
            strict: Raise MarkdownConversionError on unsupported node kinds
        """
        self.strict = strict
        self.unsupported: list[str] = []
        self.handlers: dict[str, Callable[[SyntaxTreeNode], str]] = {
            "root": self._children,
            "inline": self._children,
            "heading": self._heading,
            "paragraph": self._paragraph,
            "text": self._text,
            "softbreak": self._softbreak,
            "code_inline": self._code_inline,
            "fence": self._code,
            "code_block": self._code,
        }

    def translate(self, node: SyntaxTreeNode) -> str:
        """Translate a node and its descendants.

        Args:
            node: Node of a markdown-it syntax tree

        Returns:
            str: Typst markup

        Raises:
            MarkdownConversionError: In strict mode, on an unsupported node kind
        """
        handler = self.handlers.get(node.type, self._unsupported)
        return handler(node)

    def _children(self, node: SyntaxTreeNode) -> str:
        return "".join(self.translate(child) for child in node.children)

    def _heading(self, node: SyntaxTreeNode) -> str:
        depth = int(node.tag[1:])
        return f"{HEADING_MARKER * depth} {self._children(node)}\n\n"

    def _paragraph(self, node: SyntaxTreeNode) -> str:
        return self._children(node) + "\n"

    def _text(self, node: SyntaxTreeNode) -> str:
        return node.content

    def _softbreak(self, node: SyntaxTreeNode) -> str:
        return "\n"

    def _code_inline(self, node: SyntaxTreeNode) -> str:
        return f"`{node.content}`"

    def _code(self, node: SyntaxTreeNode) -> str:
        # Indented code blocks carry no info string
        info = node.info.strip() if node.type == "fence" else ""
        lang = info.split()[0] if info else ""
        body = node.content
        fence = raw_fence(body)
        return f"{fence}{lang}\n{body}{fence}\n"

    def _unsupported(self, node: SyntaxTreeNode) -> str:
        if self.strict:
            raise MarkdownConversionError(
                f"No Typst translation for markdown node kind '{node.type}'"
            )
        self.unsupported.append(node.type)
        return ""


def convert_markdown(
    source: str,
    parser: Optional[MarkdownParser] = None,
    translator: Optional[MarkdownTranslator] = None,
) -> str:
    """Parse markdown source and translate it to Typst.

    Args:
        source: Markdown text
        parser: Parser to use (default: CommonMark MarkdownParser)
        translator: Translator to use (default: non-strict MarkdownTranslator)

    Returns:
        str: Typst markup

    Raises:
        MarkdownConversionError: If parsing fails, or in strict mode on an
            unsupported node kind
    """
    parser = parser or MarkdownParser()
    translator = translator or MarkdownTranslator()
    return translator.translate(parser.parse(source))
