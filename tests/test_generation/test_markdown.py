"""Tests for markdown to Typst translation."""

import pytest

from nbtypst import MarkdownConversionError
from nbtypst.generation.markdown import MarkdownTranslator, convert_markdown
from nbtypst.parsing.markdown import MarkdownParser


class TestMarkdownParser:
    """Tests for MarkdownParser class."""

    def test_parse_returns_root(self):
        """Test that parsing yields a root node with block children."""
        tree = MarkdownParser().parse("# Title\n\nBody")

        assert tree.type == "root"
        assert [child.type for child in tree.children] == ["heading", "paragraph"]

    def test_parser_failure_is_wrapped(self):
        """Test that parser exceptions become MarkdownConversionError."""
        parser = MarkdownParser()
        parser.md = None  # parse() now fails with AttributeError

        with pytest.raises(MarkdownConversionError, match="Failed to parse markdown"):
            parser.parse("text")


class TestMarkdownTranslator:
    """Tests for MarkdownTranslator class."""

    @pytest.mark.parametrize("depth", [1, 2, 3, 6])
    def test_heading_depth(self, depth):
        """Test that heading markers match the heading depth."""
        source = "#" * depth + " Heading"

        assert convert_markdown(source) == "=" * depth + " Heading\n\n"

    def test_heading_depth_three_exact(self):
        """Test the exact output of a depth-3 heading."""
        assert convert_markdown("### Results") == "=== Results\n\n"

    def test_paragraph(self):
        """Test that a paragraph ends with one newline."""
        assert convert_markdown("Just some text.") == "Just some text.\n"

    def test_paragraph_keeps_line_breaks(self):
        """Test that soft line breaks inside a paragraph are kept."""
        assert convert_markdown("first line\nsecond line") == "first line\nsecond line\n"

    def test_text_not_escaped(self):
        """Test that text is emitted verbatim."""
        assert convert_markdown("a * b = c_d") == "a * b = c_d\n"

    def test_inline_code(self):
        """Test that inline code is wrapped in single backticks."""
        assert convert_markdown("Use `np.array` here") == "Use `np.array` here\n"

    def test_fenced_code_with_language(self):
        """Test a fenced code block with a language tag."""
        source = "```python\nx = 1\n```"

        assert convert_markdown(source) == "```python\nx = 1\n```\n"

    def test_fenced_code_language_is_first_word(self):
        """Test that only the first word of the info string is the language."""
        source = "```python title=example\nx = 1\n```"

        assert convert_markdown(source).startswith("```python\n")

    def test_fenced_code_without_language(self):
        """Test a fenced code block without a language tag."""
        assert convert_markdown("```\nplain\n```") == "```\nplain\n```\n"

    def test_indented_code_block(self):
        """Test that indented code blocks are fenced with an empty tag."""
        assert convert_markdown("    indented\n") == "```\nindented\n```\n"

    def test_fence_lengthened_for_backticks_in_body(self):
        """Test that a body containing a triple backtick gets a longer fence."""
        source = "````md\n```\ninner\n```\n````"

        assert convert_markdown(source) == "````md\n```\ninner\n```\n````\n"

    def test_root_children_joined_without_separator(self):
        """Test that block translations are concatenated directly."""
        source = "# Title\n\nFirst paragraph.\n\nSecond paragraph."

        assert convert_markdown(source) == "= Title\n\nFirst paragraph.\nSecond paragraph.\n"

    def test_heading_with_inline_code(self):
        """Test inline children inside a heading."""
        assert convert_markdown("## The `fit` method") == "== The `fit` method\n\n"

    def test_unsupported_kinds_produce_nothing(self):
        """Test that untranslated kinds are skipped and recorded."""
        translator = MarkdownTranslator()

        text = convert_markdown("- item\n\n> quote\n\nend", translator=translator)

        assert text == "end\n"
        assert "bullet_list" in translator.unsupported
        assert "blockquote" in translator.unsupported

    def test_unsupported_inline_kind_inside_paragraph(self):
        """Test that an emphasis node drops only itself."""
        translator = MarkdownTranslator()

        text = convert_markdown("plain *strong* tail", translator=translator)

        assert text == "plain  tail\n"
        assert translator.unsupported == ["em"]

    def test_strict_mode_raises(self):
        """Test that strict mode rejects unsupported kinds."""
        translator = MarkdownTranslator(strict=True)

        with pytest.raises(MarkdownConversionError, match="bullet_list"):
            convert_markdown("- item", translator=translator)

    def test_empty_source(self):
        """Test that an empty cell translates to an empty string."""
        assert convert_markdown("") == ""
