"""nbtypst - Convert Jupyter notebooks to Typst documents.

Markdown cells become Typst markup, code cells become highlighted code blocks
with their captured output underneath.
"""

__version__ = "0.1.0"


class NbTypstError(Exception):
    """Base exception for all nbtypst errors."""

    kind = "unknown"


class NotebookParseError(NbTypstError):
    """Raised when the notebook JSON is malformed or misses a required field."""

    kind = "json"


class MarkdownConversionError(NbTypstError):
    """Raised when a markdown cell cannot be converted."""

    kind = "markdown"


class NotebookIOError(NbTypstError):
    """Raised when the input notebook cannot be read."""

    kind = "io"


class OutputIOError(NbTypstError):
    """Raised when the Typst document cannot be written."""

    kind = "io"


class SourcePreconditionError(NbTypstError):
    """Raised when a code cell's source cannot be embedded as-is."""

    kind = "precondition"


class ConfigurationError(NbTypstError):
    """Raised when configuration is invalid or missing."""

    kind = "config"
