"""Data models for notebook parsing and representation."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def join_fragments(value: Any) -> Any:
    """Join a fragmented notebook text field into one string.

    Notebook JSON stores multi-line text either as a string or as a list of
    string fragments. Fragments are concatenated with no separator; anything
    that is not a list of strings is returned unchanged.
    """
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return "".join(value)
    return value


class OutputRecord(BaseModel):
    """A captured execution output of a code cell.

    Attributes:
        output_type: Output kind (execute_result, stream, display_data, error, ...)
        data: MIME bundle mapping content types to content
        text: Stream text (for stream outputs)
    """

    output_type: str
    data: Optional[dict[str, Any]] = None
    text: Optional[str] = None

    model_config = ConfigDict(extra="allow")

    @field_validator("text", mode="before")
    @classmethod
    def _join_text(cls, value: Any) -> Any:
        return join_fragments(value)

    @field_validator("data", mode="before")
    @classmethod
    def _join_data(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {mime: join_fragments(content) for mime, content in value.items()}
        return value


class Cell(BaseModel):
    """Represents a single notebook cell.

    Attributes:
        cell_type: Type of cell (markdown, code, or anything else)
        source: Cell content as a string
        outputs: List of cell outputs (for code cells)
        execution_count: Execution number (for code cells)
    """

    cell_type: str
    source: str
    outputs: list[OutputRecord] = Field(default_factory=list)
    execution_count: Optional[int] = None

    model_config = ConfigDict(extra="allow")

    @field_validator("source", mode="before")
    @classmethod
    def _join_source(cls, value: Any) -> Any:
        return join_fragments(value)


class KernelSpec(BaseModel):
    """Kernel specification from the notebook metadata."""

    language: str
    name: Optional[str] = None
    display_name: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class NotebookMetadata(BaseModel):
    """Notebook-level metadata. Only the kernel specification is required."""

    kernelspec: KernelSpec

    model_config = ConfigDict(extra="allow")


class Notebook(BaseModel):
    """Complete parsed notebook structure.

    Attributes:
        nbformat: Major format version
        nbformat_minor: Minor format version
        metadata: Notebook metadata
        cells: Cells in notebook order
        top_level_keys: Keys of the source JSON document, in document order
    """

    nbformat: int
    nbformat_minor: int
    metadata: NotebookMetadata
    cells: list[Cell]
    top_level_keys: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _record_keys(cls, data: Any) -> Any:
        if isinstance(data, dict) and "top_level_keys" not in data:
            data = {**data, "top_level_keys": list(data.keys())}
        return data

    @property
    def language(self) -> str:
        """Kernel language identifier, e.g. ``python``."""
        return self.metadata.kernelspec.language

    @property
    def version(self) -> str:
        return f"{self.nbformat}.{self.nbformat_minor}"


class ConversionContext(BaseModel):
    """Read-only values shared by every cell of one conversion run.

    Attributes:
        language: Kernel language used to tag code blocks
        verbose: Whether diagnostics are printed
        strip_ansi: Strip terminal escape sequences from outputs
        backtick_policy: Reject or escape backticks in code-cell source
        allow_unexecuted: Accept code cells with a null execution count
        strict_markdown: Fail on untranslatable markdown node kinds
    """

    language: str
    verbose: bool = False
    strip_ansi: bool = True
    backtick_policy: Literal["reject", "escape"] = "reject"
    allow_unexecuted: bool = False
    strict_markdown: bool = False

    model_config = ConfigDict(frozen=True)
