"""Configuration management for nbtypst."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nbtypst import ConfigurationError


class NbTypstSettings(BaseSettings):
    """Application configuration loaded from environment variables.

    Environment variables should be prefixed with NBTYPST_
    Example: NBTYPST_BACKTICK_POLICY=escape

    Attributes:
        verbose: Print a notebook overview to stderr
        cells: Cell selection expression (empty selects every cell)
        strip_ansi: Strip terminal escape sequences from outputs
        backtick_policy: What to do with backticks in code-cell source
        allow_unexecuted: Accept code cells without an execution count
        strict_markdown: Fail on markdown constructs that have no translation
        code_background: Typst color of source blocks
        result_background: Typst color of result blocks
    """

    verbose: bool = Field(
        default=False,
        description="Print a notebook overview to stderr",
    )
    cells: str = Field(
        default="",
        description="Cell selection, e.g. '0,1,-1' or '0:12,-1'",
    )

    # Output formatting
    strip_ansi: bool = Field(
        default=True,
        description="Strip terminal escape sequences from cell outputs",
    )
    backtick_policy: Literal["reject", "escape"] = Field(
        default="reject",
        description="Reject code cells containing backticks, or escape them",
    )
    allow_unexecuted: bool = Field(
        default=False,
        description="Render code cells with a null execution count",
    )
    strict_markdown: bool = Field(
        default=False,
        description="Fail on markdown node kinds without a Typst translation",
    )

    # Template
    code_background: str = Field(
        default="luma(230)",
        description="Typst color expression for source blocks",
    )
    result_background: str = Field(
        default='rgb("a7d1de")',
        description="Typst color expression for result blocks",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="NBTYPST_",
        case_sensitive=False,
        extra="ignore",
    )


class CellSelection:
    """Explicit selection of notebook cells by index.

    Items are integer indices or slices; negative values count from the end,
    as in Python sequences. Selected cells are always yielded in notebook
    order, without duplicates. An empty selection selects every cell.
    """

    def __init__(self, items: Optional[list[int | slice]] = None):
        self.items = list(items or [])

    @property
    def selects_all(self) -> bool:
        return not self.items

    def indices(self, count: int) -> list[int]:
        """Resolve the selection against a notebook with ``count`` cells.

        Args:
            count: Number of cells in the notebook

        Returns:
            list[int]: Sorted, de-duplicated cell indices

        Raises:
            ConfigurationError: If an integer index is out of range
        """
        if self.selects_all:
            return list(range(count))

        chosen: set[int] = set()
        for item in self.items:
            if isinstance(item, slice):
                chosen.update(range(count)[item])
                continue
            if not -count <= item < count:
                raise ConfigurationError(
                    f"Cell index {item} out of range for notebook with {count} cells"
                )
            chosen.add(item % count)
        return sorted(chosen)

    def __repr__(self) -> str:
        return f"CellSelection({self.items!r})"


def parse_cell_selection(text: Optional[str]) -> CellSelection:
    """Parse a cell selection expression.

    Args:
        text: Comma-separated indices and ``start:stop`` ranges,
            e.g. ``"0,1,-1"`` or ``"0:12,-1"``

    Returns:
        CellSelection: The parsed selection (selects all when text is empty)

    Raises:
        ConfigurationError: If the expression is malformed
    """
    if not text or not text.strip():
        return CellSelection()

    items: list[int | slice] = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            if ":" in part:
                start, _, stop = part.partition(":")
                items.append(
                    slice(
                        int(start) if start.strip() else None,
                        int(stop) if stop.strip() else None,
                    )
                )
            else:
                items.append(int(part))
        except ValueError as e:
            raise ConfigurationError(f"Invalid cell selection {part!r} in {text!r}") from e
    return CellSelection(items)


# Global config instance (lazy-loaded)
_config: NbTypstSettings | None = None


def get_config() -> NbTypstSettings:
    """Get or create the global configuration instance.

    Returns:
        NbTypstSettings: The configuration object
    """
    global _config
    if _config is None:
        _config = NbTypstSettings()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
