"""Data models for nbtypst."""

from nbtypst.models.notebook import (
    Cell,
    ConversionContext,
    KernelSpec,
    Notebook,
    NotebookMetadata,
    OutputRecord,
    join_fragments,
)

__all__ = [
    "Cell",
    "ConversionContext",
    "KernelSpec",
    "Notebook",
    "NotebookMetadata",
    "OutputRecord",
    "join_fragments",
]
