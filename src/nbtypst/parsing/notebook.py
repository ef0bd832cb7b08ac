"""Jupyter notebook parsing functionality."""

from pathlib import Path
from typing import Any

from nbformat.reader import NotJSONError, parse_json
from pydantic import ValidationError

from nbtypst import NotebookIOError, NotebookParseError
from nbtypst.models import Notebook


class NotebookParser:
    """Parser for Jupyter notebooks.

    Decodes .ipynb files with nbformat's JSON reader and validates the result
    into a Notebook. Validation reports the path of the first offending field,
    e.g. ``metadata.kernelspec.language``.
    """

    def __init__(self, allow_unexecuted: bool = False):
        """Initialize the parser.

        Args:
            allow_unexecuted: Accept code cells whose execution_count is null
        """
        self.allow_unexecuted = allow_unexecuted

    def parse(self, filepath: Path | str) -> Notebook:
        """Parse a Jupyter notebook file.

        Args:
            filepath: Path to the .ipynb file

        Returns:
            Notebook: Parsed notebook structure

        Raises:
            NotebookIOError: If the file cannot be read
            NotebookParseError: If the file is not a well-formed notebook
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise NotebookIOError(f"Notebook file not found: {filepath}")

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise NotebookIOError(f"Failed to read notebook {filepath}: {e}") from e

        try:
            data = parse_json(text)
        except NotJSONError as e:
            raise NotebookParseError(f"Notebook {filepath} is not valid JSON: {e}") from e

        return self.load(data, source=str(filepath))

    def load(self, data: Any, source: str = "<notebook>") -> Notebook:
        """Validate an already decoded notebook document.

        Args:
            data: Decoded JSON document
            source: Name used in error messages

        Returns:
            Notebook: Parsed notebook structure

        Raises:
            NotebookParseError: If a required field is missing or has the wrong shape
        """
        if not isinstance(data, dict):
            raise NotebookParseError(
                f"Notebook {source} must be a JSON object, got {type(data).__name__}"
            )

        try:
            notebook = Notebook.model_validate(data)
        except ValidationError as e:
            raise NotebookParseError(
                f"Malformed notebook {source}: {self._describe(e)}"
            ) from e

        if not self.allow_unexecuted:
            for index, cell in enumerate(notebook.cells):
                if cell.cell_type == "code" and cell.execution_count is None:
                    raise NotebookParseError(
                        f"Malformed notebook {source}: cells.{index}.execution_count "
                        f"is missing (the cell was never executed)"
                    )

        return notebook

    def _describe(self, error: ValidationError) -> str:
        """Summarize a validation error as ``field.path: message`` entries."""
        parts = []
        for detail in error.errors():
            location = ".".join(str(part) for part in detail["loc"]) or "<root>"
            parts.append(f"{location}: {detail['msg']}")
        return "; ".join(parts)
