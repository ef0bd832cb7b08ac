"""Pytest configuration and fixtures."""

import nbformat
import pytest

from nbtypst.config import reset_config
from nbtypst.models import ConversionContext


@pytest.fixture(autouse=True)
def reset_config_after_test():
    """Reset global config after each test."""
    yield
    reset_config()


@pytest.fixture
def context():
    """Default conversion context for a Python notebook."""
    return ConversionContext(language="python")


@pytest.fixture
def sample_notebook_data():
    """Sample notebook data for testing."""
    return {
        "cells": [
            {
                "cell_type": "markdown",
                "source": ["# Title"],
                "metadata": {},
            },
            {
                "cell_type": "code",
                "execution_count": 1,
                "source": ["print(1)"],
                "outputs": [
                    {
                        "output_type": "execute_result",
                        "execution_count": 1,
                        "data": {"text/plain": ["1"]},
                        "metadata": {},
                    }
                ],
                "metadata": {},
            },
        ],
        "metadata": {
            "kernelspec": {
                "display_name": "Python 3",
                "language": "python",
                "name": "python3",
            }
        },
        "nbformat": 4,
        "nbformat_minor": 5,
    }


@pytest.fixture
def sample_notebook_file(tmp_path):
    """Create a sample notebook file with markdown, code, and outputs."""
    nb = nbformat.v4.new_notebook()
    nb.metadata["kernelspec"] = {
        "display_name": "Python 3",
        "language": "python",
        "name": "python3",
    }

    nb.cells.append(
        nbformat.v4.new_markdown_cell("# Linear Regression\n\nWe fit `y = wx + b`.")
    )

    code_cell = nbformat.v4.new_code_cell("x = 2 + 3\nx", execution_count=1)
    code_cell.outputs = [
        nbformat.v4.new_output("execute_result", data={"text/plain": "5"}, execution_count=1)
    ]
    nb.cells.append(code_cell)

    stream_cell = nbformat.v4.new_code_cell("print('hello')", execution_count=2)
    stream_cell.outputs = [
        nbformat.v4.new_output("stream", name="stdout", text="hello\n")
    ]
    nb.cells.append(stream_cell)

    nb.cells.append(nbformat.v4.new_raw_cell("raw text is ignored"))
    nb.cells.append(nbformat.v4.new_markdown_cell("## Summary"))

    notebook_path = tmp_path / "sample.ipynb"
    with open(notebook_path, "w", encoding="utf-8") as f:
        nbformat.write(nb, f)

    return notebook_path
