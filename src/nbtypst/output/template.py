"""Typst document preamble."""

from pydantic import BaseModel, ConfigDict

from nbtypst.generation.typst import typst_string

PREAMBLE = """
#let input_notebook = {input_notebook}

#let bgcolor_code = {code_background}
#let bgcolor_result = {result_background}
#let codeblock(
    lang: "python",
    bgcolor: bgcolor_code,
    code) = block(fill: bgcolor,
                  outset: 5pt,
                  radius: 3pt,
                  width: 100%,
                  raw(code, lang: lang))

"""


class DocumentTemplate(BaseModel):
    """Immutable preamble of a generated document.

    Defines the ``codeblock`` helper and the colors every formatted cell
    relies on.

    Attributes:
        input_notebook: Name of the source notebook, recorded in the document
        code_background: Typst color expression for source blocks
        result_background: Typst color expression for result blocks
    """

    input_notebook: str = ""
    code_background: str = "luma(230)"
    result_background: str = 'rgb("a7d1de")'

    model_config = ConfigDict(frozen=True)

    def render(self) -> str:
        """Render the preamble text."""
        return PREAMBLE.format(
            input_notebook=typst_string(self.input_notebook),
            code_background=self.code_background,
            result_background=self.result_background,
        )
