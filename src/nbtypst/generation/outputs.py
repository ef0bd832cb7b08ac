"""Selection of the textual result of a code cell."""

import re
from typing import Optional

from nbtypst.models import OutputRecord, join_fragments

# CSI sequences (colors, cursor movement), OSC sequences, two-byte escapes
ANSI_ESCAPE = re.compile(
    r"\x1B\[[0-?]*[ -/]*[@-~]"
    r"|\x1B\][^\x07\x1B]*(?:\x07|\x1B\\)"
    r"|\x1B[@-Z\\-_]"
)


def strip_escape_sequences(text: str) -> str:
    """Remove terminal control sequences from captured output.

    Args:
        text: Raw output text

    Returns:
        str: Text without ANSI escape sequences
    """
    return ANSI_ESCAPE.sub("", text)


def _plain_text(output: OutputRecord) -> Optional[str]:
    if output.output_type != "execute_result" or not output.data:
        return None
    value = join_fragments(output.data.get("text/plain"))
    return value if isinstance(value, str) else None


def _stream_text(output: OutputRecord) -> Optional[str]:
    if output.output_type != "stream":
        return None
    return output.text


def select_output(outputs: list[OutputRecord], strip: bool = True) -> str:
    """Select the single textual result of a code cell.

    The first ``execute_result`` with a ``text/plain`` entry wins over every
    ``stream`` record, wherever it appears in the list. Only if there is none
    is the first ``stream`` record with text used.

    Args:
        outputs: Output records in notebook order
        strip: Strip terminal escape sequences from the result

    Returns:
        str: Selected text, or an empty string if no record qualifies
    """
    for extract in (_plain_text, _stream_text):
        for output in outputs:
            text = extract(output)
            if text is not None:
                return strip_escape_sequences(text) if strip else text
    return ""
