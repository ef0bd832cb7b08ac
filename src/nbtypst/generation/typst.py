"""Typst literal helpers."""

import re

_BACKTICK_RUN = re.compile(r"`+")

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def typst_string(text: str) -> str:
    """Quote text as a Typst string literal.

    Backslashes, quotes and control characters are escaped, so the string
    evaluates to exactly ``text``.
    """
    out = []
    for char in text:
        if char in _STRING_ESCAPES:
            out.append(_STRING_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append(f"\\u{{{ord(char):x}}}")
        else:
            out.append(char)
    return '"' + "".join(out) + '"'


def longest_backtick_run(text: str) -> int:
    return max((len(run) for run in _BACKTICK_RUN.findall(text)), default=0)


def raw_fence(body: str) -> str:
    """Backtick fence for a raw block containing ``body``.

    Three backticks, or one more than the longest backtick run in the body.
    """
    return "`" * max(3, longest_backtick_run(body) + 1)
