from __future__ import annotations

import re
import sys
from typing import Optional

# Shared with the QRegularExpressionValidator of the input fields
INPUT_PATTERN = r"-?\d*"

_INPUT_RE = re.compile(INPUT_PATTERN, re.ASCII)
_INTEGER_RE = re.compile(r"-?\d+", re.ASCII)


def accepts_edit(text: str) -> bool:
    """Return True if `text` may be stored in an input field (empty included)."""
    return _INPUT_RE.fullmatch(text) is not None


def max_digits() -> Optional[int]:
    """
    Longest magnitude, in significant digits, that parse_value turns into a number.

    One below the interpreter's int/str conversion limit, so that the sum of
    two parsed values can still be printed. None when the limit is disabled.
    """
    limit = sys.get_int_max_str_digits()
    return limit - 1 if limit else None


def parse_value(text: str) -> Optional[int]:
    """
    Parse the content of an input field into an integer.

    Args:
        text: Raw field content.

    Returns:
        The base-10 value, or None when the text is empty, a lone "-", not
        an integer literal at all, or too long for the interpreter to convert.
    """
    if _INTEGER_RE.fullmatch(text) is None:
        return None

    negative = text.startswith("-")
    digits = text.lstrip("-").lstrip("0")
    limit = max_digits()
    if limit is not None and len(digits) > limit:
        return None

    try:
        value = int(digits, 10) if digits else 0
    except ValueError:
        return None
    return -value if negative else value
