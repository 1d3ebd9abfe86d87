"""
Scalar Decoders - Best-effort conversion of trace fields to numbers.

A single corrupted numeric column must never abort a whole trace, so every
decoder here absorbs failures into the zero value of its type.
"""

import re


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INT_RE = re.compile(r"[+-]?\d+")


def to_int64(text: str) -> int:
    """
    Decode a base-10 signed integer field.
    
    Args:
        text: Raw field text
        
    Returns:
        The parsed integer, or 0 if the text is not a plain integer or
        does not fit into a signed 64-bit value
    """
    if not _INT_RE.fullmatch(text):
        return 0
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        return 0
    return value


def to_int(text: str) -> int:
    """Decode an integer field (depth, record id). Invalid input yields 0."""
    return to_int64(text)


def to_float(text: str) -> float:
    """
    Decode a floating point field (elapsed seconds).
    
    Surrounding whitespace and digit-group underscores are rejected even
    though ``float()`` would accept them.
    """
    if not text or text != text.strip() or "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0
