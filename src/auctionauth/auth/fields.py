"""Parsing helpers for raw form values."""

from __future__ import annotations

MAX_ID_DIGITS = 18


def is_blank(value: object) -> bool:
    """True for None, empty strings and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def parse_positive_int(value: object, max_digits: int = MAX_ID_DIGITS) -> int | None:
    """Convert a form value to a positive int.

    Accepts ints and strings of ASCII digits (surrounding whitespace allowed).
    Signs, decimals, booleans and anything longer than `max_digits` are
    rejected.

    Returns:
        The parsed value, or None if it is not a well-formed positive number.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 < value and len(str(value)) <= max_digits else None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text or len(text) > max_digits or not (text.isascii() and text.isdigit()):
        return None
    number = int(text)
    return number if number > 0 else None
