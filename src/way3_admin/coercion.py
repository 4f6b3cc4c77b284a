"""Coercion of legacy admin page display text into typed values.

The legacy pages render numbers for humans ("1,234원", "Lv.12", "37회"), so
every helper here is best-effort: malformed numeric text yields 0 and
nothing raises.
"""

from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"[^0-9]")
_LEADING_INT = re.compile(r"^\s*([0-9]+)")


def _digits_to_int(digits: str) -> int:
    # int() refuses digit runs longer than sys.get_int_max_str_digits()
    try:
        return int(digits)
    except ValueError:
        return 0


def to_int(text: str | None) -> int:
    """Parse an integer from all digits found in the text.

    Args:
        text: Display text such as "1,234원"

    Returns:
        The digits joined as an integer, or 0 when there are none
    """
    if not text:
        return 0
    digits = _NON_DIGITS.sub("", text)
    return _digits_to_int(digits) if digits else 0


def parse_leading_int(text: str | None) -> int:
    """Parse the integer at the start of the text, ignoring what follows.

    Args:
        text: Display text such as "42" or "42명"

    Returns:
        The leading integer, or 0 if the text does not start with a digit
    """
    if not text:
        return 0
    match = _LEADING_INT.match(text)
    return _digits_to_int(match.group(1)) if match else 0


def to_int_stripping_prefix(text: str | None, prefix: str) -> int:
    """Remove a literal prefix (e.g. "Lv.") and parse the leading integer."""
    if not text:
        return 0
    return parse_leading_int(text.replace(prefix, "", 1))


def to_int_stripping_suffix(text: str | None, suffix: str) -> int:
    """Remove a literal suffix (e.g. "회") and parse the leading integer."""
    if not text:
        return 0
    return parse_leading_int(text.replace(suffix, "", 1))


def trim_text(text: str | None) -> str:
    """Strip surrounding whitespace from free-text fields."""
    return text.strip() if text else ""
