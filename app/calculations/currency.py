"""
Currency String Normalization

Converts comma-grouped, whole-unit currency strings to integers and back.
Cents are not supported: every non-digit character, including a decimal
point, is dropped.
"""

import math
import re

_NON_DIGITS = re.compile(r"[^0-9]")
_DIGITS_ONLY = re.compile(r"[0-9]+")
_GROUP_BOUNDARY = re.compile(r"\B(?=(\d{3})+(?!\d))")


def format_grouped(raw: str) -> str:
    """
    Format a raw input string with thousands separators.

    Args:
        raw: User input, e.g. "1000000" or "1,000,000abc"

    Returns:
        Grouped digit string, e.g. "1,000,000" ("" if no digits)
    """
    digits = _NON_DIGITS.sub("", raw or "")
    return _GROUP_BOUNDARY.sub(",", digits)


def parse_grouped(formatted: str) -> int:
    """
    Parse a grouped digit string into an integer amount.

    Malformed input degrades to 0 instead of raising.
    """
    cleaned = (formatted or "").replace(",", "").strip()
    if not _DIGITS_ONLY.fullmatch(cleaned):
        return 0
    return int(cleaned)


def format_amount(value: float) -> str:
    """Render a computed amount for display ("2,138" or "1,234.50")."""
    if not math.isfinite(value):
        return str(value)
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,.2f}"
