from __future__ import annotations
from typing import Dict, Sequence

from ..data.names import GURMUKHI_DIGITS

_TO_ASCII: Dict[str, str] = {g: str(i) for i, g in enumerate(GURMUKHI_DIGITS)}


def to_unicode_num(number: int, digits: Sequence[str] = GURMUKHI_DIGITS) -> str:
    """
    Render an integer in decimal with each ASCII digit swapped for `digits[i]`.
    Non-digit characters (the minus sign) pass through.
    """
    return "".join(digits[ord(ch) - 48] if "0" <= ch <= "9" else ch for ch in str(number))

def from_unicode_num(text: str) -> str:
    """Inverse of to_unicode_num for the Gurmukhi table."""
    return "".join(_TO_ASCII.get(ch, ch) for ch in text)
