"""Hex formatting with a single upper/lower case toggle."""

from enum import Enum


class LetterCase(str, Enum):
    """Case used for every displayed and compared hex string."""

    UPPER = "upper"
    LOWER = "lower"


def apply_case(text: str, case: LetterCase) -> str:
    """Return text in the given case."""
    return text.upper() if case == LetterCase.UPPER else text.lower()


def to_hex(digest: bytes, case: LetterCase = LetterCase.LOWER) -> str:
    """Two hex characters per byte, all upper or all lower case."""
    return apply_case(digest.hex(), case)
