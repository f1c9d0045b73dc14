"""Match indicator: computed digest vs. expected value."""

from enum import Enum

from hashbox.digests.formatting import LetterCase, apply_case


class MatchState(Enum):
    NEUTRAL = "neutral"
    MATCH = "match"
    MISMATCH = "mismatch"


def compare_digest(computed: str, expected: str, case: LetterCase) -> MatchState:
    """
    Trim both strings and bring them to the display case.
    NEUTRAL if either side is empty, else MATCH or MISMATCH.
    """
    a = apply_case((computed or "").strip(), case)
    b = apply_case((expected or "").strip(), case)
    if not a or not b:
        return MatchState.NEUTRAL
    return MatchState.MATCH if a == b else MatchState.MISMATCH
