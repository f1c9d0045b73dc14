"""Tests for the match indicator."""

import pytest

from hashbox.compare import MatchState, compare_digest
from hashbox.digests import LetterCase


def test_upper_toggle_matches_lowercase_computed() -> None:
    """Computed lower-case vs. expected upper-case with upper toggle -> match."""
    state = compare_digest(
        "d41d8cd98f00b204e9800998ecf8427e",
        "D41D8CD98F00B204E9800998ECF8427E",
        LetterCase.UPPER,
    )
    assert state is MatchState.MATCH


def test_whitespace_is_trimmed() -> None:
    assert compare_digest("ab01", "  AB01\n", LetterCase.LOWER) is MatchState.MATCH


def test_different_values_mismatch() -> None:
    assert compare_digest("ab01", "ab02", LetterCase.LOWER) is MatchState.MISMATCH


@pytest.mark.parametrize("computed,expected", [("", "ab01"), ("ab01", ""), ("ab01", "   "), ("", "")])
def test_empty_side_is_neutral(computed: str, expected: str) -> None:
    """No comparison is attempted when either side is empty."""
    assert compare_digest(computed, expected, LetterCase.UPPER) is MatchState.NEUTRAL
