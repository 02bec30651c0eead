# src/guidedtour/enums.py
"""
Enumeration types for the guided tour.
"""

from enum import Enum
from typing import Optional


class Rank(Enum):
    """Playing card ranks with explicit integer raw values."""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def simple_description(self) -> str:
        if self in _FACE_NAMES:
            return _FACE_NAMES[self]
        return str(self.value)


_FACE_NAMES = {
    Rank.ACE: "ace",
    Rank.JACK: "jack",
    Rank.QUEEN: "queen",
    Rank.KING: "king",
}


class Suit(Enum):
    """Card suits. The cases are values in their own right."""
    SPADES = "spades"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"

    def simple_description(self) -> str:
        return self.value

    def color(self) -> str:
        if self in (Suit.SPADES, Suit.CLUBS):
            return "black"
        return "red"


class Weather(Enum):
    """String raw values; unspecified cases fall back to their own name."""
    RAIN = "Test"
    CLEAR = "clear"
    FOG = "fog"
    SNOW = "snow"


def compare_rank(a: Rank, b: Rank) -> bool:
    """Compare two ranks by their raw values."""
    return a.value == b.value


def rank_from_raw(raw: int) -> Optional[Rank]:
    """Build a Rank from a raw value, or None when no rank matches."""
    try:
        return Rank(raw)
    except ValueError:
        return None
