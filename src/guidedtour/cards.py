# src/guidedtour/cards.py
"""
Card values and deck construction.
"""

from dataclasses import dataclass
from typing import List

from .enums import Rank, Suit


@dataclass(frozen=True)
class Card:
    """A single playing card. Copies are values, not shared references."""
    rank: Rank
    suit: Suit

    def simple_description(self) -> str:
        return f"The {self.rank.simple_description()} of {self.suit.simple_description()}"


def create_deck() -> List[Card]:
    """Return a full deck with one card per rank and suit combination."""
    cards = []
    for suit in Suit:
        for rank in Rank:
            cards.append(Card(rank=rank, suit=suit))
    return cards
