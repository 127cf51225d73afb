"""
Card module for Indigo card game.
Defines Card, Suit, Rank and MatchRule, plus deck generation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class Suit(Enum):
    """Card suits, displayed by their symbol."""
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"
    CLUBS = "♣"

    def __str__(self):
        return self.value


class Rank(Enum):
    """Card ranks, displayed by their face label."""
    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def __str__(self):
        return self.value


class MatchRule(Enum):
    """Which attribute two cards are compared on."""
    SUIT = "suit"
    RANK = "rank"


SCORING_RANKS = frozenset({Rank.ACE, Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING})


@dataclass(frozen=True)
class Card:
    """Represents a playing card with rank and suit."""

    rank: Rank
    suit: Suit

    def __str__(self):
        return f"{self.rank}{self.suit}"

    def __repr__(self):
        return f"Card({self.rank.name}, {self.suit.name})"

    def matches(self, other: 'Card', rule: Optional[MatchRule] = None) -> bool:
        """
        Check whether this card matches another.

        Args:
            other: The card to compare against
            rule: Restrict the comparison to suit or rank only.
                  With no rule, either a shared suit or a shared rank matches.

        Returns:
            True if the cards match under the rule
        """
        if rule is MatchRule.SUIT:
            return self.suit == other.suit
        if rule is MatchRule.RANK:
            return self.rank == other.rank
        return self.rank == other.rank or self.suit == other.suit

    def points(self) -> int:
        """A, 10, J, Q and K are worth one point each."""
        return 1 if self.rank in SCORING_RANKS else 0


def create_deck() -> List[Card]:
    """Create a standard 52-card deck."""
    deck = []
    for suit in Suit:
        for rank in Rank:
            deck.append(Card(rank, suit))
    return deck


def parse_card(text: str) -> Card:
    """
    Build a card from its display form, e.g. ``"10♥"`` or ``"Q♣"``.

    Raises:
        ValueError: If the text does not name a card
    """
    text = text.strip()
    if len(text) < 2:
        raise ValueError(f"Invalid card: {text!r}")
    try:
        return Card(Rank(text[:-1].upper()), Suit(text[-1]))
    except ValueError:
        raise ValueError(f"Invalid card: {text!r}") from None
