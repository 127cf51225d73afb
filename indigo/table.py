"""
Table module for Indigo card game.
Holds the face-up stack of played cards and the trick-win check.
"""

from typing import List, Optional
from .card import Card


class TableStack:
    """Cards played face-up, most recent last."""

    def __init__(self):
        self.cards: List[Card] = []

    @property
    def top(self) -> Optional[Card]:
        """The most recently played card, or None if the table is empty."""
        return self.cards[-1] if self.cards else None

    def place(self, cards: List[Card]):
        """Lay cards on the table without checking for a trick."""
        self.cards.extend(cards)

    def add_card(self, card: Card) -> bool:
        """
        Play a card onto the stack.

        Args:
            card: The card being played

        Returns:
            True if the card matches the card beneath it and wins the stack
        """
        self.cards.append(card)
        return self.is_trick_won()

    def is_trick_won(self) -> bool:
        """Only the two most recently played cards are compared."""
        if len(self.cards) < 2:
            return False
        return self.cards[-1].matches(self.cards[-2])

    def sweep(self) -> List[Card]:
        """Remove and return every card on the table."""
        swept = self.cards
        self.cards = []
        return swept

    def is_empty(self) -> bool:
        return not self.cards

    def __len__(self):
        return len(self.cards)

    def __str__(self):
        if not self.cards:
            return "No cards on the table"
        return f"{len(self.cards)} cards on the table, and the top card is {self.top}"
