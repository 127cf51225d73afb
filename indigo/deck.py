"""
Deck module for Indigo card game.
Handles the draw pile: shuffling and drawing cards.
"""

import random
from typing import List, Optional
from .card import Card, create_deck


class Deck:
    """Manages the draw pile. It only ever shrinks during a game."""

    def __init__(self, cards: Optional[List[Card]] = None, rng: Optional[random.Random] = None):
        self.cards = list(cards) if cards is not None else create_deck()
        self.rng = rng or random.Random()

    def shuffle(self):
        """Shuffle the deck randomly."""
        self.rng.shuffle(self.cards)

    def draw(self, n: int) -> List[Card]:
        """
        Draw cards from the top of the deck.

        Args:
            n: Number of cards wanted

        Returns:
            The drawn cards. When fewer than ``n`` remain, only the
            remaining cards are returned.
        """
        if n <= 0:
            return []
        drawn = self.cards[:n]
        del self.cards[:n]
        return drawn

    def cards_remaining(self) -> int:
        """Return number of cards remaining in deck."""
        return len(self.cards)

    def is_empty(self) -> bool:
        """Check if deck is empty."""
        return len(self.cards) == 0

    def __len__(self):
        return len(self.cards)
