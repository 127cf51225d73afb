"""
Random bot implementation for Indigo card game.
Provides a baseline bot that plays a random card.
"""

import random
from typing import List, Optional
from indigo.card import Card
from indigo.player import BotInterface


class RandomBot(BotInterface):
    """Bot that makes completely random moves."""

    def __init__(self, name: str = "RandomBot", rng: Optional[random.Random] = None):
        self.name = name
        self.rng = rng or random.Random()

    def choose_card(self, hand: List[Card], table_top: Optional[Card]) -> int:
        """Choose a random card to play."""
        if not hand:
            raise ValueError("No cards in hand to play")

        return self.rng.randrange(len(hand))

    def __str__(self):
        return self.name
