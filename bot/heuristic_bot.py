"""
Heuristic bot implementation for Indigo card game.
Rule-based card selection that prefers keeping pairs in hand for later sweeps.
"""

import random
from typing import List, Optional
from indigo.card import Card, MatchRule
from indigo.player import BotInterface


class HeuristicBot(BotInterface):
    """Rule-based bot with strategic heuristics."""

    def __init__(self, name: str = "HeuristicBot", rng: Optional[random.Random] = None):
        self.name = name
        self.rng = rng or random.Random()

    def choose_card(self, hand: List[Card], table_top: Optional[Card]) -> int:
        """
        Strategic card selection.

        1. A single card in hand is played.
        2. A single card matching the table top is played.
        3. With an empty table or nothing matching, throw a card that has a
           suit partner in hand, then one with a rank partner, else the
           random fallback.
        4. With several matching cards, prefer those sharing the top card's
           suit, then its rank, when at least two share it.
        """
        if not hand:
            raise ValueError("No cards in hand to play")

        # Drawn before anything else; kept when no better choice exists.
        chosen = self.rng.randrange(len(hand))
        if len(hand) == 1:
            return chosen

        candidates = self._matching_top_card(hand, table_top)

        if len(candidates) == 1:
            return candidates[0]

        if table_top is None or not candidates:
            for rule in (MatchRule.SUIT, MatchRule.RANK):
                junk = self._matching_junk(hand, rule)
                if junk:
                    return self.rng.choice(junk)
            return chosen

        for rule in (MatchRule.SUIT, MatchRule.RANK):
            preferred = self._matching_top_card(hand, table_top, rule)
            if len(preferred) >= 2:
                return self.rng.choice(preferred)
        return self.rng.choice(candidates)

    def _matching_top_card(self, hand: List[Card], table_top: Optional[Card],
                           rule: Optional[MatchRule] = None) -> List[int]:
        """Indices of hand cards that match the table top under ``rule``."""
        if table_top is None:
            return []
        return [i for i, card in enumerate(hand) if table_top.matches(card, rule)]

    def _matching_junk(self, hand: List[Card], rule: MatchRule) -> List[int]:
        """Indices of hand cards that share a suit or rank with another hand card."""
        indices = []
        for first_index, first_card in enumerate(hand):
            for second_index in range(first_index + 1, len(hand)):
                second_card = hand[second_index]
                if first_card != second_card and first_card.matches(second_card, rule):
                    for index in (first_index, second_index):
                        if index not in indices:
                            indices.append(index)
        return indices

    def __str__(self):
        return self.name
