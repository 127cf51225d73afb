"""Test helpers for building hands and controlling randomness."""

import random
from typing import List

from indigo.card import Card, parse_card


def cards(text: str) -> List[Card]:
    """Parse a space-separated list of cards, e.g. ``"9♦ 9♠"``."""
    return [parse_card(label) for label in text.split()]


class NoShuffle(random.Random):
    """Random source that leaves card order alone."""

    def shuffle(self, x, *args, **kwargs):
        pass


class StubRandom:
    """Random source with fixed answers that records what it was asked."""

    def __init__(self, pick: int = 0, choice_index: int = 0):
        self.pick = pick
        self.choice_index = choice_index
        self.randrange_calls: List[int] = []
        self.choices: List[list] = []

    def randrange(self, n):
        self.randrange_calls.append(n)
        return min(self.pick, n - 1)

    def choice(self, seq):
        self.choices.append(list(seq))
        return seq[self.choice_index]
