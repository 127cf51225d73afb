"""
Rules module for Indigo card game.
Contains game constants and scoring logic.
"""

from typing import List
from indigo.card import Card


# Game constants
TOTAL_CARDS = 52
HAND_SIZE = 6
INITIAL_TABLE_CARDS = 4

# Scoring constants
MOST_CARDS_BONUS = 3


def card_points(cards: List[Card]) -> int:
    """Sum the point values of a pile of cards."""
    return sum(card.points() for card in cards)


def calculate_score(winnings: List[Card], opponent_winnings: List[Card],
                    is_recent_winner: bool, game_end: bool = False) -> int:
    """
    Calculate a side's score from the cards it has won.

    Args:
        winnings: Cards won by the side being scored
        opponent_winnings: Cards won by the other side
        is_recent_winner: Whether this side won the most recent trick
        game_end: Whether to apply the end-of-game bonus

    Returns:
        Points for the side. A side that has won nothing scores 0.
    """
    if not winnings:
        return 0

    score = card_points(winnings)
    if game_end and has_most_cards(len(winnings), len(opponent_winnings), is_recent_winner):
        score += MOST_CARDS_BONUS
    return score


def has_most_cards(own_count: int, opponent_count: int, is_recent_winner: bool) -> bool:
    """
    Decide who gets the most-cards bonus.

    Strictly more cards wins it; a tie goes to the most recent trick winner.
    """
    if own_count != opponent_count:
        return own_count > opponent_count
    return is_recent_winner
