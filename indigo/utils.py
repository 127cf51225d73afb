"""
Utility module for Indigo card game.
Contains logging and formatting helpers.
"""

import logging
from typing import Dict, List, Optional
from indigo.card import Card


def setup_logging(log_file: Optional[str] = None, level: int = logging.WARNING):
    """
    Set up logging configuration for the game.

    Console output goes to stderr so it never mixes with the game transcript.
    A log file is only written when ``log_file`` is given.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def format_cards(cards: List[Card]) -> str:
    """Space-separated card labels, e.g. ``A♦ 10♣ Q♥``."""
    return " ".join(str(card) for card in cards)


def format_scores(scores: Dict[str, int]) -> str:
    """Format a score line, e.g. ``Score: Player 5 - Computer 3``."""
    return "Score: " + " - ".join(f"{name} {score}" for name, score in scores.items())


def format_card_counts(counts: Dict[str, int]) -> str:
    """Format a won-cards line, e.g. ``Cards: Player 12 - Computer 8``."""
    return "Cards: " + " - ".join(f"{name} {count}" for name, count in counts.items())


class GameLogger:
    """Logging wrapper for game events."""

    def __init__(self, name: str = "IndigoGame"):
        self.logger = logging.getLogger(name)

    def log_game_start(self, first_player: str, table_cards: List[Card]):
        """Log the start of a new game."""
        self.logger.info("=== NEW GAME STARTED ===")
        self.logger.info(f"First to play: {first_player}")
        self.logger.info(f"Initial table: {format_cards(table_cards)}")

    def log_deal(self, cards_remaining: int):
        """Log a fresh deal of hands."""
        self.logger.debug(f"Hands dealt, {cards_remaining} cards left in deck")

    def log_card_play(self, player_name: str, card: Card, hand: List[Card]):
        """Log a card play."""
        self.logger.debug(f"{player_name} plays {card} from [{format_cards(hand)}]")

    def log_trick_winner(self, winner_name: str, trick_cards: List[Card]):
        """Log trick winner and cards won."""
        self.logger.info(f"{winner_name} wins {len(trick_cards)} cards: {format_cards(trick_cards)}")

    def log_game_aborted(self, player_name: str):
        """Log a game left before the end."""
        self.logger.warning(f"{player_name} left the game before it ended")

    def log_game_end(self, final_scores: Dict[str, int], card_counts: Dict[str, int]):
        """Log game completion."""
        self.logger.info("=== GAME COMPLETE ===")
        for name, score in final_scores.items():
            self.logger.info(f"{name}: {score} points, {card_counts[name]} cards")
