"""Indigo card game engine."""

from .card import Card, MatchRule, Rank, Suit, create_deck
from .deck import Deck
from .game import IndigoGame
from .player import BotInterface, HumanPlayer, Player, Side, TurnOrder
from .table import TableStack

__all__ = [
    "BotInterface",
    "Card",
    "Deck",
    "HumanPlayer",
    "IndigoGame",
    "MatchRule",
    "Player",
    "Rank",
    "Side",
    "Suit",
    "TableStack",
    "TurnOrder",
    "create_deck",
]
