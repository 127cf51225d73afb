"""
Player module for Indigo card game.
Defines the two sides, their hands and winnings, and the strategy interface.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional
from indigo.card import Card


class Side(Enum):
    """The two parties at the table."""
    PLAYER = "Player"
    COMPUTER = "Computer"

    def other(self) -> 'Side':
        return Side.COMPUTER if self is Side.PLAYER else Side.PLAYER

    def __str__(self):
        return self.value


class TurnOrder(Enum):
    """Who opens the game. UNDECIDED until the player answers."""
    UNDECIDED = "undecided"
    PLAYER_FIRST = "player"
    COMPUTER_FIRST = "computer"

    @property
    def first_side(self) -> Optional[Side]:
        return {
            TurnOrder.PLAYER_FIRST: Side.PLAYER,
            TurnOrder.COMPUTER_FIRST: Side.COMPUTER,
        }.get(self)


class BotInterface(ABC):
    """Abstract interface that all bots must implement."""

    @abstractmethod
    def choose_card(self, hand: List[Card], table_top: Optional[Card]) -> int:
        """
        Choose which card to play.

        Args:
            hand: Current hand, never empty
            table_top: Top card of the table stack (None if the table is empty)

        Returns:
            Index into ``hand`` of the card to play
        """
        pass


class Player:
    """One side of the game: a hand and a pile of won cards."""

    def __init__(self, side: Side, name: str = None, strategy: Optional[BotInterface] = None):
        self.side = side
        self.name = name or side.value
        self.strategy = strategy
        self.hand: List[Card] = []
        self.winnings: List[Card] = []

    def receive_cards(self, cards: List[Card]):
        """Add cards to player's hand."""
        self.hand.extend(cards)

    def play_card(self, index: int) -> Card:
        """
        Remove and return a card from hand.

        Args:
            index: Position of the card in hand (0-based)

        Returns:
            The played card

        Raises:
            ValueError: If there is no card at that position
        """
        if not 0 <= index < len(self.hand):
            raise ValueError(f"No card at position {index} in a hand of {len(self.hand)}")
        return self.hand.pop(index)

    def take_winnings(self, cards: List[Card]):
        """Add swept table cards to this side's winnings."""
        self.winnings.extend(cards)

    def choose_card(self, table_top: Optional[Card]) -> Optional[int]:
        """Ask the strategy for a card. Returns None only when a human quits."""
        if self.strategy is None:
            raise RuntimeError(f"{self.name} has no strategy to choose a card")
        return self.strategy.choose_card(self.hand, table_top)

    def has_cards(self) -> bool:
        return bool(self.hand)

    def __str__(self):
        return f"{self.name} (Cards won: {len(self.winnings)})"


class HumanPlayer(Player):
    """Human player that gets input from console."""

    def __init__(self, side: Side = Side.PLAYER, name: str = None):
        super().__init__(side, name)

    def ask_play_first(self) -> TurnOrder:
        """Ask whether the human opens the game. Re-asks until yes or no."""
        while True:
            print("Play first?")
            choice = input().strip().lower()
            if choice == "yes":
                return TurnOrder.PLAYER_FIRST
            if choice == "no":
                return TurnOrder.COMPUTER_FIRST

    def choose_card(self, table_top: Optional[Card]) -> Optional[int]:
        """
        Get card choice from human player via console input.

        Returns:
            0-based index into the hand, or None if the player typed ``exit``
        """
        print(f"Cards in hand: {self._format_hand()}")

        while True:
            print(f"Choose a card to play (1-{len(self.hand)}):")
            choice = input().strip()
            if choice == "exit":
                return None
            try:
                number = int(choice)
            except ValueError:
                continue
            if 1 <= number <= len(self.hand):
                return number - 1

    def _format_hand(self) -> str:
        """Format hand as a numbered list, e.g. ``1)A♦ 2)10♣``."""
        return " ".join(f"{i}){card}" for i, card in enumerate(self.hand, start=1))
