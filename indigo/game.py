"""
Main game module for Indigo card game.
Manages game state, turn order, dealing and the end of the game.
"""

import random
from typing import Dict, Optional
from indigo.deck import Deck
from indigo.player import Player, HumanPlayer, Side, TurnOrder
from indigo.rules import HAND_SIZE, INITIAL_TABLE_CARDS, calculate_score
from indigo.table import TableStack
from indigo.utils import GameLogger, format_cards, format_card_counts, format_scores


class IndigoGame:
    """Main game controller for Indigo."""

    def __init__(self, player: Player, computer: Player, rng: Optional[random.Random] = None,
                 deck: Optional[Deck] = None, show_output: bool = True):
        if player.side is not Side.PLAYER or computer.side is not Side.COMPUTER:
            raise ValueError("Indigo requires one Player side and one Computer side")

        self.players = {Side.PLAYER: player, Side.COMPUTER: computer}
        self.rng = rng or random.Random()
        self.deck = deck or Deck(rng=self.rng)
        self.table = TableStack()
        self.turn_order = TurnOrder.UNDECIDED
        self.current_turn: Optional[Side] = None
        self.recent_winner: Optional[Side] = None
        self.game_complete = False
        self.aborted = False
        self.show_output = show_output
        self.logger = GameLogger()

    @property
    def player(self) -> Player:
        return self.players[Side.PLAYER]

    @property
    def computer(self) -> Player:
        return self.players[Side.COMPUTER]

    def start(self, turn_order: TurnOrder):
        """Fix the turn order, shuffle, and lay out the initial table."""
        if turn_order is TurnOrder.UNDECIDED:
            raise ValueError("Turn order must be decided before the game starts")

        self.turn_order = turn_order
        self.current_turn = turn_order.first_side
        self.recent_winner = turn_order.first_side

        self.deck.shuffle()
        self.table.place(self.deck.draw(INITIAL_TABLE_CARDS))

        self._say(f"Initial cards on the table: {format_cards(self.table.cards)}")
        self._say()
        self._say(str(self.table))
        self.logger.log_game_start(str(self.current_turn), self.table.cards)

    def deal(self):
        """Deal a fresh hand to both sides, one card at a time."""
        for _ in range(HAND_SIZE):
            self.player.receive_cards(self.deck.draw(1))
            self.computer.receive_cards(self.deck.draw(1))
        self.logger.log_deal(self.deck.cards_remaining())

    def play_turn(self) -> bool:
        """
        Play one half-turn for whoever is on move.

        Returns:
            False if the player asked to leave, True otherwise

        Raises:
            RuntimeError: If the turn order was never decided
        """
        if self.current_turn is None:
            raise RuntimeError("Something went wrong. Turn order was never decided!")

        if not self.player.has_cards() and not self.computer.has_cards():
            self.deal()

        side = self.current_turn
        actor = self.players[side]
        is_human = isinstance(actor, HumanPlayer)

        if not is_human:
            self._say(format_cards(actor.hand))
        index = actor.choose_card(self.table.top)
        if index is None:
            return False

        hand_before = list(actor.hand)
        card = actor.play_card(index)
        if not is_human:
            self._say(f"{side} plays {card}")
        self.logger.log_card_play(actor.name, card, hand_before)

        if self.table.add_card(card):
            won = self.table.sweep()
            actor.take_winnings(won)
            self.recent_winner = side
            self.logger.log_trick_winner(actor.name, won)
            self._say(f"{side} wins cards")
            self._show_score(game_end=False)
        self._say()

        self.current_turn = side.other()
        self._say(str(self.table))
        return True

    def is_game_over(self) -> bool:
        """The game ends once the deck and both hands are empty."""
        return (self.deck.is_empty()
                and not self.player.has_cards()
                and not self.computer.has_cards())

    def finish_game(self) -> Dict[Side, int]:
        """Give the leftover table to the side that opened, then score."""
        opener = self.players[self.turn_order.first_side]
        opener.take_winnings(self.table.sweep())
        self.game_complete = True

        self._show_score(game_end=True)
        self.logger.log_game_end(
            {str(side): score for side, score in self.get_scores(game_end=True).items()},
            {str(side): count for side, count in self.get_card_counts().items()}
        )
        return self.get_scores(game_end=True)

    def play_game(self) -> Optional[Dict[Side, int]]:
        """
        Play until the cards run out or the player types ``exit``.

        Returns:
            Final scores, or None if the player left early
        """
        while True:
            if not self.play_turn():
                self.aborted = True
                self.logger.log_game_aborted(self.player.name)
                break
            if self.is_game_over():
                self.finish_game()
                break

        self._say("Game Over")
        return None if self.aborted else self.get_scores(game_end=True)

    def get_scores(self, game_end: bool = False) -> Dict[Side, int]:
        """Current scores. The most-cards bonus only applies at game end."""
        return {
            side: calculate_score(
                self.players[side].winnings,
                self.players[side.other()].winnings,
                self.recent_winner is side,
                game_end
            )
            for side in (Side.PLAYER, Side.COMPUTER)
        }

    def get_card_counts(self) -> Dict[Side, int]:
        return {side: len(self.players[side].winnings) for side in (Side.PLAYER, Side.COMPUTER)}

    def get_winner(self) -> Optional[Side]:
        """
        Get game winner.

        Returns:
            The side with the higher final score, or None for a draw
        """
        if not self.game_complete:
            raise ValueError("Game not yet complete")

        scores = self.get_scores(game_end=True)
        if scores[Side.PLAYER] == scores[Side.COMPUTER]:
            return None
        return max(scores, key=lambda side: scores[side])

    def total_cards(self) -> int:
        """Cards across deck, table, hands and winnings. Always 52."""
        total = len(self.deck) + len(self.table)
        for participant in self.players.values():
            total += len(participant.hand) + len(participant.winnings)
        return total

    def _show_score(self, game_end: bool):
        scores = self.get_scores(game_end)
        counts = self.get_card_counts()
        self._say(format_scores({str(side): score for side, score in scores.items()}))
        self._say(format_card_counts({str(side): count for side, count in counts.items()}))

    def _say(self, message: str = ""):
        if self.show_output:
            print(message)
