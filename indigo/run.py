#!/usr/bin/env python3
"""
Main entry point for Indigo card game.
Play against the computer, or run silent bot-vs-bot games.
"""

import argparse
import logging
import random
import sys
from typing import Optional
from indigo.game import IndigoGame
from indigo.player import Player, HumanPlayer, Side, TurnOrder
from indigo.utils import setup_logging
from bot.trainer import BOT_CLASSES, SelfPlayTrainer, create_bot, format_summary


def create_computer_player(bot_type: str, rng: random.Random) -> Player:
    """Create the computer side driven by the given bot type."""
    return Player(Side.COMPUTER, strategy=create_bot(bot_type, rng))


def run_interactive_game(computer_bot: str = 'heuristic', seed: Optional[int] = None,
                         first: Optional[str] = None) -> Optional[dict]:
    """Run a human vs computer game on the console."""
    rng = random.Random(seed)
    human = HumanPlayer()
    computer = create_computer_player(computer_bot, rng)

    print("Indigo Card Game")
    if first is None:
        turn_order = human.ask_play_first()
    else:
        turn_order = TurnOrder.PLAYER_FIRST if first == 'yes' else TurnOrder.COMPUTER_FIRST

    game = IndigoGame(human, computer, rng=rng)
    game.start(turn_order)
    return game.play_game()


def run_simulation(num_games: int, player_bot: str, computer_bot: str,
                   seed: Optional[int] = None) -> dict:
    """Run bot-only games and print a summary."""
    trainer = SelfPlayTrainer(seed=seed)
    print(f"Simulating {num_games} games: {player_bot} (Player) vs {computer_bot} (Computer)")
    summary = trainer.evaluate(player_bot, computer_bot, num_games)
    print(format_summary(summary))
    return summary


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play Indigo card game")
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for shuffling and computer choices')
    parser.add_argument('--first', choices=['yes', 'no'], default=None,
                        help='Answer the "Play first?" question up front')
    parser.add_argument('--computer', choices=sorted(BOT_CLASSES), default='heuristic',
                        help='Strategy for the computer side')
    parser.add_argument('--simulate', type=int, metavar='N', default=None,
                        help='Run N computer-vs-computer games instead of playing')
    parser.add_argument('--player-bot', choices=sorted(BOT_CLASSES), default='random',
                        help='Strategy for the player side when simulating')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable verbose logging')

    args = parser.parse_args(argv)

    # Setup logging
    if args.verbose:
        setup_logging(level=logging.DEBUG)
    else:
        setup_logging()

    if args.simulate is not None:
        if args.simulate < 1:
            parser.error("--simulate needs at least one game")
        run_simulation(args.simulate, args.player_bot, args.computer, args.seed)
        return 0

    try:
        run_interactive_game(args.computer, args.seed, args.first)
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted by user")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
