"""
Self-play evaluation for Indigo bots.
Runs silent bot-vs-bot games and summarises the results.
"""

import random
import time
from typing import Any, Dict, List, Optional

import numpy as np

from indigo.game import IndigoGame
from indigo.player import BotInterface, Player, Side, TurnOrder
from indigo.rules import TOTAL_CARDS
from indigo.utils import GameLogger
from .heuristic_bot import HeuristicBot
from .random_bot import RandomBot


BOT_CLASSES = {
    'heuristic': HeuristicBot,
    'random': RandomBot,
}


def create_bot(bot_type: str, rng: Optional[random.Random] = None) -> BotInterface:
    """Create a bot of the specified type."""
    if bot_type not in BOT_CLASSES:
        raise ValueError(f"Unknown bot type: {bot_type}. Available: {list(BOT_CLASSES)}")
    return BOT_CLASSES[bot_type](f"{bot_type.title()}Bot", rng=rng)


class SelfPlayTrainer:
    """Manages self-play games and bot evaluation."""

    def __init__(self, seed: Optional[int] = None):
        self.logger = GameLogger("IndigoTrainer")
        self.rng = random.Random(seed)

    def run_single_game(self, player_bot: str, computer_bot: str,
                        turn_order: TurnOrder = TurnOrder.PLAYER_FIRST) -> Dict[str, Any]:
        """Run a single silent game between two bots."""
        game_rng = random.Random(self.rng.getrandbits(32))
        player = Player(Side.PLAYER, strategy=create_bot(player_bot, game_rng))
        computer = Player(Side.COMPUTER, strategy=create_bot(computer_bot, game_rng))
        game = IndigoGame(player, computer, rng=game_rng, show_output=False)

        start_time = time.time()
        game.start(turn_order)
        scores = game.play_game()

        if game.total_cards() != TOTAL_CARDS:
            raise RuntimeError(f"Card count drifted to {game.total_cards()}")

        winner = game.get_winner()
        return {
            'player_bot': player_bot,
            'computer_bot': computer_bot,
            'first': str(turn_order.first_side),
            'scores': {str(side): score for side, score in scores.items()},
            'cards': {str(side): count for side, count in game.get_card_counts().items()},
            'winner': str(winner) if winner else None,
            'duration_seconds': time.time() - start_time,
        }

    def evaluate(self, player_bot: str, computer_bot: str, num_games: int = 100) -> Dict[str, Any]:
        """
        Play ``num_games`` games, alternating who opens, and summarise them.

        Returns:
            Summary with mean/std scores, win counts and win rates per side
        """
        if num_games < 1:
            raise ValueError("num_games must be at least 1")

        self.logger.logger.info(f"Evaluating {player_bot} (Player) vs {computer_bot} (Computer) "
                                f"over {num_games} games")

        results: List[Dict[str, Any]] = []
        for game_num in range(num_games):
            order = TurnOrder.PLAYER_FIRST if game_num % 2 == 0 else TurnOrder.COMPUTER_FIRST
            results.append(self.run_single_game(player_bot, computer_bot, order))

            if (game_num + 1) % 100 == 0:
                self.logger.logger.info(f"Progress: {game_num + 1}/{num_games}")

        return self.summarise(results)

    @staticmethod
    def summarise(results: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Aggregate per-game results into score statistics and win rates."""
        player_scores = np.array([r['scores']['Player'] for r in results], dtype=float)
        computer_scores = np.array([r['scores']['Computer'] for r in results], dtype=float)
        winners = np.array([r['winner'] or 'Draw' for r in results])
        num_games = len(results)

        summary = {
            'num_games': num_games,
            'mean_scores': {
                'Player': float(player_scores.mean()),
                'Computer': float(computer_scores.mean()),
            },
            'std_scores': {
                'Player': float(player_scores.std()),
                'Computer': float(computer_scores.std()),
            },
            'wins': {
                'Player': int(np.sum(winners == 'Player')),
                'Computer': int(np.sum(winners == 'Computer')),
                'Draw': int(np.sum(winners == 'Draw')),
            },
        }
        summary['win_rates'] = {name: count / num_games for name, count in summary['wins'].items()}
        return summary


def format_summary(summary: Dict[str, Any]) -> str:
    """Render an evaluation summary for the console."""
    lines = [f"Games played: {summary['num_games']}"]
    for name in ('Player', 'Computer'):
        lines.append(f"  {name}: mean score {summary['mean_scores'][name]:.2f} "
                     f"(std {summary['std_scores'][name]:.2f}), "
                     f"wins {summary['wins'][name]} ({summary['win_rates'][name]:.1%})")
    lines.append(f"  Draws: {summary['wins']['Draw']}")
    return "\n".join(lines)


def run_quick_evaluation():
    """Quick evaluation: heuristic bot against a random baseline."""
    trainer = SelfPlayTrainer(seed=0)

    print("Running quick bot evaluation...")
    summary = trainer.evaluate('random', 'heuristic', num_games=200)
    print(format_summary(summary))

    return summary


if __name__ == "__main__":
    run_quick_evaluation()
