#!/usr/bin/env python3
"""
CLI script to watch a game of War.

This script creates a game with N players, deals a shuffled deck and plays
rounds until one player holds every card, printing each round.
"""

import argparse
import logging
import random
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from wargame.config import settings
from wargame.exceptions import EmptyDeckError
from wargame.game import WarGame
from wargame.models.enums import MAX_PLAYERS, MIN_PLAYERS, LeftoverPolicy


class WarGameSimulator:
    """Simulates a game of War between named players."""

    def __init__(self, num_players: int = 2, seed: int | None = None, verbose: bool = True):
        """
        Initialize simulator.

        Args:
            num_players: Number of players (2-52)
            seed: Shuffle seed, random if omitted
            verbose: Print every round, not just the summary
        """
        if not (MIN_PLAYERS <= num_players <= MAX_PLAYERS):
            raise ValueError(f"Must have {MIN_PLAYERS}-{MAX_PLAYERS} players")

        self.num_players = num_players
        self.rng = random.Random(seed)
        self.verbose = verbose
        self.game = WarGame(id="war-001")

    def setup_game(self) -> None:
        """Add the players and deal."""
        print(f"\n{'='*60}")
        print(f"Setting up War with {self.num_players} players")
        print(f"{'='*60}\n")

        for i in range(self.num_players):
            self.game.add_player(f"Player{i+1}")

        self.game.start(rng=self.rng)

        for player in self.game.roster:
            print(f"  {player}")
        if self.game.deck.size():
            print(f"  ({self.game.deck.size()} leftover cards kept aside)")
        if self.game.discarded:
            print(f"  ({len(self.game.discarded)} leftover cards discarded)")
        print()

    def play(self, max_rounds: int) -> None:
        """Play until the game ends or the cap is hit."""
        try:
            while not self.game.is_over() and self.game.rounds_played < max_rounds:
                result = self.game.play_round()
                if self.verbose:
                    print(f"Round {result.number}: {result.resolution}")
                for player in result.eliminated:
                    print(f"  -> {player.name} is out")
        except EmptyDeckError as e:
            name = e.player.name if e.player else "a player"
            print(f"\nRound aborted: {name} ran out of cards mid-war ({len(e.pot)} cards stranded)")
            return

        if not self.game.is_over():
            self.game.play(max_rounds=max_rounds)

        self.show_results()

    def show_results(self) -> None:
        """Display the final standings."""
        print(f"\n{'='*60}")
        print(f"GAME OVER after {self.game.rounds_played} rounds")
        print(f"{'='*60}\n")

        winner = self.game.get_winner()
        if winner:
            print(f"Winner: {winner}")
        else:
            print("No winner (round cap reached)")
            for player in sorted(self.game.roster, key=lambda p: p.card_count, reverse=True):
                print(f"  {player}")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Watch a game of War")
    parser.add_argument(
        "--players", type=int, default=2, help=f"Number of players ({MIN_PLAYERS}-{MAX_PLAYERS})"
    )
    parser.add_argument("--seed", type=int, default=settings.shuffle_seed, help="Shuffle seed")
    parser.add_argument("--max-rounds", type=int, default=settings.max_rounds, help="Round cap")
    parser.add_argument(
        "--leftovers",
        choices=[p.value for p in LeftoverPolicy],
        default=settings.leftover_policy.value,
        help="What to do with cards that do not deal evenly",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the summary")
    parser.add_argument("--log-level", default=settings.log_level, help="Game log level")
    args = parser.parse_args()

    logging.basicConfig(format="%(asctime)s %(name)s %(levelname)s %(message)s")
    settings.leftover_policy = LeftoverPolicy(args.leftovers)
    settings.log_level = args.log_level

    simulator = WarGameSimulator(num_players=args.players, seed=args.seed, verbose=not args.quiet)
    simulator.setup_game()
    simulator.play(max_rounds=args.max_rounds)


if __name__ == "__main__":
    main()
