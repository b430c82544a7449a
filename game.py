#!/usr/bin/env python3
"""Hex Realm - Main entry point.

A turn-based territorial economy game where two players collect, invest
and attack region deposits with a single crew each, until one of them
owns no region.
"""

import argparse
import logging
import sys

from hexrealm.engine import GameEngine, create_game
from hexrealm.interface.human_player import HumanPlayer
from hexrealm.models import Configuration, ConfigurationError, load_configuration


class GameOrchestrator:
    """Manages turn loop and player coordination."""

    def __init__(self, engine: GameEngine, p1_controller, p2_controller):
        """Initialize game orchestrator.

        Args:
            engine: Engine waiting for the first turn
            p1_controller: Controller for player 1
            p2_controller: Controller for player 2
        """
        self.engine = engine
        self.players = {"p1": p1_controller, "p2": p2_controller}

    def run(self) -> GameEngine:
        """Main game loop."""
        print("\n" + "=" * 60)
        print("Hex Realm")
        print("=" * 60)
        print("\nGoal: leave your opponent without a single region!")
        print("Type 'help' at the prompt for commands.\n")

        try:
            while not self.engine.is_game_over():
                player = self.engine.begin_turn()
                self.players[player.id].play_turn(self.engine)
                self.engine.end_turn()
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user. Exiting...")
            sys.exit(0)

        self._show_victory()
        return self.engine

    def _show_victory(self) -> None:
        winner = self.engine.winner
        print("\n" + "=" * 60)
        if winner == "draw":
            print("Both players were eliminated - the game is a draw.")
        else:
            name = self.engine.game.get_player(winner).name
            print(f"{name} ({winner}) wins after {self.engine.turn - 1} turns!")
        print("=" * 60)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Hex Realm - Turn-based territorial economy game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # New game with default configuration
  %(prog)s --config realm.cfg       # Load key=value configuration file
  %(prog)s --seed 7 --debug         # Specific seed, verbose engine logs
        """,
    )
    parser.add_argument("--config", type=str, metavar="FILE", help="Configuration file (key=value lines)")
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for city-center placement (default: 42)",
    )
    parser.add_argument("--p1-name", type=str, default="Player 1", help="Display name of player 1")
    parser.add_argument("--p2-name", type=str, default="Player 2", help="Display name of player 2")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if args.config:
        try:
            config = load_configuration(args.config)
        except FileNotFoundError:
            print(f"Error: File {args.config} not found.")
            sys.exit(1)
        except ConfigurationError as e:
            print(f"Error in configuration: {e}")
            sys.exit(1)
    else:
        config = Configuration()

    try:
        engine = create_game(config, seed=args.seed, names=(args.p1_name, args.p2_name))
    except ValueError as e:
        print(f"Error creating game: {e}")
        sys.exit(1)

    orchestrator = GameOrchestrator(engine, HumanPlayer("p1"), HumanPlayer("p2"))
    orchestrator.run()


if __name__ == "__main__":
    main()
