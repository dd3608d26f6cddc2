"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.

Console commands:
    1-9   place a mark (cells numbered left to right, top to bottom)
    r     restart the round (opening mark alternates)
    a     reset all (scores and computer opponent)
    c     toggle the computer opponent (only before any moves or scores)
    q     quit
"""

import time
from typing import Optional

from engine.config import GameConfig
from engine.game_engine import GameEngine
from engine.ai_player import RandomPlayer
from engine.scheduler import ManualScheduler


class ConsoleGame:
    """
    Console front-end for the engine.

    The console loop owns the clock: when a computer move is pending it
    sleeps for the delay, then advances the scheduler.
    """

    def __init__(self, config: GameConfig, opponent_mode: bool = False):
        self.config = config
        self.scheduler = ManualScheduler()
        self.engine = GameEngine(
            config=config,
            scheduler=self.scheduler,
            player=RandomPlayer(seed=config.AI_SEED)
        )
        if opponent_mode:
            self.engine.set_opponent_mode(True)
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\nCells are numbered 1-9. Commands: r=restart, a=reset all, c=computer, q=quit\n")
        self.is_running = True
        self.engine.print_board()

        while self.is_running:
            if self._wait_for_computer():
                self.engine.print_board()
                continue

            try:
                command = input("\n> ").strip().lower()
            except EOFError:
                break
            self._handle(command)

        print("Goodbye!")

    def _wait_for_computer(self) -> bool:
        """Let time pass for a scheduled computer move. True if one ran."""
        has_pending, wait_ms = self.scheduler.next_due()
        if not has_pending:
            return False

        print("Computer is thinking...")
        time.sleep(wait_ms / 1000.0)
        return self.scheduler.advance(wait_ms) > 0

    def _handle(self, command: str):
        """Process one console command."""
        if command == "q":
            self.is_running = False
            return
        if command == "r":
            self.engine.restart_round()
        elif command == "a":
            self.engine.reset_all()
        elif command == "c":
            if not self.engine.set_opponent_mode(not self.engine.opponent_mode):
                print(self.engine.last_rejection.error_message)
        elif command.isdigit():
            if self.engine.is_computer_turn():
                print("Wait for the computer to move.")
                return
            if not self.engine.place_mark(int(command) - 1):
                print(f"Illegal move: {self.engine.last_rejection.error_message}")
                return
        else:
            print("Please type 1-9, r, a, c or q.")
            return

        self.engine.print_board()


def build_config(delay_ms: Optional[int], seed: Optional[int], debug: bool) -> GameConfig:
    """Apply command line overrides to a fresh GameConfig."""
    config = GameConfig()
    if delay_ms is not None:
        config.AI_MOVE_DELAY_MS = max(0, delay_ms)
    if seed is not None:
        config.AI_SEED = seed
    config.DEBUG_MODE = debug
    return config


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--ai",
        action="store_true",
        help="Play against the computer (it plays O)"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=None,
        help="Computer move delay in milliseconds (default: 500)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print engine diagnostics"
    )

    args = parser.parse_args()
    config = build_config(args.delay, args.seed, args.debug)

    print("\n" + "="*40)
    print("   TicTacToe")
    print("="*40)
    print(f"   Opponent: {'Computer' if args.ai else 'Human'}")
    print("="*40 + "\n")

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(config=config, opponent_mode=args.ai)
        ui.run()
        return

    game = ConsoleGame(config, opponent_mode=args.ai)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")


if __name__ == "__main__":
    main()
