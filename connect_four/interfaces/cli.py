"""
cli.py - Command-line interface for console Connect Four

This module provides the CLI for playing games (one or two players), analyzing
a board position, and benchmarking the board and the heuristic player.
"""

import argparse
import random
import sys
from typing import Callable, List, Optional

import numpy as np

from connect_four.debug import debug, DebugLevel
from connect_four.game.board import Board
from connect_four.game.rules import GameMode, new_game
from connect_four.interfaces.display import ConsoleDisplay
from connect_four.players.heuristic import HeuristicPlayer
from connect_four.utils import AI_THINK_DELAY, COLS, Mark, parse_position

MENU = (
    "Choose game mode:\n"
    "1. One-player (You vs Computer)\n"
    "2. Two-player (Player X vs Player O)"
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all CLI commands."""
    parser = argparse.ArgumentParser(description='Connect Four in the console')
    
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--debug', action='store_true',
                        help='Enable debug mode (equivalent to --debug_level debug)')
    common.add_argument('--debug_level',
                        choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                        default='warning',
                        help='Set debug level: none (silent) ... trace (most verbose)')
    common.add_argument('--log_file', type=str, default=None,
                        help='Also write log records to this file')
    
    subparsers = parser.add_subparsers(dest='command', help='Command to run')
    
    # Play command
    play_parser = subparsers.add_parser('play', parents=[common], help='Play a game interactively')
    play_parser.add_argument('--mode', type=int, choices=[1, 2], default=None,
                             help='1: you vs computer, 2: two players (asks if omitted)')
    play_parser.add_argument('--seed', type=int, default=None,
                             help='Seed for the coin flip and the computer player')
    play_parser.add_argument('--think-delay', type=float, default=AI_THINK_DELAY,
                             help='Seconds the computer pauses before moving')
    play_parser.add_argument('--no-clear', action='store_true',
                             help='Do not clear the screen between moves')
    
    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', parents=[common],
                                           help='Analyze a board position')
    analyze_parser.add_argument('--position', type=str, required=True,
                                help='42 comma-separated values (0 empty, 1 X, 2 O), top row first')
    
    # Benchmark command
    benchmark_parser = subparsers.add_parser('benchmark', parents=[common],
                                             help='Benchmark performance')
    benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                  help='Number of iterations for benchmarking')
    
    return parser


def configure_debug(args: argparse.Namespace) -> None:
    """Configure debug level and log file based on the parsed arguments."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)
    
    if args.log_file:
        debug.configure(log_file=args.log_file)


class SimpleCLI:
    """Command-line interface for Connect Four."""
    
    def __init__(self, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        """
        Initialize the CLI.
        
        Args:
            input_fn: Source of user input lines
            output_fn: Sink for user-facing text
        """
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.args: Optional[argparse.Namespace] = None
    
    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        self.args = build_parser().parse_args(argv)
        if self.args.command is not None:
            configure_debug(self.args)
    
    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the CLI based on the parsed arguments.
        
        Returns:
            Process exit status
        """
        if self.args is None:
            self.parse_args(argv)
        
        if self.args.command == 'play':
            return self.play()
        elif self.args.command == 'analyze':
            return self.analyze()
        elif self.args.command == 'benchmark':
            return self.benchmark()
        
        self.output_fn("Please specify a command. Use --help for options.")
        return 1
    
    def choose_mode(self) -> GameMode:
        """Ask which game mode to play. Anything but '1' means two players."""
        if self.args.mode is not None:
            return GameMode(self.args.mode)
        
        self.output_fn(MENU)
        choice = self.input_fn("> ").strip()
        return GameMode.ONE_PLAYER if choice == "1" else GameMode.TWO_PLAYER
    
    def play(self) -> int:
        """Play games until the user declines a rematch."""
        rng = np.random.default_rng(self.args.seed)
        display = ConsoleDisplay(output_fn=self.output_fn,
                                 clear_screen=not self.args.no_clear)
        
        try:
            while True:
                mode = self.choose_mode()
                game = new_game(mode,
                                input_fn=self.input_fn,
                                output_fn=self.output_fn,
                                display=display,
                                rng=rng,
                                think_delay=self.args.think_delay)
                game.play()
                
                answer = self.input_fn("Play again? (y/n): ")
                if answer.strip().lower() != "y":
                    break
        except (EOFError, KeyboardInterrupt):
            self.output_fn("\nQuitting game.")
        
        return 0
    
    def analyze(self) -> int:
        """Report the outcome, valid moves and a suggested move for a position."""
        try:
            board = Board.from_snapshot(parse_position(self.args.position))
        except ValueError as e:
            debug.error(f"Could not parse position: {e}", "cli")
            self.output_fn(f"Error parsing position: {e}")
            return 1
        
        x_count = int(np.sum(board.grid == Mark.X.value))
        o_count = int(np.sum(board.grid == Mark.O.value))
        # X moves first, so X is level with O or exactly one disc ahead
        if x_count - o_count not in (0, 1):
            debug.error(f"Unreachable disc counts: X={x_count}, O={o_count}", "cli")
            self.output_fn(f"Error: position cannot occur in a game (X has {x_count} discs, "
                           f"O has {o_count})")
            return 1
        
        self.output_fn("Loaded position:")
        self.output_fn(board.render())
        
        result = board.outcome()
        self.output_fn(f"\nOutcome: {result.name}")
        if result.winner is not None:
            line = ", ".join(f"({r + 1}, {c + 1})" for r, c in board.get_winning_line(result.winner))
            self.output_fn(f"Winning line for {result.winner}: {line}")
        
        if board.is_full():
            self.output_fn("Board is full")
        else:
            empty_count = int(np.sum(board.grid == Mark.EMPTY.value))
            self.output_fn(f"Empty spaces: {empty_count}")
        
        valid_columns = [col + 1 for col in board.get_valid_moves()]
        self.output_fn(f"Valid moves: {valid_columns}")
        
        if not result.is_game_over():
            to_move = Mark.X if x_count == o_count else Mark.O
            advisor = HeuristicPlayer(to_move, seed=0, think_delay=0)
            column = advisor.choose_column(board)
            self.output_fn(f"Suggested move for {to_move}: column {column + 1} "
                           f"({advisor.last_decision})")
        
        return 0
    
    def benchmark(self) -> int:
        """Benchmark the performance of the board and the heuristic player."""
        iterations = self.args.iterations
        if iterations <= 0:
            self.output_fn("Iterations must be a positive number.")
            return 1
        
        self.output_fn(f"Running benchmark with {iterations} iterations...")
        rng = random.Random(0)
        
        # Benchmark board initialization
        debug.start_timer("board_init")
        for _ in range(iterations):
            Board()
        board_init_time = debug.end_timer("board_init", "cli")
        self.output_fn(f"Board initialization: {board_init_time:.6f} seconds total, "
                       f"{board_init_time / iterations * 1000:.6f} ms per board")
        
        # Benchmark drops, starting over whenever a game ends
        board = Board()
        mark = Mark.X
        debug.start_timer("drops")
        for _ in range(iterations):
            if board.drop(rng.randrange(COLS), mark):
                if board.outcome().is_game_over():
                    board.reset()
                mark = mark.other()
        drops_time = debug.end_timer("drops", "cli")
        self.output_fn(f"Dropping {iterations} discs: {drops_time:.6f} seconds total, "
                       f"{drops_time / iterations * 1000:.6f} ms per drop")
        
        # Benchmark win checks on random midgame boards
        boards = [self._random_board(rng) for _ in range(min(iterations, 200))]
        debug.start_timer("win_check")
        for i in range(iterations):
            boards[i % len(boards)].check_win(Mark.X)
        win_check_time = debug.end_timer("win_check", "cli")
        self.output_fn(f"Performing {iterations} win checks: {win_check_time:.6f} seconds total, "
                       f"{win_check_time / iterations * 1000:.6f} ms per check")
        
        # Benchmark heuristic decisions
        player = HeuristicPlayer(Mark.X, seed=0, think_delay=0)
        decisions = [b for b in boards if b.get_valid_moves()]
        rounds = max(1, iterations // 10)
        debug.start_timer("heuristic")
        for i in range(rounds):
            player.choose_column(decisions[i % len(decisions)])
        heuristic_time = debug.end_timer("heuristic", "cli")
        self.output_fn(f"Making {rounds} heuristic decisions: {heuristic_time:.6f} seconds total, "
                       f"{heuristic_time / rounds * 1000:.6f} ms per decision")
        
        return 0
    
    @staticmethod
    def _random_board(rng: random.Random) -> Board:
        """A board with 7 to 20 random drops that has no winner yet."""
        board = Board()
        mark = Mark.X
        for _ in range(rng.randint(7, 20)):
            trial = board.copy()
            if trial.drop(rng.randrange(COLS), mark):
                if trial.check_win(mark):
                    break
                board = trial
                mark = mark.other()
        return board


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
