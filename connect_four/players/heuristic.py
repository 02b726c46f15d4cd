"""
heuristic.py - One-ply heuristic computer player for Connect Four

This module provides a HeuristicPlayer that looks exactly one move ahead:

1. Play a column that wins immediately, if there is one
2. Otherwise block a column where the opponent would win immediately
3. Otherwise pick uniformly at random among the playable columns

Each tier walks the valid columns in ascending order and every candidate is
tried on a board rebuilt from a snapshot, so the live board is never touched.
Forks and deeper threats are deliberately not considered.
"""

import time
from typing import Callable, List, Optional

import numpy as np

from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.players.base import BasePlayer
from connect_four.utils import AI_THINK_DELAY, Mark


def find_winning_column(board: Board, mark: Mark, columns: List[int]) -> Optional[int]:
    """
    Find the lowest column in which dropping `mark` wins at once.
    
    Args:
        board: The current game board (left unchanged)
        mark: The mark to simulate
        columns: Candidate columns, in the order they should be tried
        
    Returns:
        The first winning column, or None if no candidate wins
    """
    snapshot = board.snapshot()
    for column in columns:
        trial = Board.from_snapshot(snapshot)
        if trial.drop(column, mark) and trial.check_win(mark):
            return column
    return None


class HeuristicPlayer(BasePlayer):
    """A computer player: win if possible, block if needed, else random."""
    
    def __init__(self, mark: Mark,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 think_delay: float = AI_THINK_DELAY,
                 sleep_fn: Callable[[float], None] = time.sleep):
        """
        Initialize the heuristic player.
        
        Args:
            mark: The mark this player places
            rng: Random generator for the fallback tier
            seed: Seed for a new generator, used only when rng is None
            think_delay: Pause in seconds before answering (cosmetic)
            sleep_fn: Function used to pause
        """
        super().__init__(mark)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.think_delay = think_delay
        self.sleep_fn = sleep_fn
        self.last_decision: Optional[str] = None
    
    def choose_column(self, board: Board) -> int:
        valid_moves = board.get_valid_moves()
        if not valid_moves:
            raise ValueError("No valid moves left on the board")
        
        if self.think_delay > 0:
            self.sleep_fn(self.think_delay)
        
        column = find_winning_column(board, self.mark, valid_moves)
        if column is not None:
            self.last_decision = "win"
        else:
            column = find_winning_column(board, self.mark.other(), valid_moves)
            if column is not None:
                self.last_decision = "block"
            else:
                column = int(self.rng.choice(valid_moves))
                self.last_decision = "random"
        
        debug.info(f"Computer {self.mark} plays column {column + 1} ({self.last_decision})", "ai")
        return column
