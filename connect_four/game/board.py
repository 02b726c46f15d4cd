"""
board.py - Board representation and core game mechanics for Connect Four

This module implements the Board class which represents the Connect Four game board
and provides methods for dropping discs, checking win and full conditions, and
taking snapshots for speculative evaluation.
"""

import numpy as np
from typing import List, Optional, Tuple

from connect_four.debug import debug
from connect_four.utils import (ROWS, COLS, Mark, GameResult, Coord,
                                find_line, get_column_height, obeys_gravity,
                                render_board_ascii)


class Board:
    """
    Represents a Connect Four game board.
    
    The grid is a ROWS x COLS numpy array of Mark values with row 0 at the top.
    The only way to change it is drop(), which keeps every column stacked from
    the bottom with no gaps.
    """
    
    def __init__(self):
        """Initialize an empty Connect Four board."""
        debug.trace("Initializing new Board", "board")
        self.reset()
    
    def reset(self):
        """Reset the board to an empty state."""
        self.grid = np.zeros((ROWS, COLS), dtype=np.int8)
        self.last_move: Optional[Tuple[int, int]] = None
    
    @classmethod
    def from_snapshot(cls, snapshot) -> 'Board':
        """
        Build an independent, mutable board from a snapshot.
        
        Args:
            snapshot: A ROWS x COLS array-like of Mark values
            
        Returns:
            A new Board that shares no memory with the snapshot
            
        Raises:
            ValueError: If the shape or the values are wrong, or a piece is floating
        """
        raw = np.asarray(snapshot)
        if raw.shape != (ROWS, COLS):
            raise ValueError(f"Snapshot must be {ROWS}x{COLS}, got {raw.shape}")
        if not np.issubdtype(raw.dtype, np.integer):
            raise ValueError(f"Snapshot must hold integers, got dtype {raw.dtype}")
        # Check the raw values before narrowing, so out-of-range integers cannot wrap
        if not np.isin(raw, [mark.value for mark in Mark]).all():
            raise ValueError("Snapshot contains values that are not marks")
        
        grid = raw.astype(np.int8)
        if not obeys_gravity(grid):
            raise ValueError("Snapshot has a floating piece (gap below an occupied cell)")
        
        board = cls()
        board.grid = grid
        return board
    
    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.
        
        Returns:
            A new Board instance with the same state
        """
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board.last_move = self.last_move
        return new_board
    
    def snapshot(self) -> np.ndarray:
        """
        Get a read-only copy of the grid.
        
        Returns:
            A ROWS x COLS array that is detached from this board
        """
        grid = self.grid.copy()
        grid.flags.writeable = False
        return grid
    
    def cell(self, row: int, col: int) -> Mark:
        return Mark(int(self.grid[row, col]))
    
    def is_valid_move(self, column: int) -> bool:
        """
        Check if a disc can be dropped into a column.
        
        Args:
            column: The column to check (0-indexed)
            
        Returns:
            True if the column is on the board and not yet full
        """
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            return False
        if not (0 <= column < COLS):
            return False
        return bool(self.grid[0, column] == Mark.EMPTY.value)
    
    def get_valid_moves(self) -> List[int]:
        """
        Get a list of valid columns where a disc can be placed.
        
        Returns:
            List of valid column indices, in ascending order
        """
        return [col for col in range(COLS) if self.grid[0, col] == Mark.EMPTY.value]
    
    def drop(self, column: int, mark: Mark) -> bool:
        """
        Drop a disc into the specified column.
        
        The disc settles in the lowest empty cell. An invalid column or a
        non-player mark leaves the board untouched.
        
        Args:
            column: The column to drop into (0-indexed)
            mark: The mark to place
            
        Returns:
            True if the disc was placed, False otherwise
        """
        if not isinstance(mark, Mark) or not mark.is_player():
            debug.debug(f"Invalid move: {mark!r} is not a player mark", "board")
            return False
        
        if not self.is_valid_move(column):
            debug.debug(f"Invalid move: column {column} is out of range or full", "board")
            return False
        
        column = int(column)
        row = ROWS - get_column_height(self.grid, column) - 1
        self.grid[row, column] = mark.value
        self.last_move = (row, column)
        debug.trace(f"Placed {mark} at ({row}, {column})", "board")
        return True
    
    def is_full(self) -> bool:
        """Check whether every column is full (gravity makes the top row enough)."""
        return bool(np.all(self.grid[0] != Mark.EMPTY.value))
    
    def check_win(self, mark: Mark) -> bool:
        """
        Check if `mark` has CONNECT_N or more in a row anywhere on the board.
        
        Every window in all four directions is scanned, so the result does not
        depend on which disc was placed last.
        """
        return bool(find_line(self.grid, mark))
    
    def get_winning_line(self, mark: Mark) -> List[Coord]:
        """
        Get the positions of a winning line for `mark`.
        
        Returns:
            List of (row, col) positions forming the line, or empty list if no win
        """
        return find_line(self.grid, mark)
    
    def outcome(self) -> GameResult:
        """Derive the game result from the current grid."""
        for mark in (Mark.X, Mark.O):
            if self.check_win(mark):
                return GameResult.win_for(mark)
        if self.is_full():
            return GameResult.DRAW
        return GameResult.IN_PROGRESS
    
    def move_count(self) -> int:
        return int(np.count_nonzero(self.grid))
    
    def render(self) -> str:
        """
        Render the board as a string.
        
        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)
    
    def __str__(self) -> str:
        return self.render()
