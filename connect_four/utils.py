"""
utils.py - Constants, enumerations and grid helpers for console Connect Four

This module provides the board dimensions, the Mark and GameResult enumerations,
and the plain numpy-grid helpers (window scanning, gravity checks, position
parsing and ASCII rendering) shared by the board, the players and the CLI.
"""

from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

# Cosmetic pause before the computer answers, in seconds
AI_THINK_DELAY = 0.5

COLUMN_LEGEND = " ".join(str(col + 1) for col in range(COLS))

Coord = Tuple[int, int]  # (row, col)


class Mark(Enum):
    """Enumeration representing player marks and cell states."""
    EMPTY = 0
    X = 1    # Moves first
    O = 2
    
    def other(self) -> "Mark":
        """Get the opposing mark."""
        if self == Mark.X:
            return Mark.O
        elif self == Mark.O:
            return Mark.X
        return Mark.EMPTY
    
    def is_player(self) -> bool:
        return self != Mark.EMPTY
    
    def __str__(self):
        if self == Mark.EMPTY:
            return "."
        return self.name


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    X_WIN = auto()
    O_WIN = auto()
    DRAW = auto()
    
    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS
    
    @property
    def winner(self) -> Optional[Mark]:
        """The winning mark, or None for a draw or a game still in progress."""
        if self == GameResult.X_WIN:
            return Mark.X
        if self == GameResult.O_WIN:
            return Mark.O
        return None
    
    @classmethod
    def win_for(cls, mark: Mark) -> "GameResult":
        if mark == Mark.X:
            return cls.X_WIN
        if mark == Mark.O:
            return cls.O_WIN
        raise ValueError(f"No win result for mark {mark!r}")


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # Diagonal from bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Diagonal from top-left to bottom-right


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1)
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.
    
    Args:
        row: Row index
        col: Column index
    
    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def iter_windows() -> Iterator[Tuple[Direction, List[Coord]]]:
    """
    Yield every CONNECT_N-cell window on the board, in all four directions.
    
    Windows are produced direction by direction, top-left first, which fixes
    the order in which find_line reports a winning line.
    """
    for direction, (dr, dc) in DIRECTION_VECTORS.items():
        for row in range(ROWS):
            for col in range(COLS):
                end_row = row + dr * (CONNECT_N - 1)
                end_col = col + dc * (CONNECT_N - 1)
                if not is_valid_position(end_row, end_col):
                    continue
                yield direction, [(row + i * dr, col + i * dc) for i in range(CONNECT_N)]


# The window layout never changes, so it is computed once
WINDOWS: List[Tuple[Direction, List[Coord]]] = list(iter_windows())


def find_line(grid: np.ndarray, mark: Mark) -> List[Coord]:
    """
    Find the first window completely filled with `mark`.
    
    Args:
        grid: ROWS x COLS array of Mark values
        mark: The mark to look for
    
    Returns:
        The window's coordinates, or an empty list if there is none
    """
    if not mark.is_player():
        return []
    
    value = mark.value
    for _, cells in WINDOWS:
        if all(grid[r, c] == value for r, c in cells):
            return cells
    return []


def get_column_height(grid: np.ndarray, column: int) -> int:
    """Number of pieces currently stacked in a column."""
    return int(np.count_nonzero(grid[:, column] != Mark.EMPTY.value))


def obeys_gravity(grid: np.ndarray) -> bool:
    """
    Check that every column is a contiguous stack resting on the bottom row.
    
    Args:
        grid: ROWS x COLS array of Mark values
    
    Returns:
        True if no column has an empty cell underneath an occupied one
    """
    occupied = grid != Mark.EMPTY.value
    for col in range(COLS):
        height = get_column_height(grid, col)
        if not occupied[ROWS - height:, col].all():
            return False
    return True


def parse_position(position: str) -> np.ndarray:
    """
    Parse a comma-separated position string into a grid.
    
    The string lists ROWS * COLS values from {0, 1, 2} in row-major order,
    starting with the top row.
    
    Raises:
        ValueError: If the string is malformed or the position breaks gravity
    """
    try:
        values = [int(token) for token in position.split(',')]
    except ValueError:
        raise ValueError("Position values must be integers 0, 1 or 2") from None
    
    if len(values) != ROWS * COLS:
        raise ValueError(f"Position string must have {ROWS * COLS} values, got {len(values)}")
    
    allowed = {mark.value for mark in Mark}
    if any(value not in allowed for value in values):
        raise ValueError("Position values must be integers 0, 1 or 2")
    
    grid = np.array(values, dtype=np.int8).reshape(ROWS, COLS)
    if not obeys_gravity(grid):
        raise ValueError("Position has a floating piece (gap below an occupied cell)")
    return grid


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board as plain text.
    
    One line per row with the cells separated by spaces, followed by the
    column legend.
    
    Args:
        grid: ROWS x COLS array of Mark values
    
    Returns:
        Text representation of the board
    """
    lines = [" ".join(str(Mark(int(cell))) for cell in grid[row]) for row in range(ROWS)]
    lines.append(COLUMN_LEGEND)
    return "\n".join(lines)
