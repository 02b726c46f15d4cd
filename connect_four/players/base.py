"""
base.py - Common interface for Connect Four players
"""

from abc import ABC, abstractmethod

from connect_four.game.board import Board
from connect_four.utils import Mark


class BasePlayer(ABC):
    """A player owns a mark and chooses a column for it each turn."""
    
    def __init__(self, mark: Mark):
        if not isinstance(mark, Mark) or not mark.is_player():
            raise ValueError(f"A player needs the X or O mark, got {mark!r}")
        self.mark = mark
    
    @property
    def name(self) -> str:
        return f"Player {self.mark}"
    
    @abstractmethod
    def choose_column(self, board: Board) -> int:
        """
        Choose the column to play.
        
        Args:
            board: The current game board; implementations must not modify it
            
        Returns:
            The chosen column (0-indexed)
        """
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.mark})"
