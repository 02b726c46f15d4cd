"""
display.py - Display sinks for board renderings and game announcements
"""

from typing import Callable

from connect_four.game.board import Board

CLEAR_SCREEN = "\033[2J\033[H"


class Display:
    """A display that ignores everything. Used when nobody is watching."""
    
    def show_board(self, board: Board) -> None:
        pass
    
    def announce(self, message: str) -> None:
        pass


class ConsoleDisplay(Display):
    """Prints the board and announcements as plain text."""
    
    def __init__(self, output_fn: Callable[[str], None] = print, clear_screen: bool = True):
        self.output_fn = output_fn
        self.clear_screen = clear_screen
    
    def show_board(self, board: Board) -> None:
        if self.clear_screen:
            self.output_fn(CLEAR_SCREEN)
        self.output_fn(board.render())
    
    def announce(self, message: str) -> None:
        self.output_fn(message)
