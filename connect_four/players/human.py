"""
human.py - Interactive player that reads its moves from an input source

Columns are entered 1-based, as printed in the legend under the board, and
returned 0-based like every other player.
"""

from typing import Callable

from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.players.base import BasePlayer
from connect_four.utils import COLS, Mark


class HumanPlayer(BasePlayer):
    """
    A player that keeps asking for a column until it gets a playable one.
    
    Unparseable text, numbers outside 1..COLS and full columns all lead to a
    message and a new prompt. End of input propagates to the caller.
    """
    
    def __init__(self, mark: Mark,
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        """
        Initialize the human player.
        
        Args:
            mark: The mark this player places
            input_fn: Callable returning one line of text for a prompt
            output_fn: Callable used to report rejected input
        """
        super().__init__(mark)
        self.input_fn = input_fn
        self.output_fn = output_fn
    
    def choose_column(self, board: Board) -> int:
        prompt = f"{self.name}, choose a column (1-{COLS}): "
        while True:
            raw = self.input_fn(prompt).strip()
            
            try:
                choice = int(raw)
            except ValueError:
                debug.debug(f"Rejected non-numeric input {raw!r}", "human")
                self.output_fn(f"Invalid input. Please enter a number from 1 to {COLS}.")
                continue
            
            if not (1 <= choice <= COLS):
                debug.debug(f"Rejected out-of-range column {choice}", "human")
                self.output_fn(f"Column must be between 1 and {COLS}.")
                continue
            
            column = choice - 1
            if not board.is_valid_move(column):
                debug.debug(f"Rejected full column {choice}", "human")
                self.output_fn(f"Column {choice} is full. Choose another column.")
                continue
            
            return column
