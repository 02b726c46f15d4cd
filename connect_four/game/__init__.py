"""
connect_four.game - Core game mechanics for Connect Four

This package contains the board representation and the turn loop. The turn
loop lives in connect_four.game.rules and is not imported here because it
depends on the players package, which itself depends on the board.
"""

from connect_four.game.board import Board

__all__ = ['Board']
