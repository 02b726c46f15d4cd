"""
connect_four.players - Move policies for Connect Four

A player picks a column for its mark given the current board. There are two
kinds: a human reading moves from an input source, and a one-ply heuristic
computer opponent.
"""

from connect_four.players.base import BasePlayer
from connect_four.players.human import HumanPlayer
from connect_four.players.heuristic import HeuristicPlayer

__all__ = ['BasePlayer', 'HumanPlayer', 'HeuristicPlayer']
