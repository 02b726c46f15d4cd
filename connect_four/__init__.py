"""
connect_four - Console Connect Four with a one-ply heuristic opponent

This package provides the board model with win and full detection, two kinds
of players (human and heuristic computer), the turn loop that drives a game,
and a command-line interface for playing and analyzing positions.
"""

# Version number
__version__ = '1.0.0'
