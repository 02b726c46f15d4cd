"""
rules.py - Turn loop and game setup for Connect Four

This module provides:
1. ConnectFourGame, the context object for a single game: one board, two
   players and whose turn it is
2. new_game, which picks the players for a game mode and builds a fresh context
"""

from enum import Enum
from typing import Callable, List, Optional, Tuple

import numpy as np

from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.interfaces.display import Display
from connect_four.players.base import BasePlayer
from connect_four.players.heuristic import HeuristicPlayer
from connect_four.players.human import HumanPlayer
from connect_four.utils import AI_THINK_DELAY, GameResult, Mark


class GameMode(Enum):
    """Who is playing."""
    ONE_PLAYER = 1  # Human vs computer
    TWO_PLAYER = 2  # Human vs human


class ConnectFourGame:
    """
    A single game of Connect Four.
    
    The first player moves first. Turns alternate until one player connects
    four or the board fills up. A rejected move is asked for again from the
    same player without passing the turn.
    """
    
    def __init__(self, player_one: BasePlayer, player_two: BasePlayer,
                 display: Optional[Display] = None):
        """
        Initialize a new game.
        
        Args:
            player_one: The player who moves first
            player_two: The player who moves second
            display: Sink for board renderings and announcements
        """
        if player_one.mark == player_two.mark:
            raise ValueError(f"Both players use mark {player_one.mark}")
        
        debug.debug(f"Initializing ConnectFourGame: {player_one!r} vs {player_two!r}", "game")
        self.board = Board()
        self.players: Tuple[BasePlayer, BasePlayer] = (player_one, player_two)
        self.current_index = 0
        self.display = display if display is not None else Display()
        self.history: List[Tuple[Mark, int]] = []
    
    @property
    def current_player(self) -> BasePlayer:
        return self.players[self.current_index]
    
    def result(self) -> GameResult:
        """The outcome so far, derived from the board."""
        return self.board.outcome()
    
    def is_game_over(self) -> bool:
        return self.result().is_game_over()
    
    def play_turn(self) -> GameResult:
        """
        Play one turn for the current player.
        
        Returns:
            The game result after the move
            
        Raises:
            RuntimeError: If the game is already over
        """
        if self.is_game_over():
            raise RuntimeError("The game is already over")
        
        player = self.current_player
        self.display.announce(f"{player.name}'s turn.")
        
        while True:
            column = player.choose_column(self.board)
            if self.board.drop(column, player.mark):
                break
            debug.debug(f"{player!r} chose unplayable column {column}", "game")
            self.display.announce("Column is full or invalid. Try again.")
        
        self.history.append((player.mark, column))
        debug.debug(f"Move {len(self.history)}: {player.mark} in column {column + 1}", "game")
        
        if self.board.check_win(player.mark):
            return GameResult.win_for(player.mark)
        if self.board.is_full():
            return GameResult.DRAW
        
        self.current_index = 1 - self.current_index
        self.display.show_board(self.board)
        return GameResult.IN_PROGRESS
    
    def play(self) -> GameResult:
        """
        Play turns until the game ends, then announce the outcome.
        
        Returns:
            The final game result
        """
        self.display.show_board(self.board)
        
        result = self.result()
        while not result.is_game_over():
            result = self.play_turn()
        
        self.display.show_board(self.board)
        if result == GameResult.DRAW:
            self.display.announce("The game is a tie!")
        else:
            self.display.announce(f"Player {result.winner} wins!")
        
        debug.info(f"Game over after {len(self.history)} moves: {result.name}", "game")
        return result


def new_game(mode: GameMode,
             input_fn: Callable[[str], str] = input,
             output_fn: Callable[[str], None] = print,
             display: Optional[Display] = None,
             rng: Optional[np.random.Generator] = None,
             think_delay: float = AI_THINK_DELAY) -> ConnectFourGame:
    """
    Set up the players for a game mode and return a fresh game.
    
    In one-player mode a coin flip decides whether the human plays X and moves
    first or the computer does. In two-player mode X always moves first.
    
    Args:
        mode: One- or two-player game
        input_fn: Input source for human players
        output_fn: Where human players report rejected input
        display: Sink for board renderings and announcements
        rng: Random generator for the coin flip and the computer player
        think_delay: Cosmetic pause for the computer player, in seconds
    """
    rng = rng if rng is not None else np.random.default_rng()
    
    if mode == GameMode.ONE_PLAYER:
        human_first = bool(rng.integers(2) == 0)
        human_mark = Mark.X if human_first else Mark.O
        human = HumanPlayer(human_mark, input_fn=input_fn, output_fn=output_fn)
        computer = HeuristicPlayer(human_mark.other(), rng=rng, think_delay=think_delay)
        players = (human, computer) if human_first else (computer, human)
        debug.info(f"One-player game, human plays {human_mark}", "game")
    else:
        players = (HumanPlayer(Mark.X, input_fn=input_fn, output_fn=output_fn),
                   HumanPlayer(Mark.O, input_fn=input_fn, output_fn=output_fn))
        debug.info("Two-player game", "game")
    
    return ConnectFourGame(players[0], players[1], display=display)
