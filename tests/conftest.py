"""Shared fixtures and board builders for the test suite."""

import numpy as np
import pytest

from connect_four.debug import debug, DebugLevel
from connect_four.game.board import Board
from connect_four.players.base import BasePlayer
from connect_four.utils import Mark

SYMBOLS = {".": Mark.EMPTY.value, "X": Mark.X.value, "O": Mark.O.value}

# A full board with no four in a row for either side
DRAW_ROWS = (
    "XOXOXOX",
    "XOXOXOX",
    "OXOXOXO",
    "OXOXOXO",
    "XOXOXOX",
    "XOXOXOX",
)


def board_from_rows(*rows: str) -> Board:
    """Build a board from six strings of '.', 'X' and 'O', top row first."""
    grid = np.array([[SYMBOLS[ch] for ch in row] for row in rows], dtype=np.int8)
    return Board.from_snapshot(grid)


class ScriptedPlayer(BasePlayer):
    """Plays a fixed list of columns, one per call."""

    def __init__(self, mark, columns):
        super().__init__(mark)
        self.columns = list(columns)
        self.calls = 0

    def choose_column(self, board):
        self.calls += 1
        return self.columns.pop(0)


class RecordingDisplay:
    def __init__(self):
        self.boards = []
        self.messages = []

    def show_board(self, board):
        self.boards.append(board.render())

    def announce(self, message):
        self.messages.append(message)


class ScriptedInput:
    """An input_fn that answers prompts from a list and raises EOFError when empty."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture(autouse=True)
def quiet_debug():
    """Keep log output quiet and restore the shared debug settings after each test."""
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")


@pytest.fixture
def empty_board():
    return Board()


@pytest.fixture
def draw_board():
    return board_from_rows(*DRAW_ROWS)


@pytest.fixture
def output():
    lines = []
    return lines


@pytest.fixture(name="board_from_rows")
def board_from_rows_fixture():
    return board_from_rows


@pytest.fixture
def draw_rows():
    return DRAW_ROWS


@pytest.fixture
def scripted_player():
    return ScriptedPlayer


@pytest.fixture
def scripted_input():
    return ScriptedInput


@pytest.fixture
def recording_display():
    return RecordingDisplay()
