import random

from roomserver.models import Mark
from .tictactoe import Board, available_moves


def make_bot_move(board: Board, mark: Mark, rng: random.Random) -> Board:
    """Play `mark` on a uniformly random empty cell.

    Returns a new board. A full board comes back unchanged, although callers
    check for a finished game before asking the bot to move.
    """
    available = available_moves(board)
    if not available:
        return board
    new_board = list(board)
    new_board[rng.choice(available)] = mark
    return new_board
