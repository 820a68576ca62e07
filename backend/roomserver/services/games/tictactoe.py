from typing import List, Optional

from roomserver.models import Mark

Board = List[Optional[Mark]]

LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def empty_board() -> Board:
    return [None] * 9


def calculate_winner(board: Board) -> Optional[Mark]:
    """Return the mark holding a full line, or None.

    Always evaluated from the whole board; nothing is tracked between moves.
    """
    for a, b, c in LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
    return None


def available_moves(board: Board) -> List[int]:
    return [i for i, cell in enumerate(board) if cell is None]


def is_draw(board: Board) -> bool:
    return not available_moves(board) and calculate_winner(board) is None


def other_mark(mark: Mark) -> Mark:
    return Mark.O if mark == Mark.X else Mark.X
