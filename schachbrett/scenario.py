"""A fixed opening sequence and a move inspection used to check the game logic."""

from __future__ import annotations

from typing import Sequence

from schachbrett.character import Board, Character, Square

_TEST_MOVES: tuple[tuple[Square, Square], ...] = (
    ((6, 3), (5, 3)),
    ((1, 2), (2, 2)),
    ((6, 7), (5, 7)),
    ((0, 3), (3, 0)),
)


def _piece_at(board: Board, square: Sequence[int]) -> Character:
    piece = board[square[0]][square[1]]
    if piece is None:
        raise ValueError(f"no piece on {tuple(square)}")
    return piece


def apply_test_moves(board: Board) -> Board:
    """Play the fixed opening on the starting board and return the result."""
    for origin, target in _TEST_MOVES:
        board = _piece_at(board, origin).move(board, target)
    return board


def possible_moves(board: Board, row: int = 4, col: int = 3) -> tuple[list[Square], list[Square]]:
    """Return the moves and kills of the piece on (row, col).

    Raises ValueError when the square is empty.
    """
    piece = _piece_at(board, (row, col))
    piece.check_moves(board)
    return list(piece.moves), list(piece.kills)