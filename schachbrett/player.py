"""A player and the set of pieces that player owns."""

from __future__ import annotations

from typing import Sequence

from schachbrett.character import Board, Character
from schachbrett.king import King
from schachbrett.pieces import Bishop, Knight, Pawn, Queen, Rook

_WHITE_LETTERS = "KDTSLB"
_BLACK_LETTERS = "kdtslb"
_SPARE_QUEENS = 3


class Player:
    """A player with a king, queens (spares for promotion), rooks, knights, bishops and pawns.

    Player 1 plays white and starts on the bottom rows (6 and 7); every
    other id plays black and starts on the top rows (0 and 1).
    """

    def __init__(self, name: str, player_id: int) -> None:
        self.name = name
        self.player_id = player_id
        self.color = "White" if player_id == 1 else "Black"
        king, queen, rook, knight, bishop, pawn = (
            _WHITE_LETTERS if player_id == 1 else _BLACK_LETTERS
        )
        self.king = King(king, player_id)
        self.queens = [Queen(queen, player_id) for _ in range(1 + _SPARE_QUEENS)]
        self.rooks = [Rook(rook, player_id) for _ in range(2)]
        self.knights = [Knight(knight, player_id) for _ in range(2)]
        self.bishops = [Bishop(bishop, player_id) for _ in range(2)]
        self.pawns = [Pawn(pawn, player_id) for _ in range(8)]

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, player_id={self.player_id})"

    @property
    def _back_row(self) -> int:
        return 7 if self.player_id == 1 else 0

    @property
    def _pawn_row(self) -> int:
        return 6 if self.player_id == 1 else 1

    def put_pieces(self, board: Board) -> Board:
        """Place the starting pieces on a copy of ``board`` and return it."""
        board = [line[:] for line in board]
        back_row = self._back_row
        layout: list[Character] = [
            self.rooks[0],
            self.knights[0],
            self.bishops[0],
            self.queens[0],
            self.king,
            self.bishops[1],
            self.knights[1],
            self.rooks[1],
        ]
        for col, piece in enumerate(layout):
            piece.position = (back_row, col)
            board[back_row][col] = piece
        pawn_row = self._pawn_row
        for col, pawn in enumerate(self.pawns):
            pawn.position = (pawn_row, col)
            board[pawn_row][col] = pawn
        for spare in self.queens[1:]:
            spare.position = None
        return board

    def promote(self, board: Board, position: Sequence[int]) -> Board:
        """Replace the piece on ``position`` with an unused queen and return the board.

        Raises ValueError when every queen has already been used.
        """
        board = [line[:] for line in board]
        row, col = position[0], position[1]
        board[row][col] = None
        for queen in self.queens:
            if queen.position is None:
                queen.position = (row, col)
                board[row][col] = queen
                return board
        raise ValueError(f"player {self.player_id} has no queen left for promotion")