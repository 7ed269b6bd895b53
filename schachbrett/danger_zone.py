"""Squares attacked by the opponent of a player."""

from __future__ import annotations

from typing import Iterable, Sequence

from schachbrett.character import Board, Square


class DangerZone:
    """The set of squares an opponent threatens."""

    def __init__(self) -> None:
        self.threatened: set[Square] = set()

    def update(self, enemy_moves: Iterable[Sequence[int]]) -> None:
        """Mark every given square as threatened."""
        self.threatened.update((row, col) for row, col in enemy_moves)

    def update_pawn(self, row: int, col: int, player: int) -> None:
        """Mark the squares an enemy pawn at (row, col) attacks.

        ``player`` is the defending player; player 2 faces pawns moving up
        the board, player 1 pawns moving down.
        """
        if player == 2:
            if row < 7 and col >= 1:
                self.threatened.add((row - 1, col - 1))
            if row < 7 and col < 7:
                self.threatened.add((row - 1, col + 1))
        else:
            if row >= 1 and col >= 1:
                self.threatened.add((row + 1, col - 1))
            if row >= 1 and col < 7:
                self.threatened.add((row + 1, col + 1))

    def update_king(self, row: int, col: int) -> None:
        """Mark the neighbours of an enemy king, leaving out the board's edge squares."""
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                r, c = row + dr, col + dc
                if 0 < r < 7 and 0 < c < 7:
                    self.threatened.add((r, c))

    def create(self, board: Board, player: int) -> None:
        """Rebuild the zone from all pieces on the board not owned by ``player``."""
        self.threatened = set()
        for row, line in enumerate(board):
            for col, piece in enumerate(line):
                if piece is None or piece.player == player:
                    continue
                if piece.points == 1:
                    self.update_pawn(row, col, player)
                elif piece.points >= 1000 or piece.designation in ("K", "k"):
                    self.update_king(row, col)
                else:
                    piece.check_moves(board, True)
                    self.update(piece.targets())
                    piece.clear_moves()

    def is_safe(self, position: Sequence[int]) -> bool:
        """Whether the square is not threatened."""
        return (position[0], position[1]) not in self.threatened