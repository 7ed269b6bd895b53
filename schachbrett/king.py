"""The king: moves one square, castles, and knows when it is in check."""

from __future__ import annotations

from typing import Optional, Sequence

from schachbrett.character import BOARD_SIZE, Board, Character, Square, player_map
from schachbrett.danger_zone import DangerZone

_NEIGHBOURS: tuple[Square, ...] = (
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (-1, 1),
    (1, -1),
    (-1, -1),
)


class King(Character):
    """Moves one square in any direction onto squares the enemy does not threaten."""

    points = 1000

    def __init__(
        self,
        designation: str = "",
        player: int = 0,
        position: Optional[Sequence[int]] = None,
    ) -> None:
        super().__init__(designation, player, position)
        self.in_check = False
        self.danger_zone = DangerZone()
        self._rescue_moves: list[tuple[Square, Square]] = []

    def _rescues(self, board: Board, origin: Square, target: Square) -> bool:
        """Whether moving the piece at ``origin`` to ``target`` ends the check."""
        piece = board[origin[0]][origin[1]]
        trial = piece.move(board, target)
        self.check_moves(trial, False, False)
        saved = not self.in_check
        piece.reverse(trial)
        return saved

    def _check_for_rescue(self, board: Board) -> None:
        self._rescue_moves = []
        for row, line in enumerate(board):
            for col, piece in enumerate(line):
                if piece is None or piece.player != self.player or piece.points > 10:
                    continue
                piece.check_moves(board)
                origin = (row, col)
                for target in piece.targets():
                    if self._rescues(board, origin, target):
                        self._rescue_moves.append((origin, target))
                piece.clear_moves()
                piece.clear_kills()

    def check_moves(self, board: Board, friendly_fire: bool = False, check_rescue: bool = True) -> None:
        """Fill moves and kills, and find out whether the king is in check.

        When the king is in check and ``check_rescue`` is set, the moves of
        the own pieces that end the check are collected as rescue moves.
        """
        self.moves.clear()
        self.kills.clear()

        zone = DangerZone()
        zone.create(board, self.player)
        self.danger_zone = zone

        in_check = not zone.is_safe(self.position)
        if in_check and check_rescue:
            self._check_for_rescue(board)
            self.danger_zone = zone
            self.moves.clear()
            self.kills.clear()
        self.in_check = in_check

        owners = player_map(board)
        row, col = self.position
        for dr, dc in _NEIGHBOURS:
            r, c = row + dr, col + dc
            if not (0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE):
                continue
            owner = owners[r][c]
            safe = zone.is_safe((r, c))
            if owner == self.enemy and safe:
                self.kills.append((r, c))
            elif owner != self.player and safe:
                self.moves.append((r, c))
            elif owner == self.player and friendly_fire:
                self.moves.append((r, c))

        if self.count_moves == 0:
            self._add_castling(board, row, col)

    def _add_castling(self, board: Board, row: int, col: int) -> None:
        line = board[row]
        if (
            col - 4 >= 0
            and line[col - 1] is None
            and line[col - 2] is None
            and line[col - 3] is None
            and line[col - 4] is not None
        ):
            rook = line[col - 4]
            if rook.designation == "T" or (rook.designation == "t" and rook.count_moves == 0):
                self.moves.append((row, col - 3))
        if (
            col + 3 < BOARD_SIZE
            and line[col + 1] is None
            and line[col + 2] is None
            and line[col + 3] is not None
        ):
            rook = line[col + 3]
            if rook.count_moves == 0 and rook.designation in ("T", "t"):
                self.moves.append((row, col + 2))

    def is_in_check(self) -> bool:
        """Whether the king was in check at the last call of :meth:`check_moves`."""
        return self.in_check

    def rescue_moves(self) -> list[tuple[Square, Square]]:
        """Moves (origin, target) of own pieces that end the check."""
        return list(self._rescue_moves)