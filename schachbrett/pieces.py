"""The ordinary chess pieces: bishop, rook, queen, knight and pawn."""

from __future__ import annotations

from typing import ClassVar

from schachbrett.character import BOARD_SIZE, Board, Character, Square, player_map

_STRAIGHT: tuple[Square, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
_DIAGONAL: tuple[Square, ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))
_KNIGHT_JUMPS: tuple[Square, ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (-1, 2),
    (1, 2),
    (-1, -2),
    (1, -2),
)


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class _SlidingPiece(Character):
    """A piece that moves any distance along a fixed set of directions."""

    directions: ClassVar[tuple[Square, ...]] = ()

    def _slide(self, board: Board, friendly_fire: bool) -> None:
        """Fill moves and kills by sliding until the edge or a piece blocks."""
        self.moves.clear()
        self.kills.clear()
        owners = player_map(board)
        row, col = self.position
        for dr, dc in self.directions:
            for step in range(1, BOARD_SIZE):
                r, c = row + dr * step, col + dc * step
                if not _on_board(r, c):
                    break
                owner = owners[r][c]
                if owner == self.player:
                    if friendly_fire:
                        self.moves.append((r, c))
                    break
                if owner == self.enemy:
                    self.kills.append((r, c))
                    break
                self.moves.append((r, c))


class Bishop(_SlidingPiece):
    """Moves diagonally."""

    points = 3
    directions = _DIAGONAL

    def check_moves(self, board: Board, friendly_fire: bool = False, check_rescue: bool = True) -> None:
        """Fill moves and kills along the diagonals."""
        self._slide(board, friendly_fire)


class Rook(_SlidingPiece):
    """Moves along rows and columns."""

    points = 5
    directions = _STRAIGHT

    def check_moves(self, board: Board, friendly_fire: bool = False, check_rescue: bool = True) -> None:
        """Fill moves and kills along the row and the column."""
        self._slide(board, friendly_fire)


class Queen(_SlidingPiece):
    """Moves along rows, columns and diagonals."""

    points = 9
    directions = _STRAIGHT + _DIAGONAL

    def check_moves(self, board: Board, friendly_fire: bool = False, check_rescue: bool = True) -> None:
        """Fill moves and kills along rows, columns and diagonals."""
        self._slide(board, friendly_fire)


class Knight(Character):
    """Jumps two squares one way and one square the other."""

    points = 3

    def check_moves(self, board: Board, friendly_fire: bool = False, check_rescue: bool = True) -> None:
        """Fill moves and kills with the knight's jumps."""
        self.moves.clear()
        self.kills.clear()
        owners = player_map(board)
        row, col = self.position
        for dr, dc in _KNIGHT_JUMPS:
            r, c = row + dr, col + dc
            if not _on_board(r, c):
                continue
            owner = owners[r][c]
            if owner == self.player:
                if friendly_fire:
                    self.moves.append((r, c))
            elif owner == self.enemy:
                self.kills.append((r, c))
            else:
                self.moves.append((r, c))


class Pawn(Character):
    """Moves forward; player 2 moves down the board, player 1 up."""

    points = 1

    def check_moves(self, board: Board, friendly_fire: bool = False, check_rescue: bool = True) -> None:
        """Fill moves with forward steps and kills with captures, en passant included."""
        self.moves.clear()
        self.kills.clear()
        owners = player_map(board)
        row, col = self.position

        if self.player == 2:
            forward, passant_row, needs_single_move = 1, 4, True
        else:
            forward, passant_row, needs_single_move = -1, 3, False

        def empty(r: int, c: int) -> bool:
            return owners[r][c] not in (self.player, self.enemy)

        ahead = row + forward
        if _on_board(ahead, col) and empty(ahead, col):
            self.moves.append((ahead, col))
            two_ahead = row + 2 * forward
            if self.count_moves == 0 and _on_board(two_ahead, col) and empty(two_ahead, col):
                self.moves.append((two_ahead, col))

        for side in (1, -1):
            kr, kc = ahead, col + side
            if not _on_board(kr, kc):
                continue
            if owners[kr][kc] == self.enemy:
                self.kills.append((kr, kc))
            if owners[row][kc] == self.enemy and row == passant_row:
                neighbour = board[row][kc]
                if (
                    neighbour.points == 1
                    and (not needs_single_move or neighbour.count_moves == 1)
                    and empty(kr, kc)
                ):
                    self.kills.append((kr, kc))