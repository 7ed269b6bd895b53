"""Base class for chess pieces and helpers for the 8x8 board."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

Square = Tuple[int, int]
Board = List[List[Optional["Character"]]]

BOARD_SIZE = 8


def empty_board() -> Board:
    """Return an 8x8 board with no pieces on it."""
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def player_map(board: Board) -> list[list[int]]:
    """Return the owner of every square: the player id, or 0 when empty."""
    return [[piece.player if piece is not None else 0 for piece in line] for line in board]


class Character:
    """A piece on the board.

    Subclasses fill ``moves`` (reachable empty squares) and ``kills``
    (squares holding an enemy piece) in :meth:`check_moves`.
    """

    points: int = 0

    def __init__(
        self,
        designation: str = "",
        player: int = 0,
        position: Optional[Sequence[int]] = None,
    ) -> None:
        self.designation = designation
        self.player = player
        self.position: Optional[Square] = tuple(position) if position is not None else None
        self.count_moves = 0
        self.moves: list[Square] = []
        self.kills: list[Square] = []
        self.last_move_from: Optional[Square] = None
        self.last_move_to: Optional[Square] = None
        self.last_killed: Optional[Character] = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(designation={self.designation!r}, "
            f"player={self.player}, position={self.position})"
        )

    @property
    def enemy(self) -> int:
        """Id of the opposing player."""
        return 2 if self.player == 1 else 1

    def assign(self, designation: str, player: int) -> None:
        """Set the piece's letter and its owner."""
        self.designation = designation
        self.player = player

    def check_moves(self, board: Board, friendly_fire: bool = False, check_rescue: bool = True) -> None:
        """Reset moves and kills; the base piece can reach no square."""
        self.moves.clear()
        self.kills.clear()

    def is_in_check(self) -> bool:
        """Whether this piece is a king in check; never for the base piece."""
        return False

    def rescue_moves(self) -> list[tuple[Square, Square]]:
        """Moves (origin, target) that get the own king out of check."""
        return []

    def targets(self) -> list[Square]:
        """All squares this piece may go to: moves followed by kills."""
        return [*self.moves, *self.kills]

    def clear_moves(self) -> None:
        self.moves.clear()

    def clear_kills(self) -> None:
        self.kills.clear()

    def _en_passant_victim(self, board: Board, target: Square) -> Optional[Character]:
        row, _ = self.position
        tr, tc = target
        if self.points != 1 or board[tr][tc] is not None or row == tr:
            return None
        if self.player == 1:
            ahead = tr - 1
        elif self.player == 2:
            ahead = tr + 1
        else:
            return None
        if not 0 <= ahead < BOARD_SIZE:
            return None
        candidate = board[ahead][tc]
        if candidate is not None and candidate.points == 1:
            return candidate
        return None

    def move(self, board: Board, target: Sequence[int], test_move: bool = True) -> Board:
        """Move this piece to ``target`` and return the resulting board.

        Every piece of the same player remembers the move so that any of
        them can take it back with :meth:`reverse`. Castling moves the rook
        only when ``test_move`` is false.
        """
        board = [line[:] for line in board]
        target = (target[0], target[1])
        tr, tc = target
        row, col = self.position
        occupant = board[tr][tc]

        victim = self._en_passant_victim(board, target)
        killed = victim if victim is not None else occupant
        origin = self.position
        for line in board:
            for piece in line:
                if piece is not None and piece.player == self.player:
                    piece.last_killed = killed
                    piece.last_move_from = origin
                    piece.last_move_to = target

        if self.points == 1 and occupant is None and col != tc:
            captured_row = tr + 1 if self.player == 1 else tr - 1
            board[captured_row][tc] = None

        if self.points > 100 and abs(col - tc) > 1 and not test_move:
            if tc == 1:
                rook = board[row][0]
                board[row][2] = rook
                board[row][0] = None
                rook.position = (row, 2)
            if tc == 6:
                rook = board[row][7]
                board[row][5] = rook
                board[row][7] = None
                rook.position = (row, 5)

        board[tr][tc] = board[row][col]
        board[row][col] = None
        self.position = target
        self.count_moves += 1
        return board

    def reverse(self, board: Board) -> Board:
        """Take back the last remembered move and return the resulting board."""
        if self.last_move_from is None or self.last_move_to is None:
            raise ValueError("no move to reverse")
        board = [line[:] for line in board]
        fr, fc = self.last_move_from
        tr, tc = self.last_move_to
        board[fr][fc] = board[tr][tc]
        if self.last_killed is not None:
            kr, kc = self.last_killed.position
            board[kr][kc] = self.last_killed
        else:
            board[tr][tc] = None
        board[fr][fc].position = self.last_move_from
        self.count_moves -= 1
        return board