"""The legal moves of one player and the moves that player has made."""

from __future__ import annotations

from typing import Iterator, Sequence

from schachbrett.character import Board, Square


def _square(position: Sequence[int]) -> Square:
    return (position[0], position[1])


class PlayerMoves:
    """Legal moves of a player as (origin, target) pairs."""

    def __init__(self) -> None:
        self.moves: list[tuple[Square, Square]] = []
        self.history: list[tuple[Square, Square]] = []
        self.in_check = False

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[tuple[Square, Square]]:
        return iter(self.moves)

    def add_history(self, actual: Sequence[int], target: Sequence[int]) -> None:
        """Record a move that was made."""
        self.history.append((_square(actual), _square(target)))

    def is_suicide(self, board: Board, player: int, actual: Sequence[int], target: Sequence[int]) -> bool:
        """Whether the move leaves the player's own king in check."""
        king_pos = None
        for row, line in enumerate(board):
            for col, piece in enumerate(line):
                if piece is not None and piece.player == player and piece.points > 10:
                    king_pos = (row, col)
        if king_pos is None:
            raise ValueError(f"player {player} has no king on the board")

        actual = _square(actual)
        target = _square(target)
        trial = board[actual[0]][actual[1]].move(board, target)
        moved = trial[target[0]][target[1]]
        checked = target if king_pos == actual else king_pos
        king = trial[checked[0]][checked[1]]
        king.check_moves(trial, False, False)
        suicide = king.is_in_check()
        moved.reverse(trial)
        return suicide

    def check_player_moves(self, board: Board, player: int) -> None:
        """Collect every move of ``player`` that does not leave the own king in check.

        When the king is in check only the rescue moves and the king's own
        moves remain.
        """
        self.moves = []
        self.in_check = False
        for row, line in enumerate(board):
            for col, piece in enumerate(line):
                if piece is None or piece.player != player:
                    continue
                piece.check_moves(board)
                origin = (row, col)
                targets = piece.targets()
                if piece.is_in_check():
                    self.in_check = True
                    self.moves = list(piece.rescue_moves())
                for target in targets:
                    if not self.is_suicide(board, player, origin, target):
                        self.moves.append((origin, target))
                if self.in_check:
                    return

    def is_allowed_origin(self, actual: Sequence[int]) -> bool:
        """Whether some legal move starts on the square."""
        actual = _square(actual)
        return any(origin == actual for origin, _ in self.moves)

    def is_allowed_target(self, target: Sequence[int]) -> bool:
        """Whether some legal move ends on the square."""
        target = _square(target)
        return any(end == target for _, end in self.moves)

    def is_allowed(self, actual: Sequence[int], target: Sequence[int]) -> bool:
        """Whether the move is legal."""
        return (_square(actual), _square(target)) in self.moves

    def targets(self, actual: Sequence[int]) -> list[Square]:
        """Squares the piece on ``actual`` may go to."""
        actual = _square(actual)
        return [end for origin, end in self.moves if origin == actual]

    def is_checkmate(self) -> bool:
        """Whether the player is in check and has no legal move."""
        return self.in_check and not self.moves

    def clear(self) -> None:
        """Forget the legal moves."""
        self.moves.clear()