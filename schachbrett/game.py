"""The game loop: a human plays white against randomly moving black."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, Optional, Sequence, TextIO

from schachbrett.board_view import BoardView
from schachbrett.character import Board, Square, empty_board
from schachbrett.console import format_board, random_move, read_move
from schachbrett.player import Player
from schachbrett.player_moves import PlayerMoves


class Game:
    """A game between a human (player 1, white) and a random player (player 2, black).

    The human's moves come from ``clicks`` on the board view when given,
    otherwise from text ``lines`` such as ``"E7 E5"`` (standard input by
    default).
    """

    def __init__(
        self,
        view: Optional[BoardView] = None,
        clicks: Optional[Iterable[Sequence[int]]] = None,
        lines: Optional[Iterable[str]] = None,
        rng: Optional[random.Random] = None,
        out: Optional[TextIO] = None,
        random_enemy: bool = True,
    ) -> None:
        self.view = view if view is not None else BoardView()
        self._clicks = iter(clicks) if clicks is not None else None
        self._lines = iter(lines) if lines is not None else None
        self.rng = rng if rng is not None else random.Random()
        self.out = out
        self.random_enemy = random_enemy
        self.board: Board = empty_board()
        self.white = Player("Player1", 1)
        self.black = Player("Player2", 2)
        self.player_moves = [PlayerMoves(), PlayerMoves()]
        self.winner: Optional[int] = None

    def _human_move(self, player_moves: PlayerMoves) -> tuple[Square, Square]:
        if self._clicks is not None:
            return self.view.select_move(player_moves, self._clicks)
        return read_move(player_moves, self._lines, self._output)

    @property
    def _output(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    def start(self) -> int:
        """Play until checkmate or stalemate and return the winner, 0 for stalemate."""
        self.white = Player("Player1", 1)
        self.black = Player("Player2", 2)
        self.board = self.black.put_pieces(self.white.put_pieces(empty_board()))
        self.player_moves = [PlayerMoves(), PlayerMoves()]
        out = self._output

        act_player = 1
        while True:
            out.write(format_board(self.board))
            self.view.update(self.board)

            moves = self.player_moves[act_player - 1]
            moves.check_player_moves(self.board, act_player)

            if moves.is_checkmate():
                winner = 2 if act_player == 1 else 1
                break
            if len(moves) == 0 and not moves.in_check:
                winner = 0
                break

            if self.random_enemy and act_player == 2:
                origin, target = random_move(moves, self.rng)
                self.board = self.board[origin[0]][origin[1]].move(self.board, target)
                act_player = 1
                continue

            origin, target = self._human_move(moves)
            self.board = self.board[origin[0]][origin[1]].move(self.board, target, False)

            moved = self.board[target[0]][target[1]]
            if act_player == 1 and moved.designation == "B" and target[0] == 0:
                self.board = self.white.promote(self.board, target)
            if act_player == 2 and moved.designation == "b" and target[0] == 7:
                self.board = self.black.promote(self.board, target)

            act_player = 2 if act_player == 1 else 1

        self.winner = winner
        if winner > 0:
            out.write(f"  --> Winner is Player {winner}\n")
        else:
            out.write("  --> Stalemate!\n")
        return winner


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a game on the console; moves are typed as two squares, e.g. ``E7 E5``."""
    parser = argparse.ArgumentParser(prog="schachbrett", description="Play chess against random moves.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random opponent")
    args = parser.parse_args(argv)
    game = Game(rng=random.Random(args.seed))
    try:
        game.start()
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())