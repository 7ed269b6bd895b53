"""Playing on the console: board printing, move input and random moves."""

from __future__ import annotations

import random
import sys
from typing import Iterable, Optional, TextIO

from schachbrett.character import BOARD_SIZE, Board, Square
from schachbrett.player_moves import PlayerMoves

_INPUT_HINT = "Please give only two field coordinates, separated by whitespace."


def parse_square(text: str) -> Square:
    """Turn a coordinate such as ``"E2"`` into (row, col).

    The column letter counts from ``A`` and the row digit from ``1``; the
    result is not range checked. Raises ValueError for text shorter than two
    characters.
    """
    if len(text) < 2:
        raise ValueError(f"not a field coordinate: {text!r}")
    col = ord(text[0]) - ord("A")
    row = ord(text[1]) - ord("1")
    return (row, col)


def format_board(board: Board) -> str:
    """Render the board as text, one numbered line per row, empty squares as 0."""
    rows = [
        f"{number}| "
        + "".join(f" {piece.designation if piece is not None else '0'} " for piece in line)
        for number, line in enumerate(board, 1)
    ]
    return "\n".join(rows) + "\n    ______________________\n    A  B  C  D  E  F  G  H\n\n"


def random_move(player_moves: PlayerMoves, rng: Optional[random.Random] = None) -> tuple[Square, Square]:
    """Pick one of the legal moves at random.

    Raises ValueError when there is no legal move.
    """
    if not player_moves.moves:
        raise ValueError("no legal move to choose from")
    if rng is None:
        rng = random.Random()
    return player_moves.moves[rng.randrange(len(player_moves.moves))]


def _in_range(square: Square) -> bool:
    return all(0 <= value < BOARD_SIZE for value in square)


def read_move(
    player_moves: PlayerMoves,
    lines: Optional[Iterable[str]] = None,
    out: Optional[TextIO] = None,
) -> tuple[Square, Square]:
    """Read lines until one holds a legal move such as ``"E7 E5"`` and return it.

    The move is added to the history. Raises EOFError when the input ends first.
    """
    if lines is None:
        lines = sys.stdin
    if out is None:
        out = sys.stdout
    for line in lines:
        tokens = line.split()
        if len(tokens) != 2:
            out.write(_INPUT_HINT)
            continue
        try:
            origin = parse_square(tokens[0])
            target = parse_square(tokens[1])
        except ValueError:
            continue
        if not (_in_range(origin) and _in_range(target)):
            continue
        if not player_moves.is_allowed(origin, target):
            continue
        player_moves.add_history(origin, target)
        out.write("\n\n")
        return origin, target
    raise EOFError("input ended before a legal move was entered")