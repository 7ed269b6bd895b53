"""State of the graphical chess board: piece images, square styles and move selection."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from schachbrett.character import BOARD_SIZE, Board, Square
from schachbrett.player_moves import PlayerMoves

_IMAGE_DIR = "resources/pieces/512h/"

_FIGURE_IMAGES: dict[str, str] = {
    "t": _IMAGE_DIR + "b_rook_png_512px.png",
    "s": _IMAGE_DIR + "b_knight_png_512px.png",
    "l": _IMAGE_DIR + "b_bishop_png_512px.png",
    "d": _IMAGE_DIR + "b_queen_png_512px.png",
    "k": _IMAGE_DIR + "b_king_png_512px.png",
    "b": _IMAGE_DIR + "b_pawn_png_512px.png",
    "T": _IMAGE_DIR + "w_rook_png_512px.png",
    "S": _IMAGE_DIR + "w_knight_png_512px.png",
    "L": _IMAGE_DIR + "w_bishop_png_512px.png",
    "D": _IMAGE_DIR + "w_queen_png_512px.png",
    "K": _IMAGE_DIR + "w_king_png_512px.png",
    "B": _IMAGE_DIR + "w_pawn_png_512px.png",
}

_START_ROWS: dict[int, str] = {
    0: "tsldklst",
    1: "b" * BOARD_SIZE,
    6: "B" * BOARD_SIZE,
    7: "TSLDKLST",
}

PLAIN_STYLE = "border: 1px solid black;"
HIGHLIGHT_STYLE = "border: 2px solid red;"


def figure_image(designation: str) -> str:
    """Image path for a piece letter, or an empty string for an empty square."""
    return _FIGURE_IMAGES.get(designation, "")


def _square_style(row: int, col: int) -> str:
    color = "white" if (row + col) % 2 == 0 else "gray"
    return f"background-color: {color}; border 1px solid black;"


class BoardView:
    """An 8x8 grid of buttons, each with an image and a style.

    ``icons`` holds the image path shown on every square and ``styles`` its
    style sheet. A move is chosen by feeding clicked squares to
    :meth:`select_move`.
    """

    def __init__(self, grid_size: int = 480) -> None:
        self.grid_size = grid_size
        self.field_size = grid_size // BOARD_SIZE
        self.styles: list[list[str]] = [
            [_square_style(row, col) for col in range(BOARD_SIZE)] for row in range(BOARD_SIZE)
        ]
        self.icons: list[list[str]] = [
            [figure_image(letter) for letter in _START_ROWS.get(row, "0" * BOARD_SIZE)]
            for row in range(BOARD_SIZE)
        ]
        self.pressed_button: Optional[Square] = None
        self.move_from: Optional[Square] = None
        self.move_to: Optional[Square] = None

    def update(self, board: Board) -> None:
        """Show the pieces of ``board``."""
        self.icons = [
            [figure_image(piece.designation if piece is not None else "0") for piece in line]
            for line in board
        ]

    def highlight(self, fields: Iterable[Sequence[int]]) -> None:
        """Reset every square's style, then mark the given squares."""
        self.styles = [[PLAIN_STYLE] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for row, col in fields:
            self.styles[row][col] = HIGHLIGHT_STYLE

    def select_move(
        self, player_moves: PlayerMoves, clicks: Iterable[Sequence[int]]
    ) -> tuple[Square, Square]:
        """Consume clicked squares until they form a legal move and return it.

        The first click must be on a square a legal move starts from; its
        targets are highlighted. Clicking the same square again or another
        origin square cancels the selection; an illegal target starts over.
        The chosen move is added to the history. Raises EOFError when the
        clicks run out first.
        """
        actual: Optional[Square] = None
        for click in clicks:
            square = (click[0], click[1])
            self.pressed_button = square
            if actual is None:
                if player_moves.is_allowed_origin(square):
                    actual = square
                    self.highlight(player_moves.targets(actual))
                continue
            if square == actual or player_moves.is_allowed_origin(square):
                self.highlight([])
                actual = None
                continue
            if player_moves.is_allowed(actual, square):
                player_moves.add_history(actual, square)
                self.move_from = actual
                self.move_to = square
                return actual, square
            actual = None
        raise EOFError("clicks ended before a legal move was selected")