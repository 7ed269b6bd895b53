import pytest

from schachbrett.board_view import HIGHLIGHT_STYLE, PLAIN_STYLE, BoardView, figure_image
from schachbrett.character import empty_board
from schachbrett.player import Player
from schachbrett.player_moves import PlayerMoves


def _start_board():
    board = Player("a", 1).put_pieces(empty_board())
    return Player("b", 2).put_pieces(board)


def _white_moves(board):
    moves = PlayerMoves()
    moves.check_player_moves(board, 1)
    return moves


def test_figure_image_paths():
    assert figure_image("K") == "resources/pieces/512h/w_king_png_512px.png"
    assert figure_image("t") == "resources/pieces/512h/b_rook_png_512px.png"
    assert figure_image("0") == ""


def test_initial_icons_and_field_size():
    view = BoardView()
    assert view.field_size == 480 // 8
    assert view.icons[0][0] == figure_image("t")
    assert view.icons[7][4] == figure_image("K")
    assert view.icons[6][2] == figure_image("B")
    assert view.icons[3][3] == ""


def test_initial_styles_alternate():
    view = BoardView()
    assert "white" in view.styles[0][0]
    assert "gray" in view.styles[0][1]
    assert view.styles[3][5] == view.styles[5][3]


def test_update_matches_board():
    view = BoardView()
    board = _start_board()
    view.update(board)
    assert view.icons == [
        [figure_image(p.designation) if p is not None else "" for p in line] for line in board
    ]
    view.update(empty_board())
    assert all(icon == "" for line in view.icons for icon in line)


def test_highlight_marks_only_given_fields():
    view = BoardView()
    view.highlight([(2, 3), (4, 5)])
    assert view.styles[2][3] == HIGHLIGHT_STYLE
    assert view.styles[4][5] == HIGHLIGHT_STYLE
    marked = sum(style == HIGHLIGHT_STYLE for line in view.styles for style in line)
    assert marked == 2
    assert view.styles[0][0] == PLAIN_STYLE


def test_select_move_simple():
    board = _start_board()
    moves = _white_moves(board)
    view = BoardView()
    result = view.select_move(moves, [(6, 4), (4, 4)])
    assert result == ((6, 4), (4, 4))
    assert view.move_from == (6, 4)
    assert view.move_to == (4, 4)
    assert moves.history == [((6, 4), (4, 4))]


def test_select_move_ignores_clicks_off_origins():
    moves = _white_moves(_start_board())
    view = BoardView()
    assert view.select_move(moves, [(3, 3), (6, 0), (5, 0)]) == ((6, 0), (5, 0))


def test_select_move_same_square_cancels():
    moves = _white_moves(_start_board())
    view = BoardView()
    result = view.select_move(moves, [(6, 4), (6, 4), (6, 3), (4, 3)])
    assert result == ((6, 3), (4, 3))


def test_select_move_other_origin_cancels_without_selecting():
    moves = _white_moves(_start_board())
    view = BoardView()
    result = view.select_move(moves, [(6, 4), (6, 3), (4, 3), (6, 3), (5, 3)])
    assert result == ((6, 3), (5, 3))


def test_select_move_illegal_target_starts_over():
    moves = _white_moves(_start_board())
    view = BoardView()
    result = view.select_move(moves, [(6, 4), (3, 4), (6, 4), (5, 4)])
    assert result == ((6, 4), (5, 4))
    assert moves.history == [((6, 4), (5, 4))]


def test_select_move_highlights_targets_then_runs_out():
    moves = _white_moves(_start_board())
    view = BoardView()
    with pytest.raises(EOFError):
        view.select_move(moves, [(6, 4)])
    assert view.styles[5][4] == HIGHLIGHT_STYLE
    assert view.styles[4][4] == HIGHLIGHT_STYLE
    assert view.styles[6][4] == PLAIN_STYLE
    assert view.pressed_button == (6, 4)
    assert moves.history == []