import pytest

from schachbrett.character import empty_board
from schachbrett.king import King
from schachbrett.pieces import Bishop, Knight, Pawn, Queen, Rook
from schachbrett.player_moves import PlayerMoves

_BACK_RANK = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)
_WHITE_LETTERS = "TSLDKLST"


def _place(board, cls, designation, player, square):
    piece = cls(designation, player, square)
    board[square[0]][square[1]] = piece
    return piece


def _initial_board():
    board = empty_board()
    for col, (cls, letter) in enumerate(zip(_BACK_RANK, _WHITE_LETTERS)):
        _place(board, cls, letter, 1, (7, col))
        _place(board, cls, letter.lower(), 2, (0, col))
        _place(board, Pawn, "B", 1, (6, col))
        _place(board, Pawn, "b", 2, (1, col))
    return board


def _pinned_board():
    board = empty_board()
    _place(board, King, "K", 1, (7, 4))
    rook = _place(board, Rook, "T", 1, (6, 4))
    _place(board, Rook, "t", 2, (0, 4))
    _place(board, King, "k", 2, (0, 0))
    return board, rook


def test_opening_position_has_twenty_moves():
    board = _initial_board()
    moves = PlayerMoves()
    moves.check_player_moves(board, 1)
    assert len(moves) == 20
    assert moves.in_check is False
    assert moves.is_checkmate() is False


def test_black_has_as_many_opening_moves_as_white():
    board = _initial_board()
    white = PlayerMoves()
    white.check_player_moves(board, 1)
    black = PlayerMoves()
    black.check_player_moves(board, 2)
    assert len(black) == len(white)


def test_opening_queries():
    board = _initial_board()
    moves = PlayerMoves()
    moves.check_player_moves(board, 1)
    assert moves.is_allowed((6, 4), (4, 4)) is True
    assert moves.is_allowed((6, 4), (3, 4)) is False
    assert moves.is_allowed_origin((7, 4)) is False
    assert moves.is_allowed_origin((7, 1)) is True
    assert set(moves.targets((7, 1))) == {(5, 0), (5, 2)}
    assert moves.is_allowed_target((5, 0)) is True
    assert moves.is_allowed_target((3, 0)) is False


def test_check_player_moves_leaves_board_untouched():
    board = _initial_board()
    snapshot = [line[:] for line in board]
    positions = [p.position for line in board for p in line if p is not None]
    PlayerMoves().check_player_moves(board, 1)
    assert all(a is b for line, old in zip(board, snapshot) for a, b in zip(line, old))
    assert [p.position for line in board for p in line if p is not None] == positions
    assert all(p.count_moves == 0 for line in board for p in line if p is not None)


def test_is_suicide_for_pinned_rook():
    board, rook = _pinned_board()
    moves = PlayerMoves()
    assert moves.is_suicide(board, 1, (6, 4), (6, 0)) is True
    assert moves.is_suicide(board, 1, (6, 4), (5, 4)) is False
    assert rook.position == (6, 4)
    assert rook.count_moves == 0
    assert board[6][4] is rook


def test_pinned_rook_stays_on_its_column():
    board, _ = _pinned_board()
    moves = PlayerMoves()
    moves.check_player_moves(board, 1)
    rook_targets = moves.targets((6, 4))
    assert rook_targets
    assert all(col == 4 for _, col in rook_targets)
    assert (0, 4) in rook_targets


def test_is_suicide_without_king_raises():
    board = empty_board()
    _place(board, Rook, "T", 1, (6, 4))
    with pytest.raises(ValueError):
        PlayerMoves().is_suicide(board, 1, (6, 4), (5, 4))


def test_in_check_only_rescue_and_king_moves_remain():
    board = empty_board()
    _place(board, King, "K", 1, (7, 4))
    _place(board, Rook, "T", 1, (5, 0))
    _place(board, Rook, "t", 2, (0, 4))
    _place(board, King, "k", 2, (0, 0))
    moves = PlayerMoves()
    moves.check_player_moves(board, 1)
    assert moves.in_check is True
    assert moves.is_checkmate() is False
    assert moves.is_allowed((5, 0), (5, 4)) is True
    assert moves.is_allowed((5, 0), (5, 1)) is False
    assert all(origin in ((5, 0), (7, 4)) for origin, _ in moves)
    assert (7, 4) not in [target for _, target in moves]


def test_checkmate():
    board = empty_board()
    _place(board, King, "K", 1, (7, 0))
    _place(board, Queen, "d", 2, (6, 1))
    _place(board, King, "k", 2, (5, 2))
    moves = PlayerMoves()
    moves.check_player_moves(board, 1)
    assert len(moves) == 0
    assert moves.in_check is True
    assert moves.is_checkmate() is True


def test_stalemate_is_not_checkmate():
    board = empty_board()
    _place(board, King, "K", 1, (7, 0))
    _place(board, Queen, "d", 2, (5, 1))
    _place(board, King, "k", 2, (0, 7))
    moves = PlayerMoves()
    moves.check_player_moves(board, 1)
    assert len(moves) == 0
    assert moves.in_check is False
    assert moves.is_checkmate() is False


def test_history_and_clear():
    board = _initial_board()
    moves = PlayerMoves()
    moves.check_player_moves(board, 1)
    moves.add_history([6, 4], [4, 4])
    assert moves.history == [((6, 4), (4, 4))]
    moves.clear()
    assert len(moves) == 0
    assert moves.is_allowed((6, 4), (4, 4)) is False
    assert moves.history == [((6, 4), (4, 4))]


def test_recheck_replaces_previous_moves():
    board = _initial_board()
    moves = PlayerMoves()
    moves.check_player_moves(board, 1)
    first = list(moves)
    moves.check_player_moves(board, 1)
    assert list(moves) == first