# schachbrett

A compact chess game for the terminal. You play white (player 1); black
(player 2) makes random legal moves. The board is printed before every turn.

## Installation

```
pip install .
```

## Playing

```
schachbrett
schachbrett --seed 42
```

`--seed` fixes the random number generator of the black player so that a
game can be repeated.

The board is printed with its rows numbered 1 to 8 from the top and its
columns lettered A to H. Black starts on rows 1 and 2, white on rows 7 and 8.
Pieces are shown by their German letters: `K` king, `D` queen (Dame),
`T` rook (Turm), `L` bishop (Läufer), `S` knight (Springer) and `B` pawn
(Bauer). White pieces are upper case, black pieces lower case, and an empty
square is `0`.

Enter a move as two squares separated by whitespace, column letter first and
in upper case, for example `A7 A6` to move the white pawn in column A one
step forward. A line without exactly two squares prints a hint; squares off
the board and moves that are not allowed are ignored silently, and the next
line is read. A white pawn that reaches row 1 becomes a queen.

The game ends on checkmate (`--> Winner is Player N`) or when the side to
move has no legal move and is not in check (`--> Stalemate!`). The command
exits with status 0 after a finished game and 1 when the input ends or is
interrupted.

## Using the library

The rules work without any user interface. A board is a list of 8 lists of
8 squares, each holding a piece or `None`; squares are `(row, col)` tuples.

- `schachbrett.character`: the `Character` base class (`move`, `reverse`,
  `check_moves`, `targets`), `empty_board()` and `player_map(board)`.
- `schachbrett.pieces`: `Bishop`, `Rook`, `Queen`, `Knight` and `Pawn`.
- `schachbrett.king`: `King`, with `is_in_check()` and `rescue_moves()`.
- `schachbrett.danger_zone`: `DangerZone`, the squares the opponent attacks
  (`create`, `is_safe`).
- `schachbrett.player`: `Player(name, player_id)` sets out a side's pieces
  with `put_pieces(board)` and turns a pawn into a spare queen with
  `promote(board, position)`.
- `schachbrett.player_moves`: `PlayerMoves` collects every legal move of a
  side with `check_player_moves(board, player)` and answers `is_allowed`,
  `is_allowed_origin`, `is_allowed_target`, `targets` and `is_checkmate`;
  `add_history` records moves that were made.
- `schachbrett.console`: `parse_square`, `format_board`, `random_move` and
  `read_move`.
- `schachbrett.scenario`: `apply_test_moves(board)` plays a fixed opening and
  `possible_moves(board, row, col)` returns a piece's moves and kills.
- `schachbrett.board_view`: `BoardView`, a headless board model that holds an
  image path (`figure_image`) and a style for every square, highlights
  squares, and turns a sequence of clicked squares into a move with
  `select_move`.
- `schachbrett.game`: `Game` runs the main loop with `start()`, taking the
  human's moves from clicks or text lines; `main()` is the command above.

```python
from schachbrett.character import empty_board
from schachbrett.player import Player
from schachbrett.player_moves import PlayerMoves

board = Player("Black", 2).put_pieces(Player("White", 1).put_pieces(empty_board()))
moves = PlayerMoves()
moves.check_player_moves(board, 1)
print(len(moves), moves.targets((6, 4)))
```

## What it does not do

- There is no graphical window. `BoardView` only keeps the state a board
  widget would show; nothing draws it.
- There is no menu, no two-player mode on the command line and no choice of
  side: the command always pits you as white against random black moves.
- Promotion is always to a queen; games cannot be saved or loaded.

## Running the tests

```
pip install .[test]
pytest
```