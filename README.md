# schaken

A chess game for two players sharing one screen. Pieces are moved by
clicking on the board: the first click selects one of your own pieces,
the second click chooses where it goes. The board highlights the squares
the selected piece can move to and marks pieces of the side to move that
are under attack.

## Installing

```
pip install .
```

The window is drawn with Tk, which ships with most Python installations.
Pieces are drawn as Unicode chess symbols.

## Playing

Start the game with:

```
schaken
```

White moves first. After every move a message tells you when a player is
checkmated or in check, or when the side to move has no legal move left
(a draw). Clicking an empty square, a piece of the wrong colour or a
square the selected piece cannot reach also gives a message.

The menus offer:

- **File** — New (Ctrl+N), Open (Ctrl+O), Save (Ctrl+S) and Exit
  (Ctrl+Q). Exit, like closing the window, asks for confirmation first;
  unsaved changes are lost.
- **Game** — Undo (Ctrl+Z) and redo (Ctrl+Y), which step between the
  boards recorded after each click.
- **Visualize** — three check boxes: "valid moves" switches the
  highlighting of the selected piece's moves, "threathed player" switches
  the marking of attacked pieces. "threathed enemy" can be toggled and is
  reported, but changes nothing on the board.

## Save files

Saved games use the `.chs` extension. A save file holds the 64 squares
row by row, each as a string written as a 4-byte big-endian byte length
followed by UTF-16 (big-endian) text. An occupied square holds a piece
letter (`K` king, `Q` queen, `R` rook, `B` bishop, `H` knight, `P` pawn)
followed by `w` or `b` for its colour; an empty square holds `.`. Only
the board is stored, not whose turn it is.

## Using it from Python

The rules live apart from the window, so a game can be driven from code:

```python
from schaken.game import Game
from schaken.pieces import Color
from schaken.savefile import save_game, load_game

game = Game()
pawn = game.get_piece(6, 4)
print(pawn.valid_moves(game))      # [(5, 4), (4, 4)]
game.move(pawn, 4, 4)              # True
print(game.in_check(Color.BLACK))  # False

save_game(game, "opening.chs")
restored = Game()
load_game(restored, "opening.chs")
```

Rows and columns are numbered 0 to 7; row 0 is Black's back rank and
row 7 is White's.

- `schaken.pieces` — `Color`, `PieceType` and the pieces `Pawn`, `Rook`,
  `Knight`, `Bishop`, `King` and `Queen`, each with `valid_moves(game)`.
- `schaken.game` — `Game`, with `move`, `in_check`, `checkmate`,
  `stalemate`, `has_legal_move`, `get_piece`, `set_piece`, `clear`,
  `snapshot` and `restore`. `move` returns `False` and leaves the board
  unchanged when the move would leave the mover's king in check.
- `schaken.savefile` — `piece_code`, `piece_from_code`, `encode_board`,
  `decode_board`, `save_game` and `load_game`; failures raise
  `SaveFileError`.
- `schaken.board` — `BoardView`, a drawing-independent model of what the
  board shows: pieces, focus/threat/selection markings, tile colours,
  piece tints and `cell_from_point` for mapping a click to a square.
- `schaken.controller` — `ChessController` does what the window does
  without drawing anything: feed it clicks with `clicked(row, col)` and
  use `undo`, `redo`, `new_game`, `visualization_change`, `save(path)`
  and `open(path)`. Messages are collected in its `messages` list and
  passed to an optional `notify` callback.
- `schaken.app` — `ChessWindow`, the Tk window, and `main`, which the
  `schaken` command runs.

## What it does not do

Moves follow each piece's basic pattern only: there is no castling, no
en passant and no pawn promotion. There is no computer opponent, no
clock and no move list or notation; a save file keeps just the board.

## Running the tests

```
pip install .[test]
pytest
```