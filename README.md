# chesspane

A chessboard in a window. The board starts in the standard opening position,
and you move pieces around it with the mouse.

## Installing

```
pip install .
```

This installs pygame as well.

## Playing

```
chesspane
```

Options:

- `--pieces DIR`: directory holding the piece images (default
  `resources/pieces`, relative to the working directory).
- `--width N`: window width in pixels (default 1600). The window is 16:9, and
  the board fills four fifths of its height.

The pieces directory must hold twelve images: `white-pawn.png`,
`black-pawn.png`, `white-rook.png`, `black-rook.png`, and so on for the knight,
bishop, queen and king. If one is missing, the command prints which file it
could not find and exits with status 1.

Controls:

- **Left mouse button**: press to pick up the piece under the cursor, and
  release to drop it on the square under the cursor. If you release off the
  board, the piece stays held until the cursor comes back over the board. The
  last move is shown by highlighting its start square and its end square.
- **Right mouse button**, while the left button is held and the cursor is over
  the board: put the held piece back on the square it came from.
- **Space**: turn the board over, so that you see it from the other side.
- **R**: reset to the starting position.

## What it does not do

There is no rules engine. Any piece can be dropped on any square, captures
simply replace what was there, and nothing tracks whose turn it is, check,
castling or the end of the game. Of a FEN string only the piece placement is
read; the side to move and the other fields are ignored.

## Using it from code

The board logic does not need a window:

```python
from chesspane.board import ChessBoard

board = ChessBoard(0, 0, 800, (240, 217, 181, 255), (181, 136, 99, 255))
board.load_fen("8/8/8/8/8/8/8/R3K3 w - - 0 1")

index = board.square_at((50, 750))   # 0, a1 seen from White's side
board.press((50, 750))                # pick up the rook
board.release((350, 750))             # drop it on d1
board.last_move                       # (0, 3)
```

Squares are numbered 0 (a1) to 63 (h8) and held in `board.squares`.

- `load_fen(fen)` reads the placement field. The string `"STARTING_POSITION"`
  loads the standard opening position, as does `reset()`. Unknown characters
  are skipped; a piece placed off the board raises `ValueError`.
- `flip()` turns the board over (`whites_pov`).
- `contains(pos)` tells whether a screen point is on the board, `square_at(pos)`
  gives the square under it (raising `ValueError` off the board), and
  `square_origin(index)` gives the top-left pixel of a square.
- `press(pos)`, `release(pos)` and `cancel()` pick up, drop and put back a
  piece; each returns whether it did anything. The held piece is in
  `cursor_piece` and the square it came from in `held_index`.

`chesspane.piece` holds the piece encoding: the type constants `PAWN`,
`KNIGHT`, `BISHOP`, `ROOK`, `QUEEN`, `KING`, the colour bits `WHITE` and
`BLACK`, `NONE` for an empty square, and the helpers `color`, `is_color`,
`piece_type`, `is_sliding` and `from_fen_char`.

To draw the board yourself, `chesspane.render.load_textures(directory)` loads
the piece images, and `chesspane.render.draw_board(surface, board, textures,
mouse_pos)` draws squares, highlights and pieces onto a pygame surface.
`chesspane.game.create_board(screen_width)` sets up a board sized for a window,
and `chesspane.game.run(board, textures)` runs the event loop on a display that
has already been opened.

## Tests

```
pip install .[test]
pytest
```