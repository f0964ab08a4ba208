"""Chess board state: placement, orientation, geometry and drag-and-drop moves."""

from __future__ import annotations

from typing import Optional, Tuple

from . import piece

Color = Tuple[int, int, int, int]
Point = Tuple[float, float]

STARTING_POSITION = "STARTING_POSITION"
STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


class ChessBoard:
    """A board drawn at (x, y) with the given pixel size; square 0 is A1, 63 is H8."""

    def __init__(self, x: int, y: int, size: int, color1: Color, color2: Color) -> None:
        self.x = x
        self.y = y
        self.size = size
        self.color1 = color1
        self.color2 = color2
        self.move_highlight_color1: Color = (150, 170, 10, 90)
        self.move_highlight_color2: Color = (150, 170, 10, 150)
        self.piece_highlight_color: Color = (140, 190, 0, 150)
        self.whites_pov = True
        self.squares: list[int] = [piece.NONE] * 64
        self.cursor_piece = piece.NONE
        self.held_index: Optional[int] = None
        self.last_move: Optional[Tuple[int, int]] = None
        self.highlighted_piece: Optional[int] = None

    @property
    def square_size(self) -> int:
        return self.size // 8

    def load_fen(self, fen: str) -> None:
        """Place pieces from the placement field of a FEN string.

        The literal ``"STARTING_POSITION"`` loads the standard opening setup.
        Unknown characters are ignored; placement beyond the board raises ValueError.
        """
        if fen == STARTING_POSITION:
            fen = STARTING_FEN
        squares = [piece.NONE] * 64
        row, col = 8, 0
        for char in fen:
            if char == " ":
                break
            if "1" <= char <= "8":
                col += int(char)
            elif char == "/":
                row -= 1
                col = 0
            else:
                try:
                    code = piece.from_fen_char(char)
                except ValueError:
                    continue
                index = (row - 1) * 8 + col
                if not (1 <= row <= 8 and 0 <= col < 8):
                    raise ValueError(f"piece {char!r} placed outside the board in FEN {fen!r}")
                squares[index] = code
                col += 1
        self.squares = squares

    def reset(self) -> None:
        """Load the standard starting position."""
        self.load_fen(STARTING_POSITION)

    def flip(self) -> None:
        """Switch between white's and black's point of view."""
        self.whites_pov = not self.whites_pov

    def contains(self, pos: Point) -> bool:
        """Return True if the screen position lies on the board (edges included)."""
        mx, my = pos
        return self.x <= mx <= self.x + self.size and self.y <= my <= self.y + self.size

    def square_at(self, pos: Point) -> int:
        """Return the square index under a screen position; ValueError if off the board."""
        if not self.contains(pos):
            raise ValueError(f"position {pos!r} is outside the board")
        mx, my = pos
        col = min(int((mx - self.x) / self.square_size), 7)
        row = min(int((my - self.y) / self.square_size), 7)
        if self.whites_pov:
            return (7 - row) * 8 + col
        return row * 8 + (7 - col)

    def square_origin(self, index: int) -> Tuple[int, int]:
        """Return the top-left screen pixel of a square."""
        if not 0 <= index < 64:
            raise ValueError(f"square index out of range: {index}")
        rank, file = divmod(index, 8)
        if self.whites_pov:
            row, col = 7 - rank, file
        else:
            row, col = rank, 7 - file
        return self.x + col * self.square_size, self.y + row * self.square_size

    def press(self, pos: Point) -> bool:
        """Pick up the piece under the position if nothing is held.

        Returns True if a piece is now held as a result.
        """
        if not self.contains(pos) or self.cursor_piece != piece.NONE:
            return False
        index = self.square_at(pos)
        self.cursor_piece = self.squares[index]
        self.held_index = index
        self.squares[index] = piece.NONE
        return self.cursor_piece != piece.NONE

    def release(self, pos: Point) -> bool:
        """Drop the held piece on the square under the position.

        Returns True if a piece was placed. Off the board the piece stays held.
        """
        if self.cursor_piece == piece.NONE or not self.contains(pos):
            return False
        index = self.square_at(pos)
        self.squares[index] = self.cursor_piece
        self.cursor_piece = piece.NONE
        if self.held_index is not None and self.held_index != index:
            self.last_move = (self.held_index, index)
        return True

    def cancel(self) -> bool:
        """Return the held piece to the square it came from."""
        if self.cursor_piece == piece.NONE or self.held_index is None:
            return False
        self.squares[self.held_index] = self.cursor_piece
        self.cursor_piece = piece.NONE
        self.highlighted_piece = None
        return True