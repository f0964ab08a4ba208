"""Piece encoding: a piece is a small integer holding a type and a colour bit."""

NONE = 0
PAWN = 1
KNIGHT = 2
BISHOP = 3
ROOK = 4
QUEEN = 5
KING = 6

WHITE = 8
BLACK = 16

_COLOR_MASK = WHITE | BLACK
_TYPE_MASK = PAWN | KNIGHT | BISHOP | ROOK | QUEEN | KING
_SLIDING_MASK = ROOK | BISHOP | QUEEN

_FEN_PIECES = {
    "P": PAWN | WHITE,
    "p": PAWN | BLACK,
    "R": ROOK | WHITE,
    "r": ROOK | BLACK,
    "N": KNIGHT | WHITE,
    "n": KNIGHT | BLACK,
    "B": BISHOP | WHITE,
    "b": BISHOP | BLACK,
    "Q": QUEEN | WHITE,
    "q": QUEEN | BLACK,
    "K": KING | WHITE,
    "k": KING | BLACK,
}


def color(piece: int) -> int:
    """Return the colour bits of a piece (WHITE, BLACK or NONE)."""
    return piece & _COLOR_MASK


def is_color(piece: int, color: int) -> bool:
    """Return True if the piece's colour bits equal ``color``."""
    return (piece & _COLOR_MASK) == color


def piece_type(piece: int) -> int:
    """Return the type bits of a piece."""
    return piece & _TYPE_MASK


def is_sliding(piece: int) -> bool:
    """Return True if the piece shares any bit with rook, bishop or queen."""
    return (piece & _SLIDING_MASK) != 0


def from_fen_char(char: str) -> int:
    """Return the piece for a FEN piece letter; raise ValueError for anything else."""
    try:
        return _FEN_PIECES[char]
    except KeyError:
        raise ValueError(f"not a FEN piece letter: {char!r}") from None