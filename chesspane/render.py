"""Drawing a chess board and its pieces onto a pygame surface."""

from __future__ import annotations

import errno
from pathlib import Path
from typing import Mapping, Optional, Tuple, Union

import pygame

from . import piece
from .board import ChessBoard

_COLOR_NAMES = {piece.WHITE: "white", piece.BLACK: "black"}
_TYPE_NAMES = {
    piece.PAWN: "pawn",
    piece.ROOK: "rook",
    piece.KNIGHT: "knight",
    piece.BISHOP: "bishop",
    piece.QUEEN: "queen",
    piece.KING: "king",
}

PIECE_FILES = {
    type_code | color_code: f"{color_name}-{type_name}.png"
    for color_code, color_name in _COLOR_NAMES.items()
    for type_code, type_name in _TYPE_NAMES.items()
}


def load_textures(directory: Union[str, Path]) -> dict[int, pygame.Surface]:
    """Load the twelve piece images from ``directory``, keyed by piece code.

    Raises FileNotFoundError if any image is missing.
    """
    directory = Path(directory)
    converting = pygame.display.get_init() and pygame.display.get_surface() is not None
    textures: dict[int, pygame.Surface] = {}
    for code, name in PIECE_FILES.items():
        path = directory / name
        if not path.is_file():
            raise FileNotFoundError(errno.ENOENT, "piece image not found", str(path))
        image = pygame.image.load(str(path))
        textures[code] = image.convert_alpha() if converting else image
    return textures


def _scaled(texture: pygame.Surface, size: int) -> pygame.Surface:
    if texture.get_size() == (size, size):
        return texture
    if texture.get_bitsize() >= 24:
        return pygame.transform.smoothscale(texture, (size, size))
    return pygame.transform.scale(texture, (size, size))


def _fill_translucent(surface: pygame.Surface, rect: pygame.Rect, color) -> None:
    overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
    overlay.fill(color)
    surface.blit(overlay, rect.topleft)


def draw_board(
    surface: pygame.Surface,
    board: ChessBoard,
    textures: Mapping[int, pygame.Surface],
    mouse_pos: Optional[Tuple[float, float]],
) -> None:
    """Draw squares, the last-move highlight, pieces and the held piece.

    The held piece is drawn centred on ``mouse_pos``; pass None to omit it.
    Raises KeyError if a piece on the board has no texture.
    """
    sq = board.square_size
    parity = 0 if board.whites_pov else 1
    for row in range(8):
        for col in range(8):
            colour = board.color1 if (row + col + parity) % 2 == 0 else board.color2
            surface.fill(colour, pygame.Rect(board.x + col * sq, board.y + row * sq, sq, sq))

    if board.last_move is not None:
        prev, cur = board.last_move
        for index, colour in (
            (prev, board.move_highlight_color1),
            (cur, board.move_highlight_color2),
        ):
            _fill_translucent(surface, pygame.Rect(board.square_origin(index), (sq, sq)), colour)

    for index, code in enumerate(board.squares):
        if code == piece.NONE:
            continue
        surface.blit(_scaled(textures[code], sq), board.square_origin(index))

    if board.cursor_piece != piece.NONE and mouse_pos is not None:
        mx, my = mouse_pos
        surface.blit(
            _scaled(textures[board.cursor_piece], sq),
            (int(mx - sq / 2), int(my - sq / 2)),
        )