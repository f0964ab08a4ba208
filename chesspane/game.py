"""The interactive board window: setup, event loop and command entry point."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

import pygame

from .board import ChessBoard
from .render import draw_board, load_textures

SCREEN_WIDTH = 1600
FPS = 60
BACKGROUND = (50, 50, 50, 255)
LIGHT_SQUARE = (240, 217, 181, 255)
DARK_SQUARE = (181, 136, 99, 255)
DEFAULT_PIECES_DIR = "resources/pieces"


def screen_size(screen_width: int) -> tuple[int, int]:
    """Return the 16:9 window size for a given width."""
    return screen_width, screen_width * 9 // 16


def create_board(screen_width: int = SCREEN_WIDTH) -> ChessBoard:
    """Create a board in the starting position, sized and placed for the window."""
    if screen_width <= 0:
        raise ValueError(f"screen width must be positive, got {screen_width}")
    _, height = screen_size(screen_width)
    board_size = height * 4 // 5
    offset = (height - board_size) // 2
    board = ChessBoard(offset, offset, board_size, LIGHT_SQUARE, DARK_SQUARE)
    board.reset()
    return board


@dataclass
class _Controls:
    board: ChessBoard
    left_down: bool = False

    def handle(self, event: pygame.event.Event) -> None:
        board = self.board
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                board.flip()
            elif event.key == pygame.K_r:
                board.reset()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.left_down = True
                board.press(event.pos)
            elif event.button == 3 and self.left_down and board.contains(event.pos):
                board.cancel()
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.left_down = False
            board.release(event.pos)
        elif event.type == pygame.MOUSEMOTION and not self.left_down:
            board.release(event.pos)


def run(board: ChessBoard, textures: Mapping[int, pygame.Surface]) -> None:
    """Run the event loop on the current display surface until the window closes."""
    surface = pygame.display.get_surface() if pygame.display.get_init() else None
    if surface is None:
        raise RuntimeError("no display mode has been set")
    controls = _Controls(board)
    clock = pygame.time.Clock()
    while True:
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                controls.handle(event)
        surface.fill(BACKGROUND)
        draw_board(surface, board, textures, pygame.mouse.get_pos())
        pygame.display.flip()
        if not running:
            return
        clock.tick(FPS)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the board window; return the process exit status."""
    parser = argparse.ArgumentParser(prog="chesspane", description="Interactive chess board.")
    parser.add_argument("--pieces", default=DEFAULT_PIECES_DIR, help="directory of piece images")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH, help="window width in pixels")
    args = parser.parse_args(argv)
    if args.width <= 0:
        parser.error("--width must be positive")

    board = create_board(args.width)
    try:
        textures = load_textures(args.pieces)
    except FileNotFoundError as exc:
        print(f"chesspane: {exc.strerror}: {exc.filename}", file=sys.stderr)
        return 1

    pygame.init()
    try:
        pygame.display.set_mode(screen_size(args.width))
        pygame.display.set_caption("Chess")
        textures = {code: tex.convert_alpha() for code, tex in textures.items()}
        run(board, textures)
    finally:
        pygame.quit()
    return 0