import pygame
import pytest

from chesspane import piece
from chesspane.board import ChessBoard
from chesspane.render import PIECE_FILES, draw_board, load_textures

LIGHT = (240, 217, 181, 255)
DARK = (181, 136, 99, 255)
BLACK_RGBA = (0, 0, 0, 255)

_EXPECTED_NAMES = {
    piece.PAWN | piece.WHITE: "white-pawn.png",
    piece.PAWN | piece.BLACK: "black-pawn.png",
    piece.ROOK | piece.WHITE: "white-rook.png",
    piece.ROOK | piece.BLACK: "black-rook.png",
    piece.KNIGHT | piece.WHITE: "white-knight.png",
    piece.KNIGHT | piece.BLACK: "black-knight.png",
    piece.BISHOP | piece.WHITE: "white-bishop.png",
    piece.BISHOP | piece.BLACK: "black-bishop.png",
    piece.QUEEN | piece.WHITE: "white-queen.png",
    piece.QUEEN | piece.BLACK: "black-queen.png",
    piece.KING | piece.WHITE: "white-king.png",
    piece.KING | piece.BLACK: "black-king.png",
}


def _solid(colour, size=10):
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    surf.fill(colour)
    return surf


def _texture_colour(code):
    return (code * 7 % 256, 200, 30, 255)


@pytest.fixture
def textures():
    return {code: _solid(_texture_colour(code)) for code in PIECE_FILES}


@pytest.fixture
def board():
    return ChessBoard(0, 0, 80, LIGHT, DARK)


def _pixel(surface, point):
    return tuple(surface.get_at((int(point[0]), int(point[1]))))


def test_load_textures_reads_all_twelve_named_files(tmp_path):
    for code, name in _EXPECTED_NAMES.items():
        pygame.image.save(_solid(_texture_colour(code)), str(tmp_path / name))
    loaded = load_textures(tmp_path)
    assert set(loaded) == set(_EXPECTED_NAMES)
    white_pawn = loaded[piece.PAWN | piece.WHITE]
    black_king = loaded[piece.KING | piece.BLACK]
    assert tuple(white_pawn.get_at((0, 0)))[:3] == _texture_colour(piece.PAWN | piece.WHITE)[:3]
    assert tuple(black_king.get_at((0, 0)))[:3] == _texture_colour(piece.KING | piece.BLACK)[:3]


def test_load_textures_round_trip(tmp_path):
    for code, name in PIECE_FILES.items():
        pygame.image.save(_solid(_texture_colour(code)), str(tmp_path / name))
    loaded = load_textures(tmp_path)
    assert set(loaded) == set(PIECE_FILES)
    for code, surf in loaded.items():
        assert tuple(surf.get_at((0, 0)))[:3] == _texture_colour(code)[:3]


def test_load_textures_missing_file(tmp_path):
    for code, name in list(PIECE_FILES.items())[:-1]:
        pygame.image.save(_solid(_texture_colour(code)), str(tmp_path / name))
    with pytest.raises(FileNotFoundError):
        load_textures(tmp_path)


def test_adjacent_squares_alternate(board, textures):
    surface = pygame.Surface((80, 80))
    draw_board(surface, board, textures, None)
    for index in range(63):
        if index % 8 == 7:
            continue
        a = _pixel(surface, board.square_origin(index))
        b = _pixel(surface, board.square_origin(index + 1))
        assert {a, b} == {LIGHT, DARK}


def test_flip_swaps_colour_at_fixed_pixel(board, textures):
    surface = pygame.Surface((80, 80))
    draw_board(surface, board, textures, None)
    before = _pixel(surface, (0, 0))
    board.flip()
    draw_board(surface, board, textures, None)
    after = _pixel(surface, (0, 0))
    assert {before, after} == {LIGHT, DARK}


def test_pieces_drawn_on_their_squares(board, textures):
    board.reset()
    surface = pygame.Surface((80, 80))
    draw_board(surface, board, textures, None)
    for index, code in enumerate(board.squares):
        x, y = board.square_origin(index)
        centre = _pixel(surface, (x + 5, y + 5))
        if code == piece.NONE:
            assert centre in (LIGHT, DARK)
        else:
            assert centre == _texture_colour(code)


def test_pieces_follow_flip(board, textures):
    board.reset()
    board.flip()
    surface = pygame.Surface((80, 80))
    draw_board(surface, board, textures, None)
    x, y = board.square_origin(4)
    assert _pixel(surface, (x + 5, y + 5)) == _texture_colour(piece.KING | piece.WHITE)


def test_cursor_piece_drawn_at_mouse(board, textures):
    board.reset()
    ox, oy = board.square_origin(12)
    assert board.press((ox + 5, oy + 5))
    surface = pygame.Surface((80, 80))
    mouse = (40, 40)
    draw_board(surface, board, textures, mouse)
    assert _pixel(surface, mouse) == _texture_colour(piece.PAWN | piece.WHITE)
    assert _pixel(surface, (ox + 5, oy + 5)) in (LIGHT, DARK)


def test_cursor_piece_omitted_without_mouse(board, textures):
    board.reset()
    ox, oy = board.square_origin(12)
    board.press((ox + 5, oy + 5))
    surface = pygame.Surface((80, 80))
    draw_board(surface, board, textures, None)
    assert _pixel(surface, (40, 40)) in (LIGHT, DARK)


def test_last_move_highlight_blends(textures):
    board = ChessBoard(0, 0, 80, BLACK_RGBA, BLACK_RGBA)
    board.last_move = (12, 28)
    surface = pygame.Surface((80, 80))
    draw_board(surface, board, textures, None)
    plain = _pixel(surface, board.square_origin(0))
    prev = _pixel(surface, board.square_origin(12))
    cur = _pixel(surface, board.square_origin(28))
    assert plain[1] == 0
    assert 0 < prev[1] < cur[1]


def test_missing_texture_raises(board):
    board.reset()
    surface = pygame.Surface((80, 80))
    with pytest.raises(KeyError):
        draw_board(surface, board, {}, None)