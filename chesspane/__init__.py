"""A drag-and-drop chessboard in a pygame window, set up from FEN positions."""

__version__ = "0.1.0"
__all__ = ["piece", "board", "render", "game"]