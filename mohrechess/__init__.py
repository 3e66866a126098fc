"""Two-player chess board with move hints for mate threats, and a pygame window."""

__version__ = "0.1.0"
__all__ = ["core", "pieces", "loader", "board", "gui"]