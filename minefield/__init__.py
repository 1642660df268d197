"""A minesweeper game with a welcome screen, timer, pause, debug view and leaderboard."""

__version__ = "0.1.0"
__all__ = ["__version__"]