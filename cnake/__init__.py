"""A snake game for the terminal: board, tail, game rules and the cnake command."""

__version__ = "0.1.0"