"""A two-player chess game: rules, a board model, save files, undo/redo and a Tk window."""

__version__ = "0.1.0"

__all__ = ["__version__"]