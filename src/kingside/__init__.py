"""Kingside: immutable chess boards and the moves that transform them."""

__version__ = "0.1.0"
