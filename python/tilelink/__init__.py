"""Tile link: connect matching tiles with a path of at most two turns."""

__version__ = "0.1.0"
