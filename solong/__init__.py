"""Map validation, XPM sprite loading into pixel images and colour handling for a tile-based game."""

__version__ = "0.1.0"
__all__ = ["colornames", "colors", "textscan", "image", "xpm", "gamemap"]