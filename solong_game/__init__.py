"""Tile-based puzzle game on .ber maps: map loading, validation, game rules and a pygame front end."""

__version__ = "0.1.0"
__all__ = ["cformat", "mapfile", "validation", "game", "app"]