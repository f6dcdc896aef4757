"""A small top-down tile-map action game: collision, timing, textures, level, characters and the main loop."""

__version__ = "0.1.0"