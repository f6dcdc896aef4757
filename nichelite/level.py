"""A level made of tiles read from a whitespace-separated map file."""

from __future__ import annotations

import os

import pygame

from nichelite.constants import (
    LEVEL_WIDTH,
    TILE_GRASS,
    TILE_HEIGHT,
    TILE_WALL,
    TILE_WIDTH,
    TOTAL_TILES,
)
from nichelite.textures import TextureManager
from nichelite.tile import Tile


class LevelError(Exception):
    """Raised when a map file cannot be read or holds bad data."""


class Level:
    """The tiles of one level and the sprite-sheet clips they draw from."""

    def __init__(self) -> None:
        self.tiles: list[Tile] = []
        self.clips = (
            pygame.Rect(0, 0, TILE_WIDTH, TILE_HEIGHT),
            pygame.Rect(0, 32, TILE_WIDTH, TILE_HEIGHT),
        )

    def load_from_file(self, level_file: str | os.PathLike[str]) -> None:
        """Read ``TOTAL_TILES`` tile types, row by row, from ``level_file``.

        Tokens beyond the first ``TOTAL_TILES`` are ignored. On error the
        previously loaded tiles are kept and :class:`LevelError` is raised.
        """
        try:
            with open(level_file, encoding="utf-8") as handle:
                tokens = handle.read().split()
        except OSError as exc:
            raise LevelError(f"Failed to open map {level_file}") from exc

        tiles: list[Tile] = []
        for index, token in enumerate(tokens[:TOTAL_TILES]):
            try:
                tile_type = int(token)
            except ValueError:
                raise LevelError(
                    f"Error loading map: bad value {token!r} at tile {index}"
                ) from None
            if tile_type not in (TILE_GRASS, TILE_WALL):
                raise LevelError(
                    f"Error loading map: invalid tile type {tile_type} at tile {index}"
                )
            row, column = divmod(index, LEVEL_WIDTH)
            tiles.append(
                Tile(
                    column * TILE_WIDTH,
                    row * TILE_HEIGHT,
                    tile_type,
                    self.clips[tile_type],
                )
            )

        if len(tiles) < TOTAL_TILES:
            raise LevelError("Error loading map: unexpected end of file")
        self.tiles = tiles

    def render(
        self,
        surface: pygame.Surface,
        camera: pygame.Rect,
        textures: TextureManager,
    ) -> int:
        """Draw every tile visible through ``camera``; return how many were drawn."""
        return sum(tile.render(surface, camera, textures) for tile in self.tiles)