"""A single map tile with its collision box and sprite-sheet clip."""

from __future__ import annotations

import pygame

from nichelite.collision import check_collision
from nichelite.constants import SCALE, TILE_HEIGHT, TILE_WIDTH
from nichelite.textures import TextureManager

TILE_TEXTURE_KEY = "TILES"

# Colour modulation applied to every tile when it is drawn.
TILE_TINT = (50, 50, 50)


class Tile:
    """One cell of the level: a type, a collision box and a clip into the tile sheet."""

    def __init__(
        self,
        x: int,
        y: int,
        tile_type: int,
        clip: pygame.Rect | None = None,
    ) -> None:
        self.box = pygame.Rect(x, y, TILE_WIDTH, TILE_HEIGHT)
        self.tile_type = tile_type
        self.clip = clip

    def render(
        self,
        surface: pygame.Surface,
        camera: pygame.Rect,
        textures: TextureManager,
    ) -> bool:
        """Draw the tile if it is inside ``camera``; return whether it was drawn."""
        if not check_collision(camera, self.box):
            return False
        texture = textures.get_texture(TILE_TEXTURE_KEY)
        origin_x = self.clip.x if self.clip is not None else 0
        origin_y = self.clip.y if self.clip is not None else 0
        source = pygame.Rect(origin_x, origin_y, TILE_WIDTH, TILE_HEIGHT)
        source = source.clip(texture.get_rect())
        if source.w == 0 or source.h == 0:
            return False
        image = pygame.transform.scale(
            texture.subsurface(source), (TILE_WIDTH * SCALE, TILE_HEIGHT * SCALE)
        )
        image.fill(TILE_TINT, special_flags=pygame.BLEND_RGB_MULT)
        surface.blit(image, (self.box.x - camera.x, self.box.y - camera.y))
        return True