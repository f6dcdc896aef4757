"""The player-controlled character and its camera."""

from __future__ import annotations

import pygame

from nichelite.character import Character
from nichelite.constants import (
    LEVEL_HEIGHT,
    LEVEL_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TILE_HEIGHT,
    TILE_WIDTH,
)

_MOVEMENT_KEYS = frozenset(
    {pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT, pygame.K_q}
)


class Player(Character):
    """The character the user controls."""

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Report whether ``event`` concerns a control key.

        Movement itself is read from the held keys in ``update``, so the
        event leaves the player's state unchanged.
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False
        return getattr(event, "key", None) in _MOVEMENT_KEYS

    def set_camera(self, camera: pygame.Rect) -> pygame.Rect:
        """Centre ``camera`` on the player, kept within the level; return it."""
        camera.x = (self.box.x + self.width // 2) - SCREEN_WIDTH // 2
        camera.y = (self.box.y + self.height // 2) - SCREEN_HEIGHT // 2

        camera.x = max(camera.x, 0)
        camera.y = max(camera.y, 0)
        camera.x = min(camera.x, LEVEL_WIDTH * TILE_WIDTH - camera.w)
        camera.y = min(camera.y, LEVEL_HEIGHT * TILE_HEIGHT - camera.h)
        return camera