"""Loading and lookup of image textures keyed by name or animation."""

from __future__ import annotations

from typing import Hashable

import pygame


class TextureLoadError(Exception):
    """Raised when an image file cannot be loaded."""


class MissingTextureError(KeyError):
    """Raised when no texture is stored under the requested key."""


class TextureManager:
    """Holds textures keyed by a ``(State, Direction)`` pair or a string name."""

    def __init__(self) -> None:
        self._textures: dict[Hashable, pygame.Surface] = {}

    def init_texture(self, file_path: str) -> pygame.Surface:
        """Load an image file into a surface with per-pixel alpha when possible."""
        try:
            surface = pygame.image.load(file_path)
        except (pygame.error, OSError) as exc:
            raise TextureLoadError(f"Unable to load image {file_path}: {exc}") from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            try:
                surface = surface.convert_alpha()
            except pygame.error as exc:
                raise TextureLoadError(
                    f"Unable to create texture from {file_path}: {exc}"
                ) from exc
        return surface

    def load_texture(self, key: Hashable, file_path: str) -> None:
        """Load ``file_path`` and store it under ``key``, replacing any previous one.

        On failure the existing texture under ``key`` is left untouched.
        """
        self._textures[key] = self.init_texture(file_path)

    def get_texture(self, key: Hashable) -> pygame.Surface:
        """Return the texture stored under ``key``."""
        try:
            return self._textures[key]
        except KeyError:
            raise MissingTextureError(key) from None