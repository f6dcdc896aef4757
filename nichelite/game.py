"""Window setup, asset loading and the main loop."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

import pygame

from nichelite.constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH, Direction, State
from nichelite.level import Level, LevelError
from nichelite.player import Player
from nichelite.textures import TextureLoadError, TextureManager
from nichelite.tile import TILE_TEXTURE_KEY

logger = logging.getLogger(__name__)

WINDOW_TITLE = "nicheLite"
LEVEL_FILE = "assets/lazy.map"
TILE_SHEET = "assets/peaceful_pixels/tiles_free.png"

_SWORD_SHEETS = "assets/TDTA/Sheets/Sword"

PLAYER_SHEETS: dict[tuple[State, Direction], str] = {
    (State.IDLE, Direction.DOWN): f"{_SWORD_SHEETS}/Sword_1_ID.png",
    (State.IDLE, Direction.LEFT): f"{_SWORD_SHEETS}/Sword_1_IL.png",
    (State.IDLE, Direction.RIGHT): f"{_SWORD_SHEETS}/Sword_1_IR.png",
    (State.IDLE, Direction.UP): f"{_SWORD_SHEETS}/Sword_1_IU.png",
    (State.RUN, Direction.DOWN): f"{_SWORD_SHEETS}/Sword_2_RD.png",
    (State.RUN, Direction.LEFT): f"{_SWORD_SHEETS}/Sword_2_RL.png",
    (State.RUN, Direction.RIGHT): f"{_SWORD_SHEETS}/Sword_2_RR.png",
    (State.RUN, Direction.UP): f"{_SWORD_SHEETS}/Sword_2_RU.png",
    (State.ATTACK, Direction.DOWN): f"{_SWORD_SHEETS}/Sword_6_A1D.png",
    (State.ATTACK, Direction.LEFT): f"{_SWORD_SHEETS}/Sword_6_A1L.png",
    (State.ATTACK, Direction.RIGHT): f"{_SWORD_SHEETS}/Sword_6_A1R.png",
    (State.ATTACK, Direction.UP): f"{_SWORD_SHEETS}/Sword_6_A1U.png",
}


class GameInitError(Exception):
    """Raised when the window or image support cannot be set up."""


class Game:
    """Owns the window, the loaded textures and the current level."""

    def __init__(self) -> None:
        self.window: pygame.Surface | None = None
        self.level = Level()
        self.textures = TextureManager()

    def init(self) -> None:
        """Open the game window and check that PNG images can be loaded."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise GameInitError(f"SDL could not initialize! {exc}") from exc
        try:
            self.window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            raise GameInitError(f"Window could not be created! {exc}") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        self.window.fill((0, 0, 0))
        if not pygame.image.get_extended():
            raise GameInitError("Image loading could not initialize: no PNG support")

    def load_media(self, textures: TextureManager) -> None:
        """Load the player sheets and the tile sheet into ``textures``.

        A missing player sheet is only logged; a missing tile sheet raises
        :class:`TextureLoadError`.
        """
        for key, path in PLAYER_SHEETS.items():
            try:
                textures.load_texture(key, path)
            except TextureLoadError as exc:
                logger.warning("Failed to load player texture %s: %s", path, exc)

        textures.load_texture(TILE_TEXTURE_KEY, TILE_SHEET)
        logger.info("Successfully loaded tile set texture")

    def load_level(self, level_file: str | os.PathLike[str]) -> None:
        """Load the level's tiles from ``level_file``."""
        self.level.load_from_file(level_file)

    def render_level(self, surface: pygame.Surface, camera: pygame.Rect) -> int:
        """Draw the visible part of the level; return how many tiles were drawn."""
        return self.level.render(surface, camera, self.textures)

    def run(self) -> None:
        """Load assets and run the main loop until the window is closed."""
        if self.window is None:
            raise GameInitError("Game.init() must be called before run()")

        camera = pygame.Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
        player = Player(clock=pygame.time.get_ticks)

        try:
            self.load_media(self.textures)
        except TextureLoadError as exc:
            logger.error("%s", exc)
            print("Failed to load media!")
            return

        try:
            self.load_level(LEVEL_FILE)
        except LevelError as exc:
            print(exc)

        frame_clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                player.handle_event(event)

            self.window.fill((0, 0, 0))

            current_time = pygame.time.get_ticks()
            player.update(current_time, pygame.key.get_pressed())
            player.move(self.level.tiles)
            player.set_camera(camera)
            self.render_level(self.window, camera)
            player.render(self.window, self.textures)

            pygame.display.flip()
            frame_clock.tick(FPS)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; return the process exit status."""
    del argv
    game = Game()
    try:
        game.init()
    except GameInitError as exc:
        print(exc, file=sys.stderr)
        print("Failed to initialize!")
    else:
        game.run()
    finally:
        pygame.quit()
    return 0