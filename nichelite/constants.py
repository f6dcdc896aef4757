"""Game-wide constants and the state and direction enumerations."""

from enum import Enum

FPS = 60

SCALE = 3

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 800

# Level size, measured in tiles.
LEVEL_WIDTH = 64
LEVEL_HEIGHT = 40

TILE_WIDTH = 32
TILE_HEIGHT = 32

TOTAL_TILES = LEVEL_WIDTH * LEVEL_HEIGHT
TOTAL_TILE_SPRITES = 2

TILE_GRASS = 0
TILE_WALL = 1

WALKING_ANIMATION_FRAMES = 16


class State(Enum):
    """What a character is currently doing."""

    IDLE = 0
    RUN = 1
    ATTACK = 2


class Direction(Enum):
    """Which way a character is facing."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3