"""Animated characters that move over the level and collide with walls."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import pygame

from nichelite.collision import touches_wall
from nichelite.constants import SCALE, SCREEN_HEIGHT, SCREEN_WIDTH, Direction, State
from nichelite.textures import MissingTextureError, TextureManager

logger = logging.getLogger(__name__)

_FRAME_SIZE = 128
_TICK_MASK = 0xFFFFFFFF


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


def _strip(count: int) -> tuple[pygame.Rect, ...]:
    return tuple(
        pygame.Rect(index * _FRAME_SIZE, 0, _FRAME_SIZE, _FRAME_SIZE)
        for index in range(count)
    )


@dataclass(frozen=True)
class Animation:
    """Source rectangles of a sprite strip and how long each frame shows (ms)."""

    frames: tuple[pygame.Rect, ...]
    frame_duration: int


def _default_animations() -> dict[tuple[State, Direction], Animation]:
    frames = _strip(5)
    attack_frames = _strip(8)
    durations = {
        State.IDLE: Animation(frames, 200),
        State.RUN: Animation(frames, 100),
        State.ATTACK: Animation(attack_frames, 100),
    }
    directions = (Direction.DOWN, Direction.LEFT, Direction.RIGHT, Direction.UP)
    return {
        (state, direction): durations[state]
        for state in (State.IDLE, State.RUN, State.ATTACK)
        for direction in directions
    }


class Character:
    """A keyboard-driven, animated entity with a collision box."""

    def __init__(self, clock: Callable[[], int] = _monotonic_ms) -> None:
        self._clock = clock
        self.pos_x = 0.0
        self.pos_y = 0.0
        self.width = 32
        self.height = 32
        self.box = pygame.Rect(0, 0, self.width, self.height)

        self.animations = _default_animations()
        self._state = State.IDLE
        self._direction = Direction.DOWN
        self._frame_index = 0
        self._last_frame_time = 0

        self.vel_x = 0
        self.vel_y = 0
        self.max_vel = 4

    @property
    def state(self) -> State:
        return self._state

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def frame_index(self) -> int:
        return self._frame_index

    @property
    def last_frame_time(self) -> int:
        return self._last_frame_time

    def move(self, tiles: Iterable[Any]) -> None:
        """Apply velocity one axis at a time, undoing moves off screen or into walls."""
        tiles = list(tiles)
        self.box.x += self.vel_x
        if (
            self.box.x < 0
            or self.box.x + self.width > SCREEN_WIDTH
            or touches_wall(self.box, tiles)
        ):
            self.box.x -= self.vel_x

        self.box.y += self.vel_y
        if (
            self.box.y < 0
            or self.box.y + self.height > SCREEN_HEIGHT
            or touches_wall(self.box, tiles)
        ):
            self.box.y -= self.vel_y

    def update(self, current_time: int, pressed: Any) -> None:
        """Read the held keys, set velocity, state and facing, and step the animation.

        ``pressed`` is indexed by pygame key constants, as returned by
        ``pygame.key.get_pressed()``.
        """
        self.vel_x = 0
        self.vel_y = 0

        if pressed[pygame.K_UP]:
            self.vel_y = -self.max_vel
            self.set_direction(Direction.UP)
        if pressed[pygame.K_DOWN]:
            self.vel_y = self.max_vel
            self.set_direction(Direction.DOWN)
        if pressed[pygame.K_LEFT]:
            self.vel_x = -self.max_vel
            self.set_direction(Direction.LEFT)
        if pressed[pygame.K_RIGHT]:
            self.vel_x = self.max_vel
            self.set_direction(Direction.RIGHT)

        if self.vel_x or self.vel_y:
            self.set_state(State.RUN)
        elif self._state is not State.ATTACK:
            self.set_state(State.IDLE)

        if pressed[pygame.K_q]:
            self.set_state(State.ATTACK)

        animation = self.animations.get((self._state, self._direction))
        if animation is None:
            logger.warning(
                "Missing animation for state=%s, dir=%s", self._state, self._direction
            )
            return

        # Tick counts are unsigned 32-bit: an earlier timestamp wraps around.
        elapsed = (current_time - self._last_frame_time) & _TICK_MASK
        if elapsed >= animation.frame_duration and animation.frames:
            self._frame_index = (self._frame_index + 1) % len(animation.frames)
            self._last_frame_time = current_time

    def render(self, surface: pygame.Surface, textures: TextureManager) -> bool:
        """Draw the current animation frame at the box position; return whether drawn."""
        key = (self._state, self._direction)
        animation = self.animations.get(key)
        if animation is None or not animation.frames:
            logger.warning(
                "Missing or empty animation for state=%s, dir=%s",
                self._state,
                self._direction,
            )
            return False

        if self._frame_index >= len(animation.frames):
            logger.warning(
                "Frame index out of bounds: %d (size=%d). Resetting.",
                self._frame_index,
                len(animation.frames),
            )
            self._frame_index = 0

        source = animation.frames[self._frame_index]
        try:
            texture = textures.get_texture(key)
        except MissingTextureError:
            logger.warning(
                "Texture not found for state=%s, dir=%s", self._state, self._direction
            )
            return False

        region = source.clip(texture.get_rect())
        if region.w == 0 or region.h == 0:
            return False
        image = pygame.transform.scale(
            texture.subsurface(region), (source.w * SCALE, source.h * SCALE)
        )
        surface.blit(image, self.box.topleft)
        return True

    def set_state(self, new_state: State) -> None:
        """Switch state, restarting the animation if it changed."""
        if self._state is not new_state:
            self._state = new_state
            self._frame_index = 0
            self._last_frame_time = self._clock()

    def set_direction(self, new_direction: Direction) -> None:
        """Switch facing, restarting the animation if it changed."""
        if self._direction is not new_direction:
            self._direction = new_direction
            self._frame_index = 0
            self._last_frame_time = self._clock()


class Enemy(Character):
    """A non-player character."""