import pygame

from nichelite.constants import (
    LEVEL_HEIGHT,
    LEVEL_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TILE_HEIGHT,
    TILE_WIDTH,
    State,
)
from nichelite.player import Player


def _camera():
    return pygame.Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)


def _player():
    return Player(lambda: 0)


def test_camera_at_origin_stays_at_origin():
    camera = _player().set_camera(_camera())
    assert camera.topleft == (0, 0)
    assert camera.size == (SCREEN_WIDTH, SCREEN_HEIGHT)


def test_camera_centres_on_player():
    player = _player()
    player.box.topleft = (1000, 600)
    camera = player.set_camera(_camera())
    assert camera.center == player.box.center


def test_camera_clamped_to_level_far_corner():
    player = _player()
    player.box.bottomright = (LEVEL_WIDTH * TILE_WIDTH, LEVEL_HEIGHT * TILE_HEIGHT)
    camera = player.set_camera(_camera())
    assert camera.right == LEVEL_WIDTH * TILE_WIDTH
    assert camera.bottom == LEVEL_HEIGHT * TILE_HEIGHT


def test_camera_is_updated_in_place():
    player = _player()
    player.box.topleft = (1000, 600)
    camera = _camera()
    returned = player.set_camera(camera)
    assert returned is camera
    assert camera.center == player.box.center


def test_handle_event_leaves_player_unchanged():
    player = _player()
    player.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    assert player.vel_x == 0
    assert player.vel_y == 0
    assert player.state is State.IDLE