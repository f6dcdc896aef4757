import pygame
import pytest

from nichelite.constants import (
    SCALE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TILE_GRASS,
    TILE_HEIGHT,
    TILE_WALL,
    TILE_WIDTH,
)
from nichelite.textures import MissingTextureError, TextureManager
from nichelite.tile import Tile

TINT = (50, 50, 50)
BLACK = (0, 0, 0)


def _textures(tmp_path, key, image):
    path = tmp_path / "sheet.bmp"
    pygame.image.save(image, str(path))
    manager = TextureManager()
    manager.load_texture(key, str(path))
    return manager


def _white_sheet(tmp_path):
    image = pygame.Surface((TILE_WIDTH * 2, TILE_HEIGHT * 2))
    image.fill((255, 255, 255))
    return _textures(tmp_path, "TILES", image)


def _screen_camera():
    return pygame.Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)


def _rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_box_matches_position_and_tile_size():
    tile = Tile(64, 96, TILE_WALL, None)
    assert tile.box == pygame.Rect(64, 96, TILE_WIDTH, TILE_HEIGHT)
    assert tile.tile_type == TILE_WALL
    assert tile.clip is None


def test_render_draws_scaled_tinted_tile(tmp_path):
    textures = _white_sheet(tmp_path)
    target = pygame.Surface((200, 200))
    tile = Tile(0, 0, TILE_GRASS, pygame.Rect(0, 0, TILE_WIDTH, TILE_HEIGHT))

    assert tile.render(target, _screen_camera(), textures) is True
    edge = TILE_WIDTH * SCALE
    assert _rgb(target, (0, 0)) == TINT
    assert _rgb(target, (edge - 1, edge - 1)) == TINT
    assert _rgb(target, (edge, 0)) == BLACK
    assert _rgb(target, (0, edge)) == BLACK


def test_render_skips_tile_outside_camera(tmp_path):
    textures = _white_sheet(tmp_path)
    target = pygame.Surface((200, 200))
    tile = Tile(SCREEN_WIDTH, 0, TILE_GRASS, None)

    assert tile.render(target, _screen_camera(), textures) is False
    assert _rgb(target, (0, 0)) == BLACK


def test_render_offsets_by_camera(tmp_path):
    textures = _white_sheet(tmp_path)
    target = pygame.Surface((200, 200))
    tile = Tile(TILE_WIDTH * 2, TILE_HEIGHT, TILE_GRASS, None)
    camera = pygame.Rect(TILE_WIDTH, 0, SCREEN_WIDTH, SCREEN_HEIGHT)

    assert tile.render(target, camera, textures) is True
    assert _rgb(target, (TILE_WIDTH, TILE_HEIGHT)) == TINT
    assert _rgb(target, (TILE_WIDTH - 1, TILE_HEIGHT - 1)) == BLACK


def test_clip_selects_region_of_sheet(tmp_path):
    sheet = pygame.Surface((TILE_WIDTH, TILE_HEIGHT * 2))
    sheet.fill((255, 0, 0), pygame.Rect(0, 0, TILE_WIDTH, TILE_HEIGHT))
    sheet.fill((0, 0, 255), pygame.Rect(0, TILE_HEIGHT, TILE_WIDTH, TILE_HEIGHT))
    textures = _textures(tmp_path, "TILES", sheet)
    target = pygame.Surface((200, 200))

    lower = Tile(0, 0, TILE_WALL, pygame.Rect(0, TILE_HEIGHT, TILE_WIDTH, TILE_HEIGHT))
    lower.render(target, _screen_camera(), textures)
    assert _rgb(target, (1, 1)) == (0, 0, TINT[2])

    upper = Tile(0, 0, TILE_GRASS, None)
    upper.render(target, _screen_camera(), textures)
    assert _rgb(target, (1, 1)) == (TINT[0], 0, 0)


def test_render_without_tile_texture_raises():
    tile = Tile(0, 0, TILE_GRASS, None)
    with pytest.raises(MissingTextureError):
        tile.render(pygame.Surface((10, 10)), _screen_camera(), TextureManager())