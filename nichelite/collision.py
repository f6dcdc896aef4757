"""Axis-aligned rectangle collision helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from nichelite.constants import TILE_WALL


def check_collision(a: Any, b: Any) -> bool:
    """Return True if rectangles ``a`` and ``b`` overlap.

    Rectangles are any objects with ``x``, ``y``, ``w`` and ``h`` attributes.
    Rectangles that only share an edge do not collide.
    """
    if a.y + a.h <= b.y:
        return False
    if a.y >= b.y + b.h:
        return False
    if a.x + a.w <= b.x:
        return False
    if a.x >= b.x + b.w:
        return False
    return True


def touches_wall(box: Any, tiles: Iterable[Any]) -> bool:
    """Return True if ``box`` overlaps any wall tile in ``tiles``.

    Each tile must expose ``tile_type`` and ``box``; ``None`` entries are skipped.
    """
    return any(
        tile is not None
        and tile.tile_type == TILE_WALL
        and check_collision(box, tile.box)
        for tile in tiles
    )