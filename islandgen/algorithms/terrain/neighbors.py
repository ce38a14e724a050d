# islandgen/algorithms/terrain/neighbors.py
from __future__ import annotations
from typing import Callable, Optional, Tuple

import numpy as np

from ...core.tiles import Direction, TileId

# Биты 4-маски соседей: top, bottom, left, right
TOP, BOTTOM, LEFT, RIGHT = 8, 4, 2, 1

_is_filled = np.frompyfunc(lambda t: t is not None, 1, 1)


def new_tile_grid(width: int, height: int) -> np.ndarray:
    """Пустая сетка тайлов (height, width) из None."""
    return np.full((height, width), None, dtype=object)


def occupancy(tiles: np.ndarray) -> np.ndarray:
    """Булева маска занятых клеток."""
    if tiles.size == 0:
        return np.zeros(tiles.shape, dtype=bool)
    return _is_filled(tiles).astype(bool)


def role_mask(tiles: np.ndarray, predicate: Callable[[TileId], bool]) -> np.ndarray:
    """Булева маска клеток, чей тайл удовлетворяет predicate (None -> False)."""
    if tiles.size == 0:
        return np.zeros(tiles.shape, dtype=bool)
    fn = np.frompyfunc(lambda t: t is not None and bool(predicate(t)), 1, 1)
    return fn(tiles).astype(bool)


def edge_mask(tiles: np.ndarray, direction: Direction) -> np.ndarray:
    return role_mask(tiles, lambda t: t.is_edge(direction))


def cardinal_views(mask: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Для каждой клетки - значение соседа сверху / снизу / слева / справа.
    За пределами сетки сосед считается пустым (False).
    """
    p = np.pad(mask, 1, mode="constant", constant_values=False)
    top = p[:-2, 1:-1]
    bottom = p[2:, 1:-1]
    left = p[1:-1, :-2]
    right = p[1:-1, 2:]
    return top, bottom, left, right


def cardinal_codes(
        top: np.ndarray,
        bottom: np.ndarray,
        left: np.ndarray,
        right: np.ndarray,
) -> np.ndarray:
    """Упаковывает четыре булевых соседа в код 0..15 (top<<3 | bottom<<2 | left<<1 | right)."""
    return (
        top.astype(np.uint8) * TOP
        + bottom.astype(np.uint8) * BOTTOM
        + left.astype(np.uint8) * LEFT
        + right.astype(np.uint8) * RIGHT
    )


def neighbor_count(mask: np.ndarray) -> np.ndarray:
    top, bottom, left, right = cardinal_views(mask)
    return (
        top.astype(np.uint8) + bottom.astype(np.uint8)
        + left.astype(np.uint8) + right.astype(np.uint8)
    )


def mask_code(top: bool, bottom: bool, left: bool, right: bool) -> int:
    return (TOP if top else 0) | (BOTTOM if bottom else 0) | (LEFT if left else 0) | (RIGHT if right else 0)


def describe_mask(code: int) -> str:
    """'TBLR' с заглавной буквой для занятого соседа: 8 -> 'Tblr'."""
    return "".join(
        ch.upper() if code & bit else ch
        for ch, bit in (("t", TOP), ("b", BOTTOM), ("l", LEFT), ("r", RIGHT))
    )


def in_bounds(tiles: np.ndarray, x: int, y: int) -> bool:
    h, w = tiles.shape
    return 0 <= x < w and 0 <= y < h


def tile_or_none(tiles: np.ndarray, x: int, y: int) -> Optional[TileId]:
    if not in_bounds(tiles, x, y):
        return None
    return tiles[y, x]
