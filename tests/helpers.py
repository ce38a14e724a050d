# ==============================================================================
# Файл: tests/helpers.py
# Назначение: Общие утилиты для тестов (ручные сетки суши).
# ==============================================================================
from typing import Iterable, Tuple

import numpy as np

from islandgen.core.tiles import ISLAND


def land_grid(width: int, height: int, cells: Iterable[Tuple[int, int]]) -> np.ndarray:
    """Сетка (height, width), где перечисленные (x, y) - суша."""
    tiles = np.full((height, width), None, dtype=object)
    for x, y in cells:
        tiles[y, x] = ISLAND.centers[0]
    return tiles


def block(x0: int, y0: int, w: int, h: int):
    return [(x, y) for y in range(y0, y0 + h) for x in range(x0, x0 + w)]


def cells_where(tiles: np.ndarray, predicate):
    return {(int(x), int(y)) for (y, x), t in np.ndenumerate(tiles) if t is not None and predicate(t)}
