# islandgen/algorithms/terrain/gaps.py
from __future__ import annotations
import logging

import numpy as np

from ...core.rng import RNG
from ...core.tiles import TileCatalog
from .neighbors import neighbor_count, occupancy

log = logging.getLogger(__name__)

# Пустая клетка заполняется, если заняты >= 3 из 4 соседей
MIN_FILLED_NEIGHBORS = 3


def find_gaps(tiles: np.ndarray) -> np.ndarray:
    """Маска пустых клеток с >= 3 занятыми соседями."""
    occ = occupancy(tiles)
    return ~occ & (neighbor_count(occ) >= MIN_FILLED_NEIGHBORS)


def close_gaps(tiles: np.ndarray, rng: RNG, catalog: TileCatalog) -> int:
    """
    Заливает дыры до неподвижной точки. Каждый проход читает только
    снимок занятости на начало прохода. Возвращает число залитых клеток.
    """
    filled = 0
    passes = 0
    while True:
        gaps = find_gaps(tiles)
        passes += 1
        if not gaps.any():
            break
        # argwhere идёт построчно - порядок вызовов rng детерминирован
        for y, x in np.argwhere(gaps):
            tiles[y, x] = rng.choose(catalog.centers)
        n = int(gaps.sum())
        filled += n
        log.debug("[Gaps] %s pass %d: filled %d cells", catalog.kind.value, passes, n)

    log.debug("[Gaps] %s: %d cells in %d passes", catalog.kind.value, filled, passes)
    return filled
