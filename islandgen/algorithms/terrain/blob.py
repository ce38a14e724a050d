# ==============================================================================
# Файл: islandgen/algorithms/terrain/blob.py
# Назначение: Рост связного "пятна" суши случайным блужданием внутри эллипса.
# ==============================================================================
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ...core.constants import (
    DEFAULT_CONTAINMENT_TOLERANCE,
    DEFAULT_REGION_MAX_FRACTION,
    DEFAULT_REGION_MIN_FRACTION,
    TILE_SIZE,
)
from ...core.errors import ConfigurationError
from ...core.rng import RNG
from ...core.tiles import TileCatalog
from ...core.types import Region, WorldPoint
from .neighbors import new_tile_grid

log = logging.getLogger(__name__)

# (dx, dy): вверх, вниз, влево, вправо
_STEPS: Tuple[Tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass(frozen=True)
class BlobConfig:
    region_min_fraction: float = DEFAULT_REGION_MIN_FRACTION
    region_max_fraction: float = DEFAULT_REGION_MAX_FRACTION
    containment_tolerance: float = DEFAULT_CONTAINMENT_TOLERANCE

    def __post_init__(self) -> None:
        lo, hi = self.region_min_fraction, self.region_max_fraction
        if not (0.0 < lo <= 1.0 and 0.0 < hi <= 1.0):
            raise ConfigurationError("region fractions must be in (0, 1]")
        if lo > hi:
            raise ConfigurationError("region_min_fraction must be <= region_max_fraction")
        if self.containment_tolerance < 1.0:
            raise ConfigurationError("containment_tolerance must be >= 1")


@dataclass
class BlobResult:
    tiles: np.ndarray
    centroid: WorldPoint
    seed_cell: Tuple[int, int]
    region: Region
    step_budget: int
    accepted: int

    @property
    def land_count(self) -> int:
        return self.accepted + 1


def validate_dimensions(width: int, height: int) -> None:
    if int(width) != width or int(height) != height:
        raise ConfigurationError(f"Grid dimensions must be integers, got {width}x{height}")
    if width <= 0 or height <= 0:
        raise ConfigurationError(f"Grid dimensions must be positive, got {width}x{height}")


def ellipse_distance(region: Region, x: int, y: int) -> float:
    """Квадрат нормированного расстояния от центра области (полуоси = половина размеров)."""
    cx, cy = region.center
    a = region.width / 2.0
    b = region.height / 2.0
    return ((x - cx) / a) ** 2 + ((y - cy) / b) ** 2


def pick_region(width: int, height: int, rng: RNG, config: BlobConfig) -> Region:
    """Случайная под-область размером [min_fraction, max_fraction] сетки по каждой оси."""

    def _span(total: int) -> int:
        lo = max(1, math.ceil(total * config.region_min_fraction))
        hi = max(lo, min(total, math.floor(total * config.region_max_fraction)))
        return rng.randint(lo, hi)

    rw = _span(width)
    rh = _span(height)
    x0 = rng.randint(0, width - rw)
    y0 = rng.randint(0, height - rh)
    return Region(x0, y0, rw, rh)


def grow_in_region(
        width: int,
        height: int,
        region: Region,
        rng: RNG,
        catalog: TileCatalog,
        tolerance: float = DEFAULT_CONTAINMENT_TOLERANCE,
        step_budget: Optional[int] = None,
        tile_size: float = TILE_SIZE,
) -> BlobResult:
    """
    Растит пятно из центра region. Каждый шаг: случайная клетка суши,
    случайное направление, сосед зажимается в границы сетки.
    Сосед отклоняется, если он уже суша или лежит за эллипсом.
    """
    validate_dimensions(width, height)
    if step_budget is None:
        step_budget = rng.randint(region.area // 2, region.area)

    tiles = new_tile_grid(width, height)
    sx, sy = region.center
    sx = min(max(sx, 0), width - 1)
    sy = min(max(sy, 0), height - 1)
    tiles[sy, sx] = rng.choose(catalog.centers)
    centroid = WorldPoint((sx + 0.5) * tile_size, (sy + 0.5) * tile_size)

    frontier: List[Tuple[int, int]] = [(sx, sy)]
    accepted = 0
    for _ in range(step_budget):
        x, y = rng.choose(frontier)
        dx, dy = rng.choose(_STEPS)
        nx = min(max(x + dx, 0), width - 1)
        ny = min(max(y + dy, 0), height - 1)

        if tiles[ny, nx] is not None:
            continue
        if ellipse_distance(region, nx, ny) > tolerance:
            continue

        tiles[ny, nx] = rng.choose(catalog.centers)
        frontier.append((nx, ny))
        accepted += 1

    log.debug(
        "[Blob] %s: region=%s seed=(%d,%d) steps=%d accepted=%d",
        catalog.kind.value, region, sx, sy, step_budget, accepted,
    )
    return BlobResult(
        tiles=tiles,
        centroid=centroid,
        seed_cell=(sx, sy),
        region=region,
        step_budget=step_budget,
        accepted=accepted,
    )


def grow(
        width: int,
        height: int,
        rng: RNG,
        catalog: TileCatalog,
        config: Optional[BlobConfig] = None,
        tile_size: float = TILE_SIZE,
) -> BlobResult:
    """Выбирает под-область и растит в ней пятно."""
    validate_dimensions(width, height)
    config = config or BlobConfig()
    region = pick_region(width, height, rng, config)
    return grow_in_region(
        width, height, region, rng, catalog,
        tolerance=config.containment_tolerance,
        tile_size=tile_size,
    )
