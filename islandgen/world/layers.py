# ==============================================================================
# Файл: islandgen/world/layers.py
# Назначение: Слои мира. TerrainLayer = рост пятна + заливка дыр + автотайлинг.
#             OceanLayer = сплошной фон узором 4x4.
# ==============================================================================
from __future__ import annotations
import logging
from typing import Dict, Optional, Tuple

import numpy as np

from ..algorithms.terrain.autotile import AutotileReport, autotile
from ..algorithms.terrain.blob import BlobConfig, grow, validate_dimensions
from ..algorithms.terrain.gaps import close_gaps
from ..algorithms.terrain.neighbors import occupancy, role_mask, tile_or_none
from ..core.constants import OCEAN_PATTERN_SIZE, TILE_SIZE, LayerKind
from ..core.errors import ConfigurationError
from ..core.rng import RNG
from ..core.tiles import OCEAN, TileCatalog, TileId, TileRole
from ..core.types import WorldPoint

log = logging.getLogger(__name__)


def _freeze(tiles: np.ndarray) -> np.ndarray:
    """Копия сетки только для чтения; массив вызывающего не трогаем."""
    frozen = np.array(tiles, dtype=object, copy=True)
    frozen.flags.writeable = False
    return frozen


class _BaseLayer:
    kind: LayerKind
    tiles: np.ndarray
    tile_size: float

    @property
    def width(self) -> int:
        return self.tiles.shape[1]

    @property
    def height(self) -> int:
        return self.tiles.shape[0]

    def tile_at(self, x: int, y: int) -> Optional[TileId]:
        return tile_or_none(self.tiles, x, y)

    def bounds(self) -> Tuple[WorldPoint, WorldPoint]:
        return (
            WorldPoint(0.0, 0.0),
            WorldPoint(self.width * self.tile_size, self.height * self.tile_size),
        )


class OceanLayer(_BaseLayer):
    """Фон: всегда заполнен, тайл (x, y) = pattern[y % 4][x % 4]."""

    kind = LayerKind.OCEAN

    def __init__(self, tiles: np.ndarray, tile_size: float = TILE_SIZE):
        self.tiles = _freeze(tiles)
        self.tile_size = tile_size

    @classmethod
    def generate(
            cls,
            width: int,
            height: int,
            catalog: TileCatalog = OCEAN,
            tile_size: float = TILE_SIZE,
    ) -> "OceanLayer":
        validate_dimensions(width, height)
        if catalog.kind is not LayerKind.OCEAN:
            raise ConfigurationError(f"OceanLayer needs an ocean catalog, got {catalog.kind.value}")

        n = OCEAN_PATTERN_SIZE
        pattern = np.empty((n, n), dtype=object)
        for i, tile in enumerate(catalog.centers):
            pattern[i // n, i % n] = tile

        ys, xs = np.indices((height, width))
        tiles = pattern[ys % n, xs % n]
        return cls(tiles, tile_size)


class TerrainLayer(_BaseLayer):
    """
    Сгенерированный слой суши. После создания не меняется:
    новая генерация = новый экземпляр.
    """

    def __init__(
            self,
            kind: LayerKind,
            tiles: np.ndarray,
            centroid: WorldPoint,
            tile_size: float = TILE_SIZE,
            altitude: int = 0,
            report: Optional[AutotileReport] = None,
    ):
        self.kind = LayerKind(kind)
        self.tiles = _freeze(tiles)
        self.centroid = centroid
        self.tile_size = tile_size
        self.altitude = altitude
        self.report = report or AutotileReport()

    @classmethod
    def generate(
            cls,
            width: int,
            height: int,
            rng: RNG,
            catalog: TileCatalog,
            config: Optional[BlobConfig] = None,
            tile_size: float = TILE_SIZE,
            below: Optional[_BaseLayer] = None,
    ) -> "TerrainLayer":
        """Рост пятна -> заливка дыр -> края и углы."""
        validate_dimensions(width, height)
        if catalog.kind is LayerKind.OCEAN:
            raise ConfigurationError("TerrainLayer cannot be generated from the ocean catalog")

        blob = grow(width, height, rng, catalog, config, tile_size=tile_size)
        tiles = blob.tiles
        close_gaps(tiles, rng, catalog)
        report = autotile(tiles, catalog)

        altitude = 0
        if catalog.kind is LayerKind.GRASS and isinstance(below, TerrainLayer) \
                and below.kind is LayerKind.GRASS:
            altitude = below.altitude + 1

        log.debug(
            "[Layer] %s %dx%d: centroid=%s altitude=%d",
            catalog.kind.value, width, height, blob.centroid.as_tuple(), altitude,
        )
        return cls(catalog.kind, tiles, blob.centroid, tile_size, altitude, report)


def layer_metrics(layer: _BaseLayer) -> Dict[str, float]:
    """Доли клеток по ролям тайлов."""
    total = layer.width * layer.height
    if total == 0:
        return {"center_pct": 0.0, "edge_pct": 0.0, "corner_pct": 0.0, "empty_pct": 0.0}

    tiles = layer.tiles
    empty = int((~occupancy(tiles)).sum())
    counts = {
        role: int(role_mask(tiles, lambda t, r=role: t.role is r).sum())
        for role in TileRole
    }
    return {
        "center_pct": counts[TileRole.CENTER] / total,
        "edge_pct": counts[TileRole.EDGE] / total,
        "corner_pct": counts[TileRole.CORNER] / total,
        "empty_pct": empty / total,
    }

