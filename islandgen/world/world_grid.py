# ==============================================================================
# Файл: islandgen/world/world_grid.py
# Назначение: Стек слоёв мира (океан внизу) и запросы к нему:
#             тайл по координатам, проходимость, видимый диапазон клеток.
# ==============================================================================
from __future__ import annotations
import logging
import math
from typing import List, Optional, Sequence, Tuple, Union

from ..algorithms.terrain.neighbors import occupancy
from ..core.constants import TILE_SIZE, LayerKind
from ..core.errors import ConfigurationError
from ..core.preset.model import WorldPreset
from ..core.rng import RNG, stage_seeds
from ..core.tiles import TileId, catalog_for
from ..core.types import Viewport, WorldPoint
from .layers import OceanLayer, TerrainLayer, layer_metrics

log = logging.getLogger(__name__)

Layer = Union[OceanLayer, TerrainLayer]
PointLike = Union[WorldPoint, Tuple[float, float]]


def _as_xy(p: PointLike) -> Tuple[float, float]:
    if isinstance(p, WorldPoint):
        return p.x, p.y
    x, y = p
    return float(x), float(y)


class WorldGrid:
    """
    Упорядоченный стек слоёв одного размера. Слой 0 - океан, всегда заполнен.
    Только чтение: после построения ничего не меняется.
    """

    def __init__(self, layers: Sequence[Layer], tile_size: float = TILE_SIZE):
        if not layers:
            raise ConfigurationError("WorldGrid needs at least the base ocean layer")
        if tile_size <= 0:
            raise ConfigurationError(f"tile_size must be > 0, got {tile_size}")

        base = layers[0]
        if base.kind is not LayerKind.OCEAN or not occupancy(base.tiles).all():
            raise ConfigurationError("Layer 0 must be a fully occupied ocean layer")

        shape = base.tiles.shape
        for i, layer in enumerate(layers):
            if layer.tiles.shape != shape:
                raise ConfigurationError(
                    f"Layer {i} is {layer.width}x{layer.height}, "
                    f"expected {shape[1]}x{shape[0]}"
                )
            if float(layer.tile_size) != float(tile_size):
                raise ConfigurationError(
                    f"Layer {i} has tile_size {layer.tile_size}, world uses {tile_size}"
                )

        self._layers: Tuple[Layer, ...] = tuple(layers)
        self._tile_size = float(tile_size)

    # --- Свойства ---

    @property
    def width(self) -> int:
        return self._layers[0].width

    @property
    def height(self) -> int:
        return self._layers[0].height

    @property
    def tile_size(self) -> float:
        return self._tile_size

    @property
    def layer_count(self) -> int:
        return len(self._layers)

    @property
    def layers(self) -> Tuple[Layer, ...]:
        return self._layers

    @property
    def spawn_point(self) -> WorldPoint:
        """Центр верхнего сгенерированного слоя; без них - центр карты."""
        for layer in reversed(self._layers[1:]):
            if isinstance(layer, TerrainLayer):
                return layer.centroid
        return WorldPoint(self.width * self._tile_size / 2.0, self.height * self._tile_size / 2.0)

    # --- Запросы ---

    def layer(self, index: int) -> Layer:
        if not 0 <= index < len(self._layers):
            raise IndexError(f"Layer index {index} out of range 0..{len(self._layers) - 1}")
        return self._layers[index]

    def tile_at(self, layer_index: int, x: int, y: int) -> Optional[TileId]:
        """None для координат вне сетки - это не ошибка."""
        return self.layer(layer_index).tile_at(x, y)

    def world_to_tile(self, x: float, y: float) -> Tuple[int, int]:
        return math.floor(x / self._tile_size), math.floor(y / self._tile_size)

    def is_blocked(self, position: PointLike, size: PointLike) -> bool:
        """
        Коробка [position, position + size] в мировых координатах.
        Заблокировано, если хоть одна клетка вне сетки или пуста
        в любом слое выше океана.
        """
        px, py = _as_xy(position)
        sw, sh = _as_xy(size)
        min_x, min_y = self.world_to_tile(min(px, px + sw), min(py, py + sh))
        max_x, max_y = self.world_to_tile(max(px, px + sw), max(py, py + sh))

        if min_x < 0 or min_y < 0 or max_x >= self.width or max_y >= self.height:
            return True

        for layer in self._layers[1:]:
            window = layer.tiles[min_y:max_y + 1, min_x:max_x + 1]
            if not occupancy(window).all():
                return True
        return False

    def visible_tile_range(self, viewport: Viewport) -> Tuple[range, range]:
        """Диапазоны клеток (x, y), попадающих в камеру, зажатые в [0, width] x [0, height]."""
        left, top, right, bottom = viewport.world_rect()

        def _clamp(lo: float, hi: float, limit: int) -> range:
            start = min(max(math.floor(lo / self._tile_size), 0), limit)
            end = min(max(math.ceil(hi / self._tile_size), 0), limit)
            return range(start, max(start, end))

        return _clamp(left, right, self.width), _clamp(top, bottom, self.height)


def build_world(preset: WorldPreset) -> WorldGrid:
    """Океан + по слою на каждый вид из preset.layers, у каждого слоя свой RNG."""
    width, height, ts = preset.width, preset.height, preset.tile_size
    seeds = stage_seeds(preset.seed, len(preset.layers) + 1)

    layers: List[Layer] = [OceanLayer.generate(width, height, catalog_for(LayerKind.OCEAN), ts)]
    for name, seed in zip(preset.layers, seeds[1:]):
        layer = TerrainLayer.generate(
            width, height, RNG(seed), catalog_for(LayerKind(name)),
            config=preset.blob, tile_size=ts, below=layers[-1],
        )
        layers.append(layer)

    world = WorldGrid(layers, ts)
    log.info(
        "World built: %dx%d seed=%d layers=%s",
        width, height, preset.seed, [layer.kind.value for layer in layers],
    )
    for i, layer in enumerate(layers[1:], start=1):
        m = layer_metrics(layer)
        log.info(
            "  -> layer %d (%s): land=%.1f%% edges=%.1f%% corners=%.1f%% unmatched=%d",
            i, layer.kind.value,
            m["center_pct"] * 100, m["edge_pct"] * 100, m["corner_pct"] * 100,
            len(layer.report.unmatched),
        )
    return world
