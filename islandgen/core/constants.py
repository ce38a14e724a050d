# ==============================================================================
# Файл: islandgen/core/constants.py
# Назначение: Глобальные константы (размер тайла, атлас, виды слоёв, палитра).
# ==============================================================================
from __future__ import annotations
from enum import Enum
from typing import Dict

# --- Геометрия ---
TILE_SIZE: float = 16.0          # мировых единиц на одну клетку
ATLAS_COLUMNS: int = 64          # тайлсет 64 колонки, индексы с 1 (как в Tiled)
OCEAN_PATTERN_SIZE: int = 4      # океан = повторяющийся узор 4x4

# --- Размер мира по умолчанию ---
DEFAULT_MAP_WIDTH: int = 64
DEFAULT_MAP_HEIGHT: int = 64
DEFAULT_SEED: int = 1

# --- Random walk ---
DEFAULT_REGION_MIN_FRACTION: float = 1.0 / 3.0
DEFAULT_REGION_MAX_FRACTION: float = 1.0 / 2.0
DEFAULT_CONTAINMENT_TOLERANCE: float = 1.0


class LayerKind(str, Enum):
    OCEAN = "ocean"
    ISLAND = "island"
    GRASS = "grass"


# Слои, которые растит генератор (океан не генерируется)
TERRAIN_KINDS = (LayerKind.ISLAND, LayerKind.GRASS)

DEFAULT_LAYER_ORDER = (LayerKind.ISLAND.value, LayerKind.GRASS.value)

# Палитра превью: вид слоя -> роль тайла -> цвет
DEFAULT_PALETTE: Dict[str, str] = {
    "ocean": "#3A6FD8",
    "island_center": "#D8C27A",
    "island_edge": "#C4A55A",
    "island_corner": "#B08F48",
    "grass_center": "#5FAF3A",
    "grass_edge": "#3F7F26",
    "grass_corner": "#346B1F",
    "void": "#0F0F19",
}
