# ========================
# file: islandgen/core/preset/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from .. import constants as const

DEFAULT_WORLD_PRESET: Dict[str, Any] = {
    "width": const.DEFAULT_MAP_WIDTH,
    "height": const.DEFAULT_MAP_HEIGHT,
    "seed": const.DEFAULT_SEED,
    "tile_size": const.TILE_SIZE,
    "layers": list(const.DEFAULT_LAYER_ORDER),
    "blob": {
        "region_min_fraction": const.DEFAULT_REGION_MIN_FRACTION,
        "region_max_fraction": const.DEFAULT_REGION_MAX_FRACTION,
        "containment_tolerance": const.DEFAULT_CONTAINMENT_TOLERANCE,
    },
}
