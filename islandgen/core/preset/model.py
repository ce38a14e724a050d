from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ...algorithms.terrain.blob import BlobConfig
from ..constants import DEFAULT_LAYER_ORDER, TILE_SIZE


@dataclass(frozen=True)
class WorldPreset:
    width: int
    height: int
    seed: int
    tile_size: float = TILE_SIZE
    # виды слоёв над океаном, снизу вверх
    layers: Tuple[str, ...] = DEFAULT_LAYER_ORDER
    blob: BlobConfig = field(default_factory=BlobConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "seed": self.seed,
            "tile_size": self.tile_size,
            "layers": list(self.layers),
            "blob": {
                "region_min_fraction": self.blob.region_min_fraction,
                "region_max_fraction": self.blob.region_max_fraction,
                "containment_tolerance": self.blob.containment_tolerance,
            },
        }
