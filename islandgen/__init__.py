from .core.errors import ConfigurationError, PresetNotFoundError, WorldGenError
from .core.preset import WorldPreset, load_preset
from .core.tiles import Direction, TileCatalog, TileId, TileRole, atlas_rect, catalog_for
from .core.types import Viewport, WorldPoint
from .world import OceanLayer, TerrainLayer, WorldGrid, build_world

__all__ = [
    "ConfigurationError",
    "PresetNotFoundError",
    "WorldGenError",
    "WorldPreset",
    "load_preset",
    "Direction",
    "TileCatalog",
    "TileId",
    "TileRole",
    "atlas_rect",
    "catalog_for",
    "Viewport",
    "WorldPoint",
    "OceanLayer",
    "TerrainLayer",
    "WorldGrid",
    "build_world",
]
