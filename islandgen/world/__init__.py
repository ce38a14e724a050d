from .layers import OceanLayer, TerrainLayer, layer_metrics
from .world_grid import WorldGrid, build_world

__all__ = ["OceanLayer", "TerrainLayer", "layer_metrics", "WorldGrid", "build_world"]
