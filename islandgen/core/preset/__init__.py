from .loader import load_preset, deep_merge
from .model import WorldPreset
from .defaults import DEFAULT_WORLD_PRESET

__all__ = ["load_preset", "deep_merge", "WorldPreset", "DEFAULT_WORLD_PRESET"]
