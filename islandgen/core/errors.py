# ========================
# file: islandgen/core/errors.py
# ========================
class WorldGenError(Exception):
    """Base error for world generation."""


class ConfigurationError(WorldGenError):
    """Raised when dimensions, a preset or a tile catalog are invalid."""


class PresetNotFoundError(ConfigurationError):
    """Raised when a preset path cannot be resolved."""
