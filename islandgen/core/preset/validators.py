# ========================
# file: islandgen/core/preset/validators.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from ..constants import TERRAIN_KINDS, LayerKind
from ..errors import ConfigurationError


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigurationError(msg)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Checks a merged world preset dict.

    Raises ConfigurationError on the first failing check.
    """
    for key in ("width", "height"):
        _require(_is_int(cfg.get(key)), f"{key} must be an integer")
        _require(cfg[key] > 0, f"{key} must be > 0")

    _require(
        _is_int(cfg.get("seed")) or isinstance(cfg.get("seed"), (str, bytes)),
        "seed must be an int or a string",
    )
    _require(_is_number(cfg.get("tile_size")), "tile_size must be a number")
    _require(float(cfg["tile_size"]) > 0.0, "tile_size must be > 0")

    layers = cfg.get("layers")
    _require(isinstance(layers, (list, tuple)), "layers must be a list of layer kinds")
    allowed = {k.value for k in TERRAIN_KINDS}
    for i, name in enumerate(layers):
        _require(isinstance(name, str), f"layers[{i}] must be a string, got {type(name).__name__}")
        _require(
            name != LayerKind.OCEAN.value,
            f"layers[{i}]: ocean is always the base layer and cannot be stacked",
        )
        _require(name in allowed, f"layers[{i}]: unknown layer kind {name!r}")

    blob = cfg.get("blob")
    _require(isinstance(blob, dict), "blob must be a mapping")
    for key in ("region_min_fraction", "region_max_fraction", "containment_tolerance"):
        _require(_is_number(blob.get(key)), f"blob.{key} must be a number")
    for key in ("region_min_fraction", "region_max_fraction"):
        v = float(blob[key])
        _require(0.0 < v <= 1.0, f"blob.{key} must be in (0, 1]")
    _require(
        float(blob["region_min_fraction"]) <= float(blob["region_max_fraction"]),
        "blob.region_min_fraction must be <= blob.region_max_fraction",
    )
    _require(
        float(blob["containment_tolerance"]) >= 1.0,
        "blob.containment_tolerance must be >= 1",
    )
