# ========================
# file: islandgen/core/preset/loader.py
# ========================
from __future__ import annotations
import copy
import json
import logging
import os
from typing import Any, Dict, Mapping, Union

from ...algorithms.terrain.blob import BlobConfig
from ..errors import ConfigurationError, PresetNotFoundError
from ..rng import seed_from_any
from .defaults import DEFAULT_WORLD_PRESET
from .model import WorldPreset
from .validators import validate_dict

log = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    if not os.path.isfile(path):
        raise PresetNotFoundError(f"Preset file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Preset {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Preset {path} must contain a JSON object")
    return data


def load_preset(
    source: Union[str, os.PathLike, Dict[str, Any], None] = None,
    overrides: Mapping[str, Any] | None = None,
) -> WorldPreset:
    """Load a world preset from a JSON path or dict, merge over defaults and apply overrides.

    Args:
        source: path to a JSON file, a raw dict, or None for pure defaults
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        WorldPreset (immutable dataclass) ready for use
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, (str, os.PathLike)):
        data = _load_json_file(os.fspath(source))
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be a path, a dict or None")

    merged = deep_merge(DEFAULT_WORLD_PRESET, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    validate_dict(merged)

    blob = merged["blob"]
    preset = WorldPreset(
        width=int(merged["width"]),
        height=int(merged["height"]),
        seed=seed_from_any(merged["seed"]),
        tile_size=float(merged["tile_size"]),
        layers=tuple(merged["layers"]),
        blob=BlobConfig(
            region_min_fraction=float(blob["region_min_fraction"]),
            region_max_fraction=float(blob["region_max_fraction"]),
            containment_tolerance=float(blob["containment_tolerance"]),
        ),
    )
    log.debug("Loaded preset: %s", preset.to_dict())
    return preset
