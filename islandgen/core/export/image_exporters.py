# ==============================================================================
# Файл: islandgen/core/export/image_exporters.py
# Назначение: Превью мира в PNG (отладка, не формат сохранения).
# ==============================================================================
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import numpy as np
from PIL import Image

from ..constants import DEFAULT_PALETTE

log = logging.getLogger(__name__)


def _hex_to_rgb(s: str) -> Tuple[int, int, int]:
    s = s.lstrip("#")
    return int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16)


def _palette_key(kind: str, tile) -> str:
    if kind == "ocean":
        return "ocean"
    return f"{kind}_{tile.role.value}"


def render_world_rgb(world, palette: Optional[Dict[str, str]] = None) -> np.ndarray:
    """(H, W, 3) uint8: цвет верхнего непустого тайла в каждой клетке."""
    pal = dict(DEFAULT_PALETTE)
    if palette:
        pal.update(palette)
    void = _hex_to_rgb(pal["void"])

    rgb = np.empty((world.height, world.width, 3), dtype=np.uint8)
    rgb[:, :] = void
    for layer in world.layers:
        kind = layer.kind.value
        for (y, x), tile in np.ndenumerate(layer.tiles):
            if tile is None:
                continue
            key = _palette_key(kind, tile)
            if key not in pal:
                log.warning("[Preview] palette has no color for %r", key)
                continue
            rgb[y, x] = _hex_to_rgb(pal[key])
    return rgb


def write_world_preview(
        path: Union[str, Path],
        world,
        palette: Optional[Dict[str, str]] = None,
        scale: int = 1,
) -> Path:
    """Рисует превью мира и сохраняет его в PNG. scale - пикселей на клетку."""
    if scale < 1:
        raise ValueError("scale must be >= 1")
    rgb = render_world_rgb(world, palette)
    if scale > 1:
        rgb = np.repeat(np.repeat(rgb, scale, axis=0), scale, axis=1)

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(rgb).save(out)
    log.info("[Preview] saved %s (%dx%d px)", out, rgb.shape[1], rgb.shape[0])
    return out
