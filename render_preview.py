# ==============================================================================
# Файл: render_preview.py
# Назначение: Строит мир по пресету и сохраняет PNG-превью.
# Использование: python render_preview.py [preset.json] [out.png]
# ==============================================================================
from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import List, Optional

from islandgen.core.errors import ConfigurationError
from islandgen.core.export import write_world_preview
from islandgen.core.preset import load_preset
from islandgen.setup_logging import setup_logging
from islandgen.world import build_world

log = logging.getLogger("islandgen.render_preview")

DEFAULT_OUT = Path("artifacts") / "preview.png"


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    setup_logging(logging.INFO)

    preset_path = args[0] if len(args) > 0 else None
    out_path = Path(args[1]) if len(args) > 1 else DEFAULT_OUT

    try:
        preset = load_preset(preset_path)
    except ConfigurationError as e:
        log.error("Invalid preset: %s", e)
        return 2

    world = build_world(preset)
    spawn = world.spawn_point
    log.info("Spawn point: (%.1f, %.1f)", spawn.x, spawn.y)
    write_world_preview(out_path, world, scale=4)
    return 0


if __name__ == "__main__":
    sys.exit(main())
