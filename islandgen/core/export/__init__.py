from .image_exporters import render_world_rgb, write_world_preview

__all__ = ["render_world_rgb", "write_world_preview"]
