# islandgen/core/types.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .errors import ConfigurationError


@dataclass(frozen=True)
class WorldPoint:
    """Точка в мировых координатах (единицы мира, не клетки)."""

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True)
class Region:
    """Прямоугольная под-область сетки: [x0, x0 + width) x [y0, y0 + height)."""

    x0: int
    y0: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"Region must have positive size, got {self.width}x{self.height}")

    @property
    def center(self) -> Tuple[int, int]:
        return self.x0 + self.width // 2, self.y0 + self.height // 2

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class Viewport:
    """
    Параметры камеры на один запрос отрисовки.
    target - центр камеры в мире, zoom - масштаб по осям,
    half_extent - половина экрана в экранных единицах.
    Отрицательный zoom допустим (перевёрнутая ось), нулевой - нет.
    """

    target: WorldPoint
    zoom: Tuple[float, float] = (1.0, 1.0)
    half_extent: Tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        zx, zy = self.zoom
        if zx == 0 or zy == 0:
            raise ConfigurationError(f"Viewport zoom must be non-zero, got {self.zoom}")
        hx, hy = self.half_extent
        if hx < 0 or hy < 0:
            raise ConfigurationError(f"Viewport half_extent must be >= 0, got {self.half_extent}")

    def world_rect(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) видимой области в мировых координатах."""
        zx, zy = self.zoom
        hx, hy = self.half_extent
        x0 = self.target.x - hx / zx
        x1 = self.target.x + hx / zx
        y0 = self.target.y - hy / zy
        y1 = self.target.y + hy / zy
        return min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1)
