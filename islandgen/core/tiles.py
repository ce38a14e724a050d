# ==============================================================================
# Файл: islandgen/core/tiles.py
# Назначение: Каталоги тайлов по видам слоёв (center / edge / corner) и
#             преобразование тайла в прямоугольник атласа.
# ==============================================================================
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from .constants import ATLAS_COLUMNS, OCEAN_PATTERN_SIZE, TILE_SIZE, LayerKind
from .errors import ConfigurationError


class Direction(str, Enum):
    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"


CARDINALS = (Direction.N, Direction.S, Direction.W, Direction.E)
DIAGONALS = (Direction.NE, Direction.NW, Direction.SE, Direction.SW)
ALL_DIRECTIONS = tuple(Direction)


class TileRole(str, Enum):
    CENTER = "center"
    EDGE = "edge"
    CORNER = "corner"


@dataclass(frozen=True)
class TileId:
    """
    Тайл с ролью. ``index`` - номер спрайта в атласе (с 1, 0 = "нет спрайта").
    Для EDGE/CORNER ``direction`` - сторона суши, на которой стоит тайл
    (клетка над островом = Direction.N).
    """

    role: TileRole
    index: int
    direction: Optional[Direction] = None

    @property
    def is_center(self) -> bool:
        return self.role is TileRole.CENTER

    def is_edge(self, direction: Optional[Direction] = None) -> bool:
        if self.role is not TileRole.EDGE:
            return False
        return direction is None or self.direction is direction

    def is_corner(self, direction: Optional[Direction] = None) -> bool:
        if self.role is not TileRole.CORNER:
            return False
        return direction is None or self.direction is direction


@dataclass(frozen=True)
class TileCatalog:
    kind: LayerKind
    centers: Tuple[TileId, ...]
    edges: Dict[Direction, TileId] = field(default_factory=dict)
    corners: Dict[Direction, TileId] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.centers:
            raise ConfigurationError(f"{self.kind.value}: catalog has no center tiles")
        for t in self.centers:
            if not t.is_center:
                raise ConfigurationError(f"{self.kind.value}: {t} is not a center tile")

        if self.kind is LayerKind.OCEAN:
            need = OCEAN_PATTERN_SIZE * OCEAN_PATTERN_SIZE
            if len(self.centers) != need:
                raise ConfigurationError(
                    f"ocean: pattern needs exactly {need} center tiles, got {len(self.centers)}"
                )
            return

        missing = [d.value for d in ALL_DIRECTIONS if d not in self.edges]
        if missing:
            raise ConfigurationError(f"{self.kind.value}: missing edge tiles {missing}")
        missing = [d.value for d in DIAGONALS if d not in self.corners]
        if missing:
            raise ConfigurationError(f"{self.kind.value}: missing corner tiles {missing}")
        for d, t in self.edges.items():
            if not t.is_edge(d):
                raise ConfigurationError(f"{self.kind.value}: edge slot {d.value} holds {t}")
        for d, t in self.corners.items():
            if not t.is_corner(d):
                raise ConfigurationError(f"{self.kind.value}: corner slot {d.value} holds {t}")

    def edge(self, direction: Direction) -> TileId:
        return self.edges[direction]

    def corner(self, direction: Direction) -> TileId:
        return self.corners[direction]

    def owns(self, tile: Optional[TileId]) -> bool:
        if tile is None:
            return False
        return (
            tile in self.centers
            or tile in self.edges.values()
            or tile in self.corners.values()
        )


def _center(index: int) -> TileId:
    return TileId(TileRole.CENTER, index)


def _edge(direction: Direction, index: int) -> TileId:
    return TileId(TileRole.EDGE, index, direction)


def _corner(direction: Direction, index: int) -> TileId:
    return TileId(TileRole.CORNER, index, direction)


def _sheet(row: int, col: int) -> int:
    return row * ATLAS_COLUMNS + col


# --- Океан: 4 строки по 4 тайла, строки атласа 18..21 ---
OCEAN = TileCatalog(
    kind=LayerKind.OCEAN,
    centers=tuple(
        _center(1164 + row * ATLAS_COLUMNS + col)
        for row in range(OCEAN_PATTERN_SIZE)
        for col in range(OCEAN_PATTERN_SIZE)
    ),
)

# --- Остров / пляж: песок ---
ISLAND = TileCatalog(
    kind=LayerKind.ISLAND,
    centers=(_center(70), _center(72), _center(73), _center(74)),
    edges={
        Direction.N: _edge(Direction.N, _sheet(28, 7)),
        Direction.S: _edge(Direction.S, _sheet(32, 7)),
        Direction.W: _edge(Direction.W, _sheet(30, 5)),
        Direction.E: _edge(Direction.E, _sheet(30, 9)),
        Direction.NW: _edge(Direction.NW, _sheet(29, 6)),
        Direction.NE: _edge(Direction.NE, _sheet(29, 8)),
        Direction.SW: _edge(Direction.SW, _sheet(31, 6)),
        Direction.SE: _edge(Direction.SE, _sheet(31, 8)),
    },
    corners={
        Direction.NW: _corner(Direction.NW, _sheet(28, 6)),
        Direction.NE: _corner(Direction.NE, _sheet(28, 8)),
        Direction.SW: _corner(Direction.SW, _sheet(32, 6)),
        Direction.SE: _corner(Direction.SE, _sheet(32, 8)),
    },
)

# --- Трава: светлая в центре, тёмная по краям ---
_GRASS_DARK = 66
GRASS = TileCatalog(
    kind=LayerKind.GRASS,
    centers=(_center(67), _center(130), _center(131), _center(132)),
    edges={d: _edge(d, _GRASS_DARK) for d in ALL_DIRECTIONS},
    corners={d: _corner(d, _GRASS_DARK) for d in DIAGONALS},
)


def catalog_for(kind: LayerKind) -> TileCatalog:
    kind = LayerKind(kind)
    if kind is LayerKind.OCEAN:
        return OCEAN
    if kind is LayerKind.ISLAND:
        return ISLAND
    if kind is LayerKind.GRASS:
        return GRASS
    raise ConfigurationError(f"No tile catalog for layer kind {kind!r}")


def atlas_rect(
        tile: TileId,
        tile_size: float = TILE_SIZE,
        columns: int = ATLAS_COLUMNS,
) -> Tuple[float, float, float, float]:
    """Прямоугольник (x, y, w, h) спрайта в атласе. Индексы атласа начинаются с 1."""
    if tile.index <= 0:
        raise ValueError(f"Tile {tile} has no sprite in the atlas")
    i = tile.index - 1
    return (i % columns) * tile_size, (i // columns) * tile_size, tile_size, tile_size
