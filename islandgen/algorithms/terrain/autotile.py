# ==============================================================================
# Файл: islandgen/algorithms/terrain/autotile.py
# Назначение: Подбор тайлов краёв и углов по маске 4 соседей.
#             Два прохода: сначала края, затем углы (по новому снимку).
# ==============================================================================
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from ...core.tiles import Direction, TileCatalog
from .neighbors import (
    cardinal_codes,
    cardinal_views,
    describe_mask,
    edge_mask,
    mask_code,
    occupancy,
)

log = logging.getLogger(__name__)


# Порядок важен: первое совпадение выигрывает (top, bottom, left, right)
EDGE_RULES: Dict[int, Direction] = {
    mask_code(False, True, True, True): Direction.N,
    mask_code(False, True, False, False): Direction.N,
    mask_code(True, False, True, True): Direction.S,
    mask_code(True, False, False, False): Direction.S,
    mask_code(True, True, False, True): Direction.W,
    mask_code(False, False, False, True): Direction.W,
    mask_code(True, True, True, False): Direction.E,
    mask_code(False, False, True, False): Direction.E,
    mask_code(False, True, False, True): Direction.NW,
    mask_code(False, True, True, False): Direction.NE,
    mask_code(True, False, False, True): Direction.SW,
    mask_code(True, False, True, False): Direction.SE,
}

CORNER_RULES: Dict[int, Direction] = {
    mask_code(False, True, False, True): Direction.NW,
    mask_code(False, True, True, False): Direction.NE,
    mask_code(True, False, False, True): Direction.SW,
    mask_code(True, False, True, False): Direction.SE,
}

# Изолированная клетка (ни одного соседа) - не диагностика, просто пропуск
_ISOLATED = 0


@dataclass(frozen=True)
class UnmatchedNeighborPattern:
    """Граничная клетка, чья маска не описана таблицей краёв. Клетка остаётся пустой."""

    x: int
    y: int
    mask: int

    def __str__(self) -> str:
        return f"({self.x},{self.y}) mask={describe_mask(self.mask)}"


@dataclass
class AutotileReport:
    edges: int = 0
    corners: int = 0
    unmatched: List[UnmatchedNeighborPattern] = field(default_factory=list)


def _lookup_table(rules: Dict[int, Direction], tiles_by_dir) -> np.ndarray:
    lut = np.full(16, None, dtype=object)
    for code, direction in rules.items():
        lut[code] = tiles_by_dir[direction]
    return lut


def assign_edges(tiles: np.ndarray, catalog: TileCatalog, report: AutotileReport) -> None:
    """Проход краёв: пустые клетки рядом с сушей получают тайл края."""
    occ = occupancy(tiles)
    codes = cardinal_codes(*cardinal_views(occ))
    lut = _lookup_table(EDGE_RULES, catalog.edges)

    empty = ~occ
    matched = empty & np.isin(codes, list(EDGE_RULES))
    if matched.any():
        tiles[matched] = lut[codes[matched]]
    report.edges += int(matched.sum())

    unmatched = empty & ~matched & (codes != _ISOLATED)
    for y, x in np.argwhere(unmatched):
        item = UnmatchedNeighborPattern(int(x), int(y), int(codes[y, x]))
        report.unmatched.append(item)
        log.debug("[Autotile] %s: unmatched edge pattern %s", catalog.kind.value, item)


def assign_corners(tiles: np.ndarray, catalog: TileCatalog, report: AutotileReport) -> None:
    """
    Проход углов. Сосед считается занятым, только если он не край,
    делающий угол лишним: сверху не нижний край, снизу не верхний,
    слева не правый, справа не левый.
    """
    occ = occupancy(tiles)
    top, bottom, left, right = cardinal_views(occ)
    not_s, _, _, _ = cardinal_views(edge_mask(tiles, Direction.S))
    _, not_n, _, _ = cardinal_views(edge_mask(tiles, Direction.N))
    _, _, not_e, _ = cardinal_views(edge_mask(tiles, Direction.E))
    _, _, _, not_w = cardinal_views(edge_mask(tiles, Direction.W))

    codes = cardinal_codes(top & ~not_s, bottom & ~not_n, left & ~not_e, right & ~not_w)
    lut = _lookup_table(CORNER_RULES, catalog.corners)

    matched = ~occ & np.isin(codes, list(CORNER_RULES))
    if matched.any():
        tiles[matched] = lut[codes[matched]]
    report.corners += int(matched.sum())


def autotile(tiles: np.ndarray, catalog: TileCatalog) -> AutotileReport:
    """Края, затем углы. Меняет tiles на месте."""
    report = AutotileReport()
    assign_edges(tiles, catalog, report)
    assign_corners(tiles, catalog, report)
    log.debug(
        "[Autotile] %s: edges=%d corners=%d unmatched=%d",
        catalog.kind.value, report.edges, report.corners, len(report.unmatched),
    )
    return report
