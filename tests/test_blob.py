# ==============================================================================
# Файл: tests/test_blob.py
# Назначение: Юнит-тесты роста пятна суши (random walk в эллипсе).
# ==============================================================================
import unittest
from collections import deque

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from islandgen.algorithms.terrain.blob import (
    BlobConfig,
    ellipse_distance,
    grow,
    grow_in_region,
    pick_region,
)
from islandgen.algorithms.terrain.neighbors import occupancy
from islandgen.core.errors import ConfigurationError
from islandgen.core.rng import RNG
from islandgen.core.tiles import ISLAND
from islandgen.core.types import Region, WorldPoint


def _land(tiles):
    return {(int(x), int(y)) for y, x in zip(*occupancy(tiles).nonzero())}


class TestGrowInRegion(unittest.TestCase):

    def setUp(self):
        self.region = Region(0, 0, 5, 5)
        self.result = grow_in_region(10, 10, self.region, RNG(42), ISLAND)

    def test_seed_cell_is_land(self):
        """10x10, seed 42, область 5x5 с центром (2,2)."""
        print("\n[TEST] Running test_seed_cell_is_land...")
        self.assertEqual(self.result.seed_cell, (2, 2))
        self.assertIsNotNone(self.result.tiles[2, 2])
        self.assertEqual(self.result.centroid, WorldPoint(2.5 * 16.0, 2.5 * 16.0))

    def test_land_stays_inside_nominal_ellipse(self):
        for x, y in _land(self.result.tiles):
            self.assertLess(x, 5)
            self.assertLess(y, 5)
            self.assertLessEqual(ellipse_distance(self.region, x, y), 1.0)

    def test_only_center_tiles(self):
        for x, y in _land(self.result.tiles):
            self.assertIn(self.result.tiles[y, x], ISLAND.centers)

    def test_land_count_matches_accepted_steps(self):
        self.assertEqual(len(_land(self.result.tiles)), self.result.land_count)
        self.assertLessEqual(self.result.accepted, self.result.step_budget)
        self.assertTrue(12 <= self.result.step_budget <= 25)

    def test_blob_is_connected(self):
        land = _land(self.result.tiles)
        seen = {self.result.seed_cell}
        queue = deque([self.result.seed_cell])
        while queue:
            x, y = queue.popleft()
            for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
                if (nx, ny) in land and (nx, ny) not in seen:
                    seen.add((nx, ny))
                    queue.append((nx, ny))
        self.assertEqual(seen, land)

    def test_zero_steps_leaves_only_seed(self):
        result = grow_in_region(10, 10, self.region, RNG(42), ISLAND, step_budget=0)
        self.assertEqual(_land(result.tiles), {(2, 2)})

    def test_tolerance_allows_overflow(self):
        wide = grow_in_region(20, 20, Region(5, 5, 6, 6), RNG(1), ISLAND,
                              tolerance=4.0, step_budget=2000)
        region = Region(5, 5, 6, 6)
        dists = [ellipse_distance(region, x, y) for x, y in _land(wide.tiles)]
        self.assertTrue(max(dists) > 1.0)
        self.assertTrue(max(dists) <= 4.0)


class TestGrow(unittest.TestCase):

    def test_deterministic(self):
        a = grow(32, 24, RNG(1234), ISLAND)
        b = grow(32, 24, RNG(1234), ISLAND)
        self.assertEqual(a.tiles.tolist(), b.tiles.tolist())
        self.assertEqual(a.centroid, b.centroid)
        self.assertEqual(a.region, b.region)

    def test_different_seeds_differ(self):
        a = grow(32, 32, RNG(1), ISLAND)
        b = grow(32, 32, RNG(2), ISLAND)
        self.assertNotEqual(a.tiles.tolist(), b.tiles.tolist())

    def test_region_fraction_and_bounds(self):
        for seed in range(25):
            region = pick_region(30, 21, RNG(seed), BlobConfig())
            self.assertTrue(10 <= region.width <= 15)
            self.assertTrue(7 <= region.height <= 10)
            self.assertTrue(0 <= region.x0 <= 30 - region.width)
            self.assertTrue(0 <= region.y0 <= 21 - region.height)

    def test_containment_for_random_regions(self):
        for seed in range(10):
            result = grow(24, 24, RNG(seed), ISLAND)
            for x, y in _land(result.tiles):
                self.assertLessEqual(ellipse_distance(result.region, x, y), 1.0)

    def test_tiny_grid(self):
        result = grow(1, 1, RNG(0), ISLAND)
        self.assertEqual(_land(result.tiles), {(0, 0)})

    def test_invalid_dimensions(self):
        for w, h in ((0, 10), (10, 0), (-3, 4)):
            with self.assertRaises(ConfigurationError):
                grow(w, h, RNG(0), ISLAND)

    def test_invalid_config(self):
        with self.assertRaises(ConfigurationError):
            BlobConfig(containment_tolerance=0.5)
        with self.assertRaises(ConfigurationError):
            BlobConfig(region_min_fraction=0.6, region_max_fraction=0.4)
        with self.assertRaises(ConfigurationError):
            BlobConfig(region_min_fraction=0.0)


if __name__ == '__main__':
    unittest.main()
