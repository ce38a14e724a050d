# ==============================================================================
# Файл: tests/test_rng.py
# Назначение: Юнит-тесты детерминированного генератора случайных чисел.
# ==============================================================================
import unittest

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from islandgen.core.rng import RNG, hash64, seed_from_any, stage_seeds


class TestRNG(unittest.TestCase):

    def test_same_seed_same_sequence(self):
        a, b = RNG(42), RNG(42)
        self.assertEqual([a.u64() for _ in range(20)], [b.u64() for _ in range(20)])

    def test_different_seeds_diverge(self):
        self.assertNotEqual(RNG(1).u64(), RNG(2).u64())

    def test_randint_is_inclusive(self):
        rng = RNG(7)
        seen = {rng.randint(0, 1) for _ in range(200)}
        self.assertEqual(seen, {0, 1})
        for _ in range(200):
            v = rng.randint(3, 9)
            self.assertTrue(3 <= v <= 9)

    def test_randint_swaps_reversed_bounds(self):
        rng = RNG(5)
        for _ in range(50):
            self.assertTrue(2 <= rng.randint(9, 2) <= 9)

    def test_uniform_in_unit_interval(self):
        rng = RNG(11)
        for _ in range(500):
            v = rng.uniform()
            self.assertTrue(0.0 <= v < 1.0)
            self.assertTrue(0 <= rng.u32() < 2 ** 32)

    def test_choose_and_shuffle(self):
        rng = RNG(3)
        items = list(range(10))
        self.assertIn(rng.choose(items), items)
        rng.shuffle(items)
        self.assertEqual(sorted(items), list(range(10)))
        with self.assertRaises(IndexError):
            rng.choose([])


class TestSeeds(unittest.TestCase):

    def test_seed_from_any(self):
        self.assertEqual(seed_from_any(5), 5)
        self.assertEqual(seed_from_any(-1), 0xFFFFFFFFFFFFFFFF)
        self.assertEqual(seed_from_any("island"), seed_from_any(b"island"))
        self.assertNotEqual(seed_from_any("island"), seed_from_any("islanD"))
        with self.assertRaises(TypeError):
            seed_from_any(1.5)
        with self.assertRaises(TypeError):
            seed_from_any(True)

    def test_stage_seeds_are_stable_prefixes(self):
        short = stage_seeds(99, 2)
        long = stage_seeds(99, 4)
        self.assertEqual(long[:2], short)
        self.assertEqual(len(set(long)), 4)
        self.assertEqual(short[1], hash64(99, 1))


if __name__ == '__main__':
    unittest.main()
