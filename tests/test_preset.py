# ==============================================================================
# Файл: tests/test_preset.py
# Назначение: Юнит-тесты загрузки и валидации пресетов мира.
# ==============================================================================
import json
import tempfile
import unittest

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from islandgen.core.constants import DEFAULT_LAYER_ORDER, DEFAULT_MAP_WIDTH, TILE_SIZE
from islandgen.core.errors import ConfigurationError, PresetNotFoundError
from islandgen.core.preset import DEFAULT_WORLD_PRESET, WorldPreset, deep_merge, load_preset
from islandgen.core.rng import seed_from_any


class TestLoadPreset(unittest.TestCase):

    def test_defaults(self):
        print("\n[TEST] Running test_defaults...")
        preset = load_preset()
        self.assertIsInstance(preset, WorldPreset)
        self.assertEqual(preset.width, DEFAULT_MAP_WIDTH)
        self.assertEqual(preset.tile_size, TILE_SIZE)
        self.assertEqual(preset.layers, DEFAULT_LAYER_ORDER)
        self.assertEqual(preset.blob.containment_tolerance, 1.0)

    def test_dict_and_overrides(self):
        preset = load_preset(
            {"width": 20, "layers": ["island"]},
            overrides={"blob": {"containment_tolerance": 2.5}},
        )
        self.assertEqual(preset.width, 20)
        self.assertEqual(preset.layers, ("island",))
        self.assertEqual(preset.blob.containment_tolerance, 2.5)
        # остальные поля blob берутся из дефолтов
        self.assertAlmostEqual(preset.blob.region_max_fraction, 0.5)

    def test_json_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "world.json"
            path.write_text(json.dumps({"width": 12, "height": 9, "seed": 77}), encoding="utf-8")
            preset = load_preset(path)
        self.assertEqual((preset.width, preset.height, preset.seed), (12, 9, 77))

    def test_missing_file(self):
        with self.assertRaises(PresetNotFoundError):
            load_preset("/nonexistent/preset.json")

    def test_broken_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            bad = Path(tmp) / "bad.json"
            bad.write_text("{width: ", encoding="utf-8")
            with self.assertRaises(ConfigurationError):
                load_preset(bad)
            arr = Path(tmp) / "arr.json"
            arr.write_text("[1, 2]", encoding="utf-8")
            with self.assertRaises(ConfigurationError):
                load_preset(arr)

    def test_string_seed(self):
        preset = load_preset({"seed": "archipelago"})
        self.assertEqual(preset.seed, seed_from_any("archipelago"))
        self.assertIsInstance(preset.seed, int)

    def test_invalid_values(self):
        cases = [
            {"width": 0},
            {"height": -3},
            {"width": 4.5},
            {"seed": True},
            {"tile_size": "16"},
            {"tile_size": 0},
            {"layers": ["ocean"]},
            {"layers": ["lava"]},
            {"layers": "island"},
            {"blob": {"region_min_fraction": 0.0}},
            {"blob": {"region_min_fraction": 0.6}},
            {"blob": {"region_max_fraction": 1.5}},
            {"blob": {"containment_tolerance": 0.5}},
            {"blob": {"containment_tolerance": "high"}},
            {"blob": {"region_min_fraction": None}},
            {"blob": {"region_max_fraction": "0.5"}},
            {"blob": {"containment_tolerance": True}},
            {"layers": [["island"]]},
            {"layers": [None]},
        ]
        for data in cases:
            with self.subTest(data=data):
                with self.assertRaises(ConfigurationError):
                    load_preset(data)

    def test_unsupported_source(self):
        with self.assertRaises(TypeError):
            load_preset(123)

    def test_to_dict_reloads(self):
        preset = load_preset({"width": 10, "height": 8, "seed": 3, "layers": ["island", "grass", "grass"]})
        self.assertEqual(load_preset(preset.to_dict()), preset)


class TestDeepMerge(unittest.TestCase):

    def test_nested_merge_and_list_replace(self):
        merged = deep_merge(DEFAULT_WORLD_PRESET, {"layers": ["grass"], "blob": {"containment_tolerance": 3}})
        self.assertEqual(merged["layers"], ["grass"])
        self.assertEqual(merged["blob"]["containment_tolerance"], 3)
        self.assertIn("region_min_fraction", merged["blob"])

    def test_base_untouched(self):
        deep_merge(DEFAULT_WORLD_PRESET, {"blob": {"containment_tolerance": 9}})
        self.assertEqual(DEFAULT_WORLD_PRESET["blob"]["containment_tolerance"], 1.0)


if __name__ == '__main__':
    unittest.main()
