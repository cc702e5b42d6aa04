import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from pokefetch_core.config import AppConfig, config_path, load_config, save_config


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.json"
            cfg = load_config(path)
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.artwork.shiny_odds, 4)
            self.assertEqual(cfg.artwork.max_pokemon_id, 904)
            self.assertTrue(cfg.fastfetch.launch)
            self.assertEqual(cfg.artwork_path.name, "pokemon.txt")
            self.assertEqual(cfg.fastfetch_config_path.name, "config.jsonc")

    def test_default_when_malformed(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.artwork.shiny_odds = 10
            cfg.fastfetch.launch = False
            cfg.paths.artwork_cache = str(Path(tmp) / "art.txt")
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.artwork.shiny_odds, 10)
            self.assertFalse(reloaded.fastfetch.launch)
            self.assertEqual(reloaded.artwork_path, Path(tmp) / "art.txt")

    def test_normalizes_out_of_range_values(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(
                json.dumps(
                    {
                        "config_version": 1,
                        "artwork": {"shiny_odds": 0, "max_pokemon_id": -5},
                        "api": {"base_url": "https://example.test/api/", "timeout_s": 0},
                    }
                ),
                encoding="utf-8",
            )
            cfg = load_config(path)
            self.assertEqual(cfg.artwork.shiny_odds, 1)
            self.assertEqual(cfg.artwork.max_pokemon_id, 1)
            self.assertEqual(cfg.api.base_url, "https://example.test/api")
            self.assertEqual(cfg.api.timeout_s, 1)

    def test_env_override(self):
        with patch.dict(os.environ, {"POKEFETCH_CONFIG": "/tmp/custom/pokefetch.json"}):
            self.assertEqual(config_path(), Path("/tmp/custom/pokefetch.json"))


if __name__ == "__main__":
    unittest.main()
