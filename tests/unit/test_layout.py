import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from pokefetch_core.layout import CATEGORY_MODULES, build_modules

ACCENT = "38;2;248;8;8"


class LayoutTests(unittest.TestCase):
    def test_fixed_order(self):
        modules = build_modules(ACCENT, "label")
        self.assertEqual(modules[:2], ["title", "separator"])
        types = [m["type"] for m in modules[2:18]]
        self.assertEqual(
            types,
            [
                "os", "kernel", "uptime", "processes", "packages", "shell", "monitor", "terminal",
                "cpu", "cpuusage", "gpu", "memory", "disk", "media", "datetime", "version",
            ],
        )
        self.assertEqual(modules[18], "separator")
        self.assertEqual(modules[-2:], ["break", "colors"])
        self.assertEqual(len(modules), 22)

    def test_keys_are_padded_labels(self):
        keys = {spec.type: spec.key for spec in CATEGORY_MODULES}
        self.assertEqual(keys["os"], "os    ")
        self.assertEqual(keys["processes"], "proc  ")
        self.assertEqual(keys["datetime"], "time ")
        self.assertEqual(keys["version"], "ver   ")

    def test_entries_use_accent(self):
        for entry in build_modules(ACCENT, "label"):
            if isinstance(entry, dict):
                self.assertEqual(entry["keyColor"], ACCENT)
                self.assertEqual(entry["valueColor"], ACCENT)

    def test_type_specific_flags(self):
        by_type = {m["type"]: m for m in build_modules(ACCENT, "x") if isinstance(m, dict)}
        self.assertIs(by_type["cpu"]["showPeCoreCount"], False)
        self.assertIs(by_type["cpu"]["temp"], True)
        self.assertIs(by_type["gpu"]["driverSpecific"], True)
        self.assertIs(by_type["gpu"]["temp"], True)
        self.assertNotIn("temp", by_type["memory"])

    def test_custom_entry(self):
        custom = build_modules(ACCENT, "\x1b[1m Pikachu ")[19]
        self.assertEqual(
            custom,
            {
                "type": "custom",
                "key": "pokemon",
                "format": "\x1b[1m Pikachu ",
                "keyColor": ACCENT,
                "valueColor": ACCENT,
            },
        )

    def test_fresh_objects_each_call(self):
        first = build_modules(ACCENT, "x")
        second = build_modules(ACCENT, "x")
        self.assertEqual(first, second)
        first[2]["key"] = "changed"
        self.assertEqual(build_modules(ACCENT, "x")[2]["key"], "os    ")


if __name__ == "__main__":
    unittest.main()
