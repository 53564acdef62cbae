import unittest
from datetime import date

from errors import UnknownPresetError
from presets import AVAILABLE_PRESETS, resolve_preset

# 2025-09-18 是星期四
TODAY = date(2025, 9, 18)


class TestResolvePreset(unittest.TestCase):

    def test_calendar_presets(self):
        self.assertEqual(
            resolve_preset("today", TODAY), ("2025-09-18 00:00:00", "2025-09-18 23:59:59")
        )
        self.assertEqual(
            resolve_preset("yesterday", TODAY), ("2025-09-17 00:00:00", "2025-09-17 23:59:59")
        )
        self.assertEqual(
            resolve_preset("this-week", TODAY), ("2025-09-15 00:00:00", "2025-09-18 23:59:59")
        )
        self.assertEqual(
            resolve_preset("this-month", TODAY), ("2025-09-01 00:00:00", "2025-09-18 23:59:59")
        )
        self.assertEqual(
            resolve_preset("this-year", TODAY), ("2025-01-01 00:00:00", "2025-09-18 23:59:59")
        )

    def test_rolling_presets(self):
        self.assertEqual(resolve_preset("last-week", TODAY), ("2025-09-11", "2025-09-18 23:59:59"))
        self.assertEqual(resolve_preset("sprint", TODAY), resolve_preset("last-2-weeks", TODAY))
        self.assertEqual(resolve_preset("quarter", TODAY), resolve_preset("last-3-months", TODAY))
        self.assertEqual(resolve_preset("last-year", TODAY)[0], "2024-09-18")

    def test_this_week_on_monday(self):
        monday = date(2025, 9, 15)
        self.assertEqual(resolve_preset("this-week", monday)[0], "2025-09-15 00:00:00")

    def test_every_listed_preset_resolves(self):
        for preset in AVAILABLE_PRESETS:
            with self.subTest(preset=preset):
                since, until = resolve_preset(preset, TODAY)
                self.assertLessEqual(since[:10], until[:10])

    def test_case_insensitive(self):
        self.assertEqual(resolve_preset("Today", TODAY), resolve_preset("today", TODAY))

    def test_unknown_preset(self):
        with self.assertRaises(UnknownPresetError) as ctx:
            resolve_preset("fortnight", TODAY)
        self.assertIn("fortnight", str(ctx.exception))
        self.assertIn("sprint", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
