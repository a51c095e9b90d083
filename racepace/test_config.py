import os
import unittest
from unittest.mock import patch

from racepace.config import Settings


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        self.assertEqual(settings.log_level, "WARNING")
        self.assertEqual(settings.scale, "metric")
        self.assertEqual(settings.degree_seconds, 5)
        self.assertFalse(settings.include_hours_always)

    def test_reads_env(self) -> None:
        with patch.dict(
            os.environ,
            {
                "RACEPACE_LOG_LEVEL": "debug",
                "RACEPACE_SCALE": "Imperial",
                "RACEPACE_DEGREE_SECONDS": "10",
                "RACEPACE_INCLUDE_HOURS_ALWAYS": "yes",
            },
            clear=True,
        ):
            settings = Settings.from_env()
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.scale, "imperial")
        self.assertEqual(settings.degree_seconds, 10)
        self.assertTrue(settings.include_hours_always)

    def test_bad_values_fall_back_or_clamp(self) -> None:
        env = {
            "RACEPACE_LOG_LEVEL": "loud",
            "RACEPACE_SCALE": "nautical",
            "RACEPACE_DEGREE_SECONDS": "9999",
        }
        settings = Settings.from_env(getenv=env.get)
        self.assertEqual(settings.log_level, "WARNING")
        self.assertEqual(settings.scale, "metric")
        self.assertEqual(settings.degree_seconds, 600)

        settings = Settings.from_env(getenv={"RACEPACE_DEGREE_SECONDS": "abc"}.get)
        self.assertEqual(settings.degree_seconds, 5)

    def test_generic_log_level_alias(self) -> None:
        settings = Settings.from_env(getenv={"LOG_LEVEL": "info"}.get)
        self.assertEqual(settings.log_level, "INFO")


if __name__ == "__main__":
    unittest.main()
