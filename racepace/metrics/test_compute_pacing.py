import unittest

from racepace.io.models import IMPERIAL, METRIC, Race
from racepace.metrics.compute_pacing import compute_pacing, splits_table


class TestSplitsTable(unittest.TestCase):
    def test_marathon_table(self) -> None:
        race = Race(distance=42195, duration_s=14400, scale=METRIC)
        df = splits_table(race, 5)

        self.assertEqual(len(df), 43)
        self.assertEqual(df["split"].iloc[0], 1)
        self.assertEqual(df["distance"].iloc[0], 1000)
        # the last split stops at the finish line
        self.assertEqual(df["distance"].iloc[-1], 42195)
        self.assertTrue((df["even"] == 341).all())
        self.assertEqual(df["even_elapsed"].iloc[-1], 43 * 341)
        self.assertEqual(df["negative"].iloc[0], 346)
        self.assertEqual(df["positive"].iloc[0], 336)
        self.assertEqual(df["negative_elapsed"].iloc[1], 692)


class TestComputePacing(unittest.TestCase):
    def test_imperial_payload(self) -> None:
        race = Race(distance=46112, duration_s=14400, scale=IMPERIAL)
        payload = compute_pacing(race, 2)

        self.assertEqual(payload["scale"], "imperial")
        self.assertEqual(payload["split_unit"], "mi")
        self.assertEqual(payload["distance_split_units"], 26.2)
        self.assertEqual(payload["num_splits"], 27)
        self.assertEqual(payload["average_pace_s"], 549)
        self.assertEqual(payload["speed_per_hour"], 6.55)
        self.assertEqual(payload["degree_s"], 2)
        self.assertEqual(payload["even_splits"], [549] * 27)
        self.assertEqual(payload["negative_splits"][0], 551)
        self.assertEqual(payload["positive_splits"][0], 547)
        self.assertEqual(len(payload["splits"]), 27)
        self.assertEqual(payload["splits"][0]["split"], 1)

    def test_race_without_duration_has_no_schedules(self) -> None:
        payload = compute_pacing(Race(distance=10000), 5)
        self.assertEqual(payload["num_splits"], 10)
        self.assertEqual(payload["distance_split_units"], 10.0)
        self.assertIsNone(payload["duration_s"])
        self.assertNotIn("average_pace_s", payload)
        self.assertNotIn("splits", payload)


if __name__ == "__main__":
    unittest.main()
