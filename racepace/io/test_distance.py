import unittest

from racepace.errors import InvalidInputError
from racepace.io import distance


class TestDistanceConversions(unittest.TestCase):
    def test_speed_conversions(self) -> None:
        self.assertAlmostEqual(distance.to_km_h(10.0), 36.0)
        self.assertAlmostEqual(distance.to_km_h(2.80), 10.08)
        self.assertAlmostEqual(distance.to_mph(1.0), 2.04545)

    def test_distance_conversions(self) -> None:
        self.assertAlmostEqual(distance.to_km(42195), 42.195)
        self.assertAlmostEqual(distance.to_mile(1760), 1.0)
        self.assertAlmostEqual(distance.to_mile(46112), 26.2)
        self.assertAlmostEqual(distance.mile_to_km(10.0), 16.0934)
        self.assertAlmostEqual(distance.km_to_mile(16.0934), 10.0)
        self.assertAlmostEqual(distance.meter_to_feet(100.0), 328.084)
        self.assertAlmostEqual(distance.feet_to_meter(328.084), 100.0)

    def test_rejects_negative_and_nan(self) -> None:
        with self.assertRaises(InvalidInputError):
            distance.to_km(-1)
        with self.assertRaises(InvalidInputError):
            distance.to_mph(float("nan"))
        with self.assertRaises(InvalidInputError):
            distance.meter_to_feet("100")


if __name__ == "__main__":
    unittest.main()
