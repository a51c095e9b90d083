import unittest
from datetime import timedelta

from racepace.errors import InvalidInputError
from racepace.io.durations import format_duration, parse_duration, to_duration, to_seconds


class TestDurations(unittest.TestCase):
    def test_to_duration(self) -> None:
        self.assertEqual(to_duration(4, 5, 19).total_seconds(), 14719)
        self.assertEqual(to_duration(0, 0, 0), timedelta(0))

    def test_to_duration_rejects_negative_parts(self) -> None:
        with self.assertRaises(InvalidInputError):
            to_duration(0, -1, 0)

    def test_format_duration(self) -> None:
        self.assertEqual(format_duration(to_duration(0, 0, 0)), "00:00")
        self.assertEqual(format_duration(to_duration(0, 0, 9)), "00:09")
        self.assertEqual(format_duration(to_duration(0, 5, 9)), "05:09")
        self.assertEqual(format_duration(to_duration(4, 5, 19)), "04:05:19")
        self.assertEqual(format_duration(to_duration(135, 59, 1)), "135:59:01")

    def test_format_duration_with_hours_always(self) -> None:
        self.assertEqual(format_duration(341, include_hours_always=True), "00:05:41")
        self.assertEqual(format_duration(14400, include_hours_always=True), "04:00:00")

    def test_to_seconds_truncates_and_rejects_negative(self) -> None:
        self.assertEqual(to_seconds(timedelta(seconds=341, milliseconds=900)), 341)
        self.assertEqual(to_seconds(5.9), 5)
        with self.assertRaises(InvalidInputError):
            to_seconds(timedelta(seconds=-1))
        with self.assertRaises(InvalidInputError):
            to_seconds(-3)
        with self.assertRaises(InvalidInputError):
            to_seconds("5:00")

    def test_parse_duration_supports_mmss_hmmss_and_seconds(self) -> None:
        self.assertEqual(parse_duration("5:53").total_seconds(), 353)
        self.assertEqual(parse_duration("4:00:00").total_seconds(), 14400)
        self.assertEqual(parse_duration("341").total_seconds(), 341)
        self.assertEqual(parse_duration(timedelta(seconds=12)).total_seconds(), 12)

    def test_parse_duration_rejects_garbage(self) -> None:
        for text in ("", "abc", "1:2:3:4", "-5:00", "5:xx"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidInputError):
                    parse_duration(text)


if __name__ == "__main__":
    unittest.main()
