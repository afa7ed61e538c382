import unittest
from datetime import datetime, timedelta, timezone

from gdrivepath.util.time import (
    normalize_dt,
    parse_rfc3339,
    to_drive_modified_time,
    truncate_seconds,
)


class TestUtilTime(unittest.TestCase):
    def test_normalize_dt_rejects_naive(self) -> None:
        with self.assertRaises(ValueError):
            normalize_dt(datetime(2025, 1, 1, 12, 0, 0))

    def test_parse_rfc3339_fractional_z(self) -> None:
        dt = parse_rfc3339("2025-01-01T12:34:56.123Z")
        self.assertEqual(dt, datetime(2025, 1, 1, 12, 34, 56, 123000, tzinfo=timezone.utc))

    def test_parse_rfc3339_offset_converts_to_utc(self) -> None:
        dt = parse_rfc3339("2025-01-01T12:34:56+09:00")
        self.assertEqual(dt.tzinfo, timezone.utc)
        self.assertEqual(dt, datetime(2025, 1, 1, 3, 34, 56, tzinfo=timezone.utc))

    def test_truncate_seconds(self) -> None:
        dt = datetime(2025, 1, 1, 0, 0, 1, 999999, tzinfo=timezone.utc)
        self.assertEqual(truncate_seconds(dt), datetime(2025, 1, 1, 0, 0, 1, tzinfo=timezone.utc))

    def test_drive_modified_time_drops_sub_seconds(self) -> None:
        dt = datetime(2024, 1, 2, 3, 4, 5, 678900, tzinfo=timezone.utc)
        self.assertEqual(to_drive_modified_time(dt), "2024-01-02T03:04:05.000Z")

    def test_drive_modified_time_converts_to_utc(self) -> None:
        jst = timezone(timedelta(hours=9))
        dt = datetime(2024, 1, 2, 9, 0, 0, tzinfo=jst)
        self.assertEqual(to_drive_modified_time(dt), "2024-01-02T00:00:00.000Z")

    def test_drive_modified_time_round_trips(self) -> None:
        dt = datetime(2024, 6, 30, 23, 59, 59, tzinfo=timezone.utc)
        self.assertEqual(parse_rfc3339(to_drive_modified_time(dt)), dt)


if __name__ == "__main__":
    unittest.main()
