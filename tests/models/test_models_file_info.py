import unittest
from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

from gdrivepath.models import ChildRef, FileInfo, create_date, is_dir, modified_date
from gdrivepath.util.mime import FOLDER_MIME


class TestFileInfo(unittest.TestCase):
    def test_defaults(self) -> None:
        info = FileInfo(file_id="F1", name="n", mime_type="text/plain")
        self.assertEqual(info.parents, ())
        self.assertFalse(info.trashed)
        self.assertIsNone(info.modified_time)
        self.assertIsNone(info.size)
        self.assertFalse(info.is_dir)
        self.assertTrue(info.downloadable)

    def test_folder(self) -> None:
        info = FileInfo(file_id="D1", name="d", mime_type=FOLDER_MIME)
        self.assertTrue(info.is_dir)
        self.assertTrue(is_dir(info))
        self.assertFalse(info.downloadable)

    def test_immutable(self) -> None:
        info = FileInfo(file_id="F1", name="n", mime_type="text/plain")
        with self.assertRaises(FrozenInstanceError):
            info.name = "other"  # type: ignore[misc]

    def test_dates(self) -> None:
        created = datetime(2024, 5, 1, 8, 0, 0, 250000, tzinfo=timezone.utc)
        modified = datetime(2025, 1, 1, 12, 0, 1, 999000, tzinfo=timezone.utc)
        info = FileInfo(
            file_id="F1",
            name="n",
            mime_type="text/plain",
            created_time=created,
            modified_time=modified,
        )
        self.assertEqual(create_date(info), created)
        self.assertEqual(
            modified_date(info),
            datetime(2025, 1, 1, 12, 0, 1, tzinfo=timezone.utc),
        )

    def test_missing_dates(self) -> None:
        info = FileInfo(file_id="F1", name="n", mime_type="text/plain")
        self.assertIsNone(create_date(info))
        self.assertIsNone(modified_date(info))


class TestChildRef(unittest.TestCase):
    def test_child_ref(self) -> None:
        ref = ChildRef(file_id="C1", name="c", mime_type=FOLDER_MIME)
        self.assertEqual(ref.file_id, "C1")
        self.assertEqual(ChildRef(file_id="C2").name, "")


if __name__ == "__main__":
    unittest.main()
