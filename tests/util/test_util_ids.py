import unittest
import uuid

from gdrivepath.util.ids import new_temp_name


class TestUtilIds(unittest.TestCase):
    def test_new_temp_name(self) -> None:
        name = new_temp_name()
        self.assertTrue(name.startswith("temp-"))
        self.assertNotIn("/", name)
        self.assertEqual(uuid.UUID(name[len("temp-"):]).version, 4)

    def test_temp_names_are_unique(self) -> None:
        self.assertEqual(len({new_temp_name() for _ in range(3)}), 3)


if __name__ == "__main__":
    unittest.main()
