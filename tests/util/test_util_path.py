import unittest

from gdrivepath.util.path import (
    canonical_path,
    is_root,
    join_path,
    prefixes,
    split_path,
)


class TestSplitPath(unittest.TestCase):
    def test_drops_redundant_separators(self) -> None:
        self.assertEqual(split_path("/a//b/c/"), ("a/b", "c", "a/b/c"))

    def test_single_segment_has_blank_directory(self) -> None:
        self.assertEqual(split_path("c"), ("", "c", "c"))
        self.assertEqual(split_path("/c"), ("", "c", "c"))

    def test_blank_paths(self) -> None:
        for path in ("", "/", "///"):
            with self.subTest(path=path):
                self.assertEqual(split_path(path), ("", "", ""))

    def test_canonical_path_is_idempotent(self) -> None:
        once = canonical_path("//x/y//z")
        self.assertEqual(once, "x/y/z")
        self.assertEqual(canonical_path(once), once)


class TestPathHelpers(unittest.TestCase):
    def test_is_root(self) -> None:
        self.assertTrue(is_root("/"))
        self.assertTrue(is_root("//"))
        self.assertFalse(is_root(""))
        self.assertFalse(is_root("/a"))

    def test_prefixes(self) -> None:
        self.assertEqual(prefixes("a/b"), [("a", "a"), ("b", "a/b")])
        self.assertEqual(prefixes(""), [])

    def test_join_path(self) -> None:
        self.assertEqual(join_path("tmp", "x"), "tmp/x")
        self.assertEqual(join_path("", "x"), "x")
        self.assertEqual(join_path("/a/", "/b"), "a/b")


if __name__ == "__main__":
    unittest.main()
