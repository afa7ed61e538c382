import unittest

from gdrivepath.cache import DEFAULT_TTL_SEC, ObjectCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestObjectCache(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.cache: ObjectCache[str] = ObjectCache(10.0, clock=self.clock)

    def test_default_ttl(self) -> None:
        self.assertEqual(ObjectCache().ttl_sec, DEFAULT_TTL_SEC)

    def test_negative_ttl_rejected(self) -> None:
        with self.assertRaises(ValueError):
            ObjectCache(-1.0)

    def test_get_within_ttl(self) -> None:
        self.cache.put("a", "A")
        self.clock.now += 9.9
        self.assertEqual(self.cache.get("a"), "A")

    def test_entry_expires_and_is_evicted(self) -> None:
        self.cache.put("a", "A")
        self.clock.now += 10.0
        self.assertIsNone(self.cache.get("a"))
        self.assertEqual(len(self.cache), 0)

    def test_put_restarts_ttl(self) -> None:
        self.cache.put("a", "A")
        self.clock.now += 8
        self.cache.put("a", "B")
        self.clock.now += 8
        self.assertEqual(self.cache.get("a"), "B")

    def test_missing_key(self) -> None:
        self.assertIsNone(self.cache.get("nope"))

    def test_delete(self) -> None:
        self.cache.put("a", "A")
        self.cache.delete("a")
        self.cache.delete("a")
        self.assertIsNone(self.cache.get("a"))

    def test_delete_tree(self) -> None:
        for key in ("a", "a/b", "a/b/c", "ab", "x"):
            self.cache.put(key, key.upper())

        self.cache.delete_tree("a")

        self.assertIsNone(self.cache.get("a"))
        self.assertIsNone(self.cache.get("a/b/c"))
        self.assertEqual(self.cache.get("ab"), "AB")
        self.assertEqual(self.cache.get("x"), "X")

    def test_clear(self) -> None:
        self.cache.put("a", "A")
        self.cache.put("b", "B")
        self.cache.clear()
        self.assertEqual(len(self.cache), 0)


if __name__ == "__main__":
    unittest.main()
