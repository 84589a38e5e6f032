import tempfile
import unittest
from pathlib import Path

from dirtools.models import SizeBounds, SizeUnit
from dirtools.sizes import filter_by_size, filter_files_by_size, get_file_size


class TestFilterBySize(unittest.TestCase):
    def setUp(self):
        self.paths = ["small", "medium", "large"]
        self.sizes = {"small": 10, "medium": 50, "large": 100}

    def test_both_bounds(self):
        self.assertEqual(filter_by_size(self.paths, self.sizes, 20, 80), ["medium"])

    def test_min_only(self):
        self.assertEqual(filter_by_size(self.paths, self.sizes, size_min=20), ["medium", "large"])

    def test_max_only(self):
        self.assertEqual(filter_by_size(self.paths, self.sizes, size_max=80), ["small", "medium"])

    def test_no_bounds_keeps_everything(self):
        self.assertEqual(filter_by_size(self.paths, self.sizes), self.paths)

    def test_bounds_inclusive(self):
        self.assertEqual(filter_by_size(self.paths, self.sizes, 50, 50), ["medium"])

    def test_order_preserved(self):
        paths = ["large", "small", "medium"]
        self.assertEqual(filter_by_size(paths, self.sizes, size_max=1000), paths)

    def test_missing_size(self):
        with self.assertRaises(KeyError):
            filter_by_size(["unknown"], self.sizes, size_min=1)

    def test_inverted_bounds(self):
        with self.assertRaises(ValueError):
            filter_by_size(self.paths, self.sizes, 80, 20)

    def test_size_bounds(self):
        self.assertFalse(SizeBounds().is_set)
        self.assertTrue(SizeBounds(size_max=5).is_set)
        self.assertTrue(SizeBounds(1, 5).contains(1))
        self.assertFalse(SizeBounds(1, 5).contains(6))


class TestFileSizes(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmpdir.name)
        for name, size in [("a.bin", 10), ("b.bin", 50), ("c.bin", 100), ("d.bin", 1500)]:
            (self.root / name).write_bytes(b"\0" * size)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_get_file_size_units(self):
        path = self.root / "d.bin"
        self.assertEqual(get_file_size(path), 1500)
        self.assertEqual(get_file_size(path, SizeUnit.KB), 1.5)
        self.assertEqual(get_file_size(path, SizeUnit.MB), 0.0015)

    def test_get_file_size_missing(self):
        with self.assertRaises(FileNotFoundError):
            get_file_size(self.root / "missing.bin")

    def test_filter_files_by_size(self):
        paths = [self.root / n for n in ("a.bin", "b.bin", "c.bin")]
        self.assertEqual(filter_files_by_size(paths, 20, 80), [self.root / "b.bin"])
        self.assertEqual(
            filter_files_by_size(paths, size_min=20),
            [self.root / "b.bin", self.root / "c.bin"],
        )

    def test_filter_files_by_size_in_kb(self):
        paths = [self.root / n for n in ("c.bin", "d.bin")]
        self.assertEqual(filter_files_by_size(paths, size_min=1, unit=SizeUnit.KB), [self.root / "d.bin"])


if __name__ == "__main__":
    unittest.main()
