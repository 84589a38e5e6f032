import os
import unittest

from dirtools.paths import (
    file_paths_to_names,
    get_file_name_from_path,
    get_parent_dir,
    join_path,
    relative_path,
    relative_paths,
    strip_extension,
)


class TestPaths(unittest.TestCase):
    def test_get_parent_dir(self):
        self.assertEqual(get_parent_dir("/data/photos/img.jpg"), "/data/photos")
        self.assertEqual(get_parent_dir("img.jpg"), "")

    def test_join_path(self):
        self.assertEqual(join_path("a", "b", "c.txt"), os.path.join("a", "b", "c.txt"))

    def test_file_name_from_path(self):
        self.assertEqual(get_file_name_from_path("/data/photos/img.jpg"), "img.jpg")
        self.assertEqual(get_file_name_from_path("C:\\data\\report.pdf"), "report.pdf")
        self.assertEqual(get_file_name_from_path("/data/img.jpg", with_extension=False), "img")

    def test_strip_extension(self):
        self.assertEqual(strip_extension("archive.tar.gz"), "archive.tar")
        self.assertEqual(strip_extension("notes.txt"), "notes")
        self.assertEqual(strip_extension("Makefile"), "")

    def test_file_paths_to_names(self):
        self.assertEqual(
            file_paths_to_names(["/a/one.txt", "b/two.md", "three"]),
            ["one.txt", "two.md", "three"],
        )

    def test_relative_path(self):
        start = os.path.join("root", "dir")
        path = os.path.join("root", "dir", "sub", "file.txt")
        self.assertEqual(relative_path(path, start), "sub/file.txt")
        self.assertEqual(relative_paths([path, start], start), ["sub/file.txt", "."])


if __name__ == "__main__":
    unittest.main()
