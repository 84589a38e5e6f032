"""
Path and file name string helpers.

These never touch the filesystem.
"""

import os
import re


def get_parent_dir(file_path) -> str:
    """Return the path of the directory containing file_path."""
    return os.path.dirname(file_path)


def join_path(*parts) -> str:
    return os.path.join(*parts)


def get_file_name_from_path(path, with_extension: bool = True) -> str:
    """
    Return the last component of a path.

    Both "/" and "\\" count as separators, so Windows-style paths work on any OS.

    Args:
        path: A file path.
        with_extension: Set False to strip the extension from the result.
    """
    name = re.sub(r"^.*[\\/]", "", os.fspath(path))
    if not with_extension:
        return strip_extension(name)
    return name


def strip_extension(file_name: str) -> str:
    """
    Drop the last ".suffix" from a file name.

    "archive.tar.gz" -> "archive.tar". A name without a dot has nothing left
    and returns "".
    """
    return ".".join(file_name.split(".")[:-1])


def file_paths_to_names(file_paths) -> list[str]:
    """Turn a list of file paths into a list of file names."""
    return [get_file_name_from_path(p) for p in file_paths]


def relative_path(path, start) -> str:
    """Return path relative to start, using "/" separators."""
    return os.path.relpath(path, start).replace(os.sep, "/")


def relative_paths(paths, start) -> list[str]:
    return [relative_path(p, start) for p in paths]
