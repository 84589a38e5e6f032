"""
Directory tree traversal and filtering.

Functions for listing the contents of a directory, optionally recursively, and
filtering the results by kind, ignored names and file size.
"""

import os
from collections import deque
from typing import Iterator

from . import fs
from .config import settings
from .models import Entry, EntryKind, FilterCriteria
from .utils import print_info


def _classify(path: str) -> Entry:
    st = fs.stat(path)
    kind = EntryKind.DIRECTORY if fs.is_directory(st) else EntryKind.FILE
    return Entry(path=path, kind=kind, size=st.st_size)


def is_dir(path) -> bool:
    """
    Check if a path is a directory. Symlinks are not followed.

    Raises:
        OSError: If the path does not exist.
    """
    return fs.is_directory(fs.stat(path))


def iter_entries(
    root,
    recursive: bool = False,
    criteria: FilterCriteria | None = None
) -> Iterator[Entry]:
    """
    Walk a directory and yield the entries that pass the filter.

    Directories are walked breadth-first with an explicit queue. Within one
    directory entries come in the order the OS lists them.

    Args:
        root: The directory to walk.
        recursive: Set True to descend into subdirectories.
        criteria: Inclusion filter. Defaults to FilterCriteria().

    Yields:
        Classified entries whose paths are joined from root.

    Raises:
        OSError: If root (or any directory reached) cannot be listed, or an
            entry cannot be stat'ed.
    """
    if criteria is None:
        criteria = FilterCriteria()

    pending = deque([os.fspath(root)])

    while pending:
        current = pending.popleft()

        for name in fs.list_dir(current):
            # Ignored names are dropped before classification, and an ignored
            # directory is never descended into
            if criteria.is_ignored(name):
                continue

            entry = _classify(os.path.join(current, name))

            # Filtered-out directories are still walked
            if recursive and entry.is_dir:
                pending.append(entry.path)

            if criteria.accepts(entry):
                yield entry


def list_entries(
    root,
    recursive: bool = False,
    criteria: FilterCriteria | None = None
) -> list[str]:
    """
    Return the full paths of files and/or dirs in a directory.

    Args:
        root: The path to the directory.
        recursive: Set True to look in inner directories as well.
        criteria: Which kinds to collect, which names to ignore and
            the optional file size bounds.

    Returns:
        Paths in enumeration order, without duplicates.

    Raises:
        OSError: If root does not exist, is unreadable or is not a directory.
    """
    paths = [entry.path for entry in iter_entries(root, recursive, criteria)]
    print_info(f"Listed {len(paths)} entries under {root}")
    return paths


def get_dir_content(dir_path, ignore_names=None) -> list[str]:
    """Return the base names of the immediate children of a directory."""
    if ignore_names is None:
        ignore_names = settings.ignore_names
    ignored = set(ignore_names)
    return [name for name in fs.list_dir(dir_path) if name not in ignored]


def get_dirs(dir_path, ignore_names=None) -> list[str]:
    """Return the base names of the directories directly inside dir_path."""
    return [
        name for name in get_dir_content(dir_path, ignore_names)
        if is_dir(os.path.join(dir_path, name))
    ]


def find_files_in_path(
    dir_path,
    file_name: str = "*",
    file_extension: str = "",
    include_files: bool = True,
    include_dirs: bool = True,
    ignore_names=None
) -> list[str]:
    """
    Recursively search a directory for entries whose name matches a pattern.

    The pattern is file_name + file_extension, matched against base names with
    shell-style wildcards, e.g. file_name="IMG_*", file_extension=".jpg".

    Returns:
        Matching full paths, in walk order.
    """
    criteria = FilterCriteria(
        include_files=include_files,
        include_dirs=include_dirs,
        ignore_names=settings.ignore_names if ignore_names is None else ignore_names,
    )
    pattern = file_name + file_extension

    return [
        entry.path for entry in iter_entries(dir_path, recursive=True, criteria=criteria)
        if fs.match(os.path.basename(entry.path), pattern)
    ]
