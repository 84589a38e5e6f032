"""
Filesystem operations: create, remove, copy, rename and run.

All operations are synchronous. Batch variants are plain loops over the
single-item operation, so a failure part way through leaves the earlier items
applied.
"""

import os
import shutil
import subprocess
import sys

from tqdm import tqdm

from . import fs
from .config import settings
from .models import FilterCriteria
from .paths import get_parent_dir
from .utils import print_info
from .walker import is_dir, iter_entries


def create_dir(dir_path) -> None:
    """Create a directory and all of the directories on its path, if needed."""
    fs.mkdir_all(dir_path)


def exists(path) -> bool:
    """Check if a file or directory exists."""
    return os.path.exists(path)


def remove_file(file_path) -> None:
    """Remove a file. If it does not exist, there is nothing to do."""
    fs.unlink(file_path)


def remove_files(file_paths, progress: bool = False) -> None:
    """
    Remove a list of files, one after the other.

    Args:
        file_paths: Files to remove. Missing files are skipped.
        progress: Show a progress bar.
    """
    for file_path in tqdm(file_paths, unit="file", disable=not progress):
        remove_file(file_path)


def remove_tree(root) -> None:
    """
    Remove a directory and all of its content.

    Files are unlinked while walking, then the directories are removed deepest
    first, finishing with root. A missing root is a no-op. Symlinks are
    unlinked, never followed.

    If root itself is a symlink only the link is removed.

    Not atomic: if this fails part way the tree is left partially deleted.

    Raises:
        NotADirectoryError: If root is a regular file. Nothing is deleted.
        OSError: If something cannot be removed.
    """
    root = os.fspath(root)
    try:
        st = fs.stat(root)
    except FileNotFoundError:
        return

    if fs.is_symlink(st):
        fs.unlink(root)
        print_info(f"Removed symlink {root}")
        return
    if not fs.is_directory(st):
        raise NotADirectoryError(f"Not a directory: {root}")

    # Pre-order list of directories; reversed, every child comes before its parent
    dirs: list[str] = []
    pending = [root]
    removed_files = 0

    while pending:
        current = pending.pop()
        dirs.append(current)
        for name in fs.list_dir(current):
            path = os.path.join(current, name)
            if is_dir(path):
                pending.append(path)
            else:
                fs.unlink(path)
                removed_files += 1

    for dir_path in reversed(dirs):
        fs.rmdir(dir_path)

    print_info(f"Removed {root} ({removed_files} files, {len(dirs)} dirs)")


def copy_file(src, dst) -> None:
    """
    Copy a file to a given destination, overwriting it if it exists.

    Missing parent directories of dst are created first.

    Raises:
        OSError: If src is missing or unreadable, or dst cannot be written.
    """
    parent_dir = get_parent_dir(dst)
    if parent_dir and not exists(parent_dir):
        create_dir(parent_dir)
    fs.copy_file_bytes(src, dst)


def copy_files(pairs, progress: bool = False) -> None:
    """
    Copy a list of (src, dst) pairs, one after the other.

    Args:
        pairs: Iterable of (src, dst) tuples.
        progress: Show a progress bar.
    """
    for src, dst in tqdm(pairs, unit="file", disable=not progress):
        copy_file(src, dst)


def copy_dir(src, dst, ignore_names=None) -> None:
    """
    Recursively copy the content of src into dst.

    The directory structure is reproduced (empty directories included) and
    existing files in dst are overwritten. Names in ignore_names are skipped
    at every depth. Symlinks are recreated with the same target, not followed.

    Raises:
        ValueError: If dst is src or lies inside it.
        OSError: If src is not a readable directory or a copy fails.
    """
    src = os.fspath(src)
    dst = os.fspath(dst)
    src_real = os.path.realpath(src)
    dst_real = os.path.realpath(dst)
    if os.path.commonpath([src_real, dst_real]) == src_real:
        raise ValueError(f"Cannot copy {src} into itself ({dst})")
    criteria = FilterCriteria(
        ignore_names=settings.ignore_names if ignore_names is None else ignore_names
    )

    create_dir(dst)
    copied = 0
    for entry in iter_entries(src, recursive=True, criteria=criteria):
        target = os.path.join(dst, os.path.relpath(entry.path, src))
        if entry.is_dir:
            create_dir(target)
        elif fs.is_symlink(fs.stat(entry.path)):
            fs.copy_symlink(entry.path, target)
        else:
            copy_file(entry.path, target)
            copied += 1

    print_info(f"Copied {copied} files from {src} to {dst}")


def rename(src, dst) -> None:
    """
    Rename (move) a file or directory, creating dst's parent if needed.

    Raises:
        OSError: If src does not exist or the move fails.
    """
    if not os.path.lexists(src):
        raise FileNotFoundError(f"Source not found: {src}")

    parent_dir = get_parent_dir(dst)
    if parent_dir:
        create_dir(parent_dir)
    shutil.move(os.fspath(src), os.fspath(dst))


def run_file(file_path, *args, cwd=None) -> subprocess.CompletedProcess:
    """
    Execute a file and wait for it to finish.

    Python scripts (.py) are run with the current interpreter, anything else is
    executed directly. Output is captured as text.

    Raises:
        FileNotFoundError: If the file does not exist.
        subprocess.CalledProcessError: If it exits with a non-zero status.
    """
    file_path = os.fspath(file_path)
    fs.stat(file_path)

    if file_path.endswith(".py"):
        cmd = [sys.executable, file_path, *args]
    else:
        cmd = [file_path, *args]

    print_info(f"Running {' '.join(cmd)}")
    return subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, check=True)
