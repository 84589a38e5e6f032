"""
Filesystem primitives used by the walker and the operations.

Everything that touches the disk goes through these few functions, so tests can
patch a single seam.
"""

import fnmatch
import os
import shutil
from stat import S_ISDIR, S_ISLNK


def stat(path) -> os.stat_result:
    """
    Metadata query for a path. Symlinks are not followed.

    Raises:
        OSError: If the path is missing or unreadable.
    """
    return os.lstat(path)


def is_directory(st: os.stat_result) -> bool:
    """Check if a stat result describes a directory."""
    return S_ISDIR(st.st_mode)


def is_symlink(st: os.stat_result) -> bool:
    return S_ISLNK(st.st_mode)


def list_dir(path) -> list[str]:
    """
    Base names of the immediate children of a directory, in the order the OS
    returns them.

    Raises:
        NotADirectoryError: If path is not a directory.
        FileNotFoundError: If path does not exist.
    """
    return os.listdir(path)


def mkdir_all(path) -> None:
    """Create a directory and any missing ancestors. Existing directories are fine."""
    os.makedirs(path, exist_ok=True)


def unlink(path) -> None:
    """Remove a file; a missing file is not an error."""
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass


def rmdir(path) -> None:
    """Remove an empty directory; a missing directory is not an error."""
    try:
        os.rmdir(path)
    except FileNotFoundError:
        pass


def copy_file_bytes(src, dst) -> None:
    """Byte-for-byte copy, overwriting dst."""
    shutil.copyfile(src, dst)


def copy_symlink(src, dst) -> None:
    """Recreate the symlink src at dst with the same target, replacing dst."""
    unlink(dst)
    os.symlink(os.readlink(src), dst, target_is_directory=os.path.isdir(src))


def match(name: str, pattern: str) -> bool:
    """Shell-style pattern match on a base name."""
    return fnmatch.fnmatchcase(name, pattern)
