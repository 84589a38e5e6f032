"""
File size lookup and size-based filtering.
"""

from collections.abc import Mapping

from . import fs
from .models import SizeBounds, SizeUnit


def get_file_size(file_path, unit: SizeUnit = SizeUnit.BYTES) -> float | int:
    """
    Return the size of a file.

    Args:
        file_path: The file to measure.
        unit: BYTES returns an int, KB and MB return floats (decimal units).

    Raises:
        OSError: If the file cannot be stat'ed.
    """
    size = fs.stat(file_path).st_size
    if unit is SizeUnit.BYTES:
        return size
    return size / float(unit.value)


def filter_by_size(
    paths,
    sizes: Mapping,
    size_min: float | None = None,
    size_max: float | None = None
) -> list:
    """
    Keep the paths whose size lies within [size_min, size_max].

    Pure function, nothing is read from disk. Either bound may be None; when
    both are set a path has to satisfy both.

    Args:
        paths: The paths to filter, in the order to keep.
        sizes: Already computed size for every path.
        size_min: Inclusive lower bound.
        size_max: Inclusive upper bound.

    Returns:
        The subsequence of paths that pass.

    Raises:
        KeyError: If a path has no entry in sizes.
        ValueError: If a bound is negative or size_min > size_max.
    """
    bounds = SizeBounds(size_min, size_max)
    return [p for p in paths if bounds.contains(sizes[p])]


def filter_files_by_size(
    file_paths,
    size_min: float | None = None,
    size_max: float | None = None,
    unit: SizeUnit = SizeUnit.BYTES
) -> list:
    """
    Filter a list of files by their size on disk.

    Bounds are expressed in the given unit.

    Returns:
        A list of all file paths whose size is within the bounds.
    """
    file_paths = list(file_paths)
    sizes = {p: get_file_size(p, unit) for p in file_paths}
    return filter_by_size(file_paths, sizes, size_min, size_max)
