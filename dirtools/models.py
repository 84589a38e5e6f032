"""
Data types shared by the walker and the size filters.
"""

from dataclasses import dataclass, field
from enum import Enum

from .config import settings


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"


class SizeUnit(Enum):
    """Decimal size units, as reported by get_file_size."""
    BYTES = 1
    KB = 1000
    MB = 1000000


@dataclass(frozen=True)
class Entry:
    """A path classified at traversal time."""
    path: str
    kind: EntryKind
    size: int = 0

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class SizeBounds:
    """
    Inclusive size range. Either bound may be None (no constraint).

    When both are set a size must satisfy both (AND logic).
    """
    size_min: float | None = None
    size_max: float | None = None

    def __post_init__(self):
        for bound in (self.size_min, self.size_max):
            if bound is not None and bound < 0:
                raise ValueError(f"Size bound must be non-negative, got {bound}")
        if (self.size_min is not None and self.size_max is not None
                and self.size_min > self.size_max):
            raise ValueError(
                f"size_min ({self.size_min}) is larger than size_max ({self.size_max})"
            )

    @property
    def is_set(self) -> bool:
        return self.size_min is not None or self.size_max is not None

    def contains(self, size: float) -> bool:
        if self.size_min is not None and size < self.size_min:
            return False
        if self.size_max is not None and size > self.size_max:
            return False
        return True


@dataclass(frozen=True)
class FilterCriteria:
    """
    Inclusion filter applied to every entry produced by a traversal.

    All specified criteria must match. Size bounds only apply to files.
    """
    include_files: bool = True
    include_dirs: bool = True
    ignore_names: frozenset[str] = field(default_factory=lambda: settings.ignore_names)
    size_min: int | None = None
    size_max: int | None = None

    def __post_init__(self):
        # Accept any iterable of names
        object.__setattr__(self, "ignore_names", frozenset(self.ignore_names))
        # Raises early on invalid bounds
        SizeBounds(self.size_min, self.size_max)

    @property
    def bounds(self) -> SizeBounds:
        return SizeBounds(self.size_min, self.size_max)

    def is_ignored(self, name: str) -> bool:
        return name in self.ignore_names

    def accepts(self, entry: Entry) -> bool:
        """Check the kind and size criteria for an already classified entry."""
        if entry.is_dir:
            return self.include_dirs
        if not self.include_files:
            return False
        return self.bounds.contains(entry.size)
