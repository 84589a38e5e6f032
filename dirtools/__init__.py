"""
dirtools
========

Small filesystem helpers: recursive listing with filters, size-based
filtering, tree removal, copying and path/name string manipulation.
"""

__version__ = "1.0.0"

from .models import Entry, EntryKind, FilterCriteria, SizeBounds, SizeUnit
from .walker import (
    list_entries,
    iter_entries,
    is_dir,
    get_dir_content,
    get_dirs,
    find_files_in_path,
)
from .sizes import get_file_size, filter_by_size, filter_files_by_size
from .operations import (
    create_dir,
    exists,
    remove_file,
    remove_files,
    remove_tree,
    copy_file,
    copy_files,
    copy_dir,
    rename,
    run_file,
)
from .paths import (
    get_parent_dir,
    join_path,
    get_file_name_from_path,
    strip_extension,
    file_paths_to_names,
    relative_path,
    relative_paths,
)

__all__ = [
    "Entry",
    "EntryKind",
    "FilterCriteria",
    "SizeBounds",
    "SizeUnit",
    "list_entries",
    "iter_entries",
    "is_dir",
    "get_dir_content",
    "get_dirs",
    "find_files_in_path",
    "get_file_size",
    "filter_by_size",
    "filter_files_by_size",
    "create_dir",
    "exists",
    "remove_file",
    "remove_files",
    "remove_tree",
    "copy_file",
    "copy_files",
    "copy_dir",
    "rename",
    "run_file",
    "get_parent_dir",
    "join_path",
    "get_file_name_from_path",
    "strip_extension",
    "file_paths_to_names",
    "relative_path",
    "relative_paths",
]
