#!/usr/bin/env python3
"""
dirtools - CLI Entry Point
==========================

Usage:
    python -m dirtools ls /path/to/dir -r --no-dirs --min-size 1000
    python -m dirtools rm /path/to/dir
    python -m dirtools cp src.txt backup/dst.txt
    python -m dirtools mv old_name.txt new/name.txt
    python -m dirtools size *.log --unit mb --max-size 10
    python -m dirtools run script.py arg1 arg2
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path

from .config import settings
from .models import FilterCriteria, SizeUnit
from .operations import copy_dir, copy_file, remove_tree, remove_file, rename, run_file
from .sizes import filter_files_by_size, get_file_size
from .utils import console, print_entries_table, print_error, print_success, print_warning
from .walker import is_dir, iter_entries

UNITS = {"b": SizeUnit.BYTES, "kb": SizeUnit.KB, "mb": SizeUnit.MB}


# =============================================================================
# Commands
# =============================================================================

def cmd_ls(args) -> int:
    """List a directory with filters."""
    ignore_names = settings.ignore_names | set(args.ignore or [])
    try:
        criteria = FilterCriteria(
            include_files=not args.no_files,
            include_dirs=not args.no_dirs,
            ignore_names=ignore_names,
            size_min=args.min_size,
            size_max=args.max_size,
        )
        entries = list(iter_entries(args.root, recursive=args.recursive, criteria=criteria))
    except ValueError as e:
        print_error(str(e))
        return 2
    except OSError as e:
        print_error(str(e))
        return 1

    if args.plain:
        for entry in entries:
            print(entry.path)
    else:
        print_entries_table(entries, title=str(args.root))
    return 0


def cmd_rm(args) -> int:
    """Remove a file or a whole tree."""
    try:
        if not os.path.lexists(args.path):
            print_warning(f"Nothing to remove: {args.path}")
            return 0
        if is_dir(args.path):
            remove_tree(args.path)
        else:
            remove_file(args.path)
    except OSError as e:
        print_error(str(e))
        return 1

    print_success(f"Removed {args.path}")
    return 0


def cmd_cp(args) -> int:
    """Copy a file, or a directory recursively."""
    try:
        if is_dir(args.src):
            copy_dir(args.src, args.dst)
        else:
            copy_file(args.src, args.dst)
    except ValueError as e:
        print_error(str(e))
        return 2
    except OSError as e:
        print_error(str(e))
        return 1

    print_success(f"Copied {args.src} -> {args.dst}")
    return 0


def cmd_mv(args) -> int:
    """Rename or move a file or directory."""
    try:
        rename(args.src, args.dst)
    except OSError as e:
        print_error(str(e))
        return 1

    print_success(f"Moved {args.src} -> {args.dst}")
    return 0


def cmd_size(args) -> int:
    """Print file sizes, optionally filtered by bounds."""
    unit = UNITS[args.unit]
    try:
        paths = filter_files_by_size(args.paths, args.min_size, args.max_size, unit)
        for path in paths:
            console.print(f"{get_file_size(path, unit):>14} {args.unit.upper():<2}  {path}", highlight=False)
    except ValueError as e:
        print_error(str(e))
        return 2
    except OSError as e:
        print_error(str(e))
        return 1
    return 0


def cmd_run(args) -> int:
    """Run a script and relay its output."""
    try:
        result = run_file(args.file, *args.args)
    except subprocess.CalledProcessError as e:
        sys.stdout.write(e.stdout or "")
        sys.stderr.write(e.stderr or "")
        print_error(f"{args.file} exited with status {e.returncode}")
        return e.returncode
    except OSError as e:
        print_error(str(e))
        return 1

    sys.stdout.write(result.stdout)
    sys.stderr.write(result.stderr)
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirtools",
        description="dirtools - Filesystem helpers for listing, copying and removing files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print [INFO] messages")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- LS command ---
    ls_parser = subparsers.add_parser("ls", help="List directory content")
    ls_parser.add_argument("root", type=Path, help="Directory to list")
    ls_parser.add_argument("-r", "--recursive", action="store_true",
                           help="Include inner directories")
    ls_parser.add_argument("--no-files", action="store_true", help="Leave files out")
    ls_parser.add_argument("--no-dirs", action="store_true", help="Leave directories out")
    ls_parser.add_argument("--ignore", action="append", metavar="NAME",
                           help="Base name to ignore (repeatable)")
    ls_parser.add_argument("--min-size", type=int, metavar="BYTES",
                           help="Only include files of at least N bytes")
    ls_parser.add_argument("--max-size", type=int, metavar="BYTES",
                           help="Only include files of at most N bytes")
    ls_parser.add_argument("--plain", action="store_true",
                           help="Print one path per line instead of a table")
    ls_parser.set_defaults(func=cmd_ls)

    # --- RM command ---
    rm_parser = subparsers.add_parser("rm", help="Remove a file or directory tree")
    rm_parser.add_argument("path", type=Path, help="Path to remove")
    rm_parser.set_defaults(func=cmd_rm)

    # --- CP command ---
    cp_parser = subparsers.add_parser("cp", help="Copy a file or directory")
    cp_parser.add_argument("src", type=Path, help="Source path")
    cp_parser.add_argument("dst", type=Path, help="Destination path")
    cp_parser.set_defaults(func=cmd_cp)

    # --- MV command ---
    mv_parser = subparsers.add_parser("mv", help="Rename or move a path")
    mv_parser.add_argument("src", type=Path, help="Source path")
    mv_parser.add_argument("dst", type=Path, help="Destination path")
    mv_parser.set_defaults(func=cmd_mv)

    # --- SIZE command ---
    size_parser = subparsers.add_parser("size", help="Show and filter file sizes")
    size_parser.add_argument("paths", nargs="+", type=Path, help="Files to measure")
    size_parser.add_argument("--unit", choices=list(UNITS.keys()), default="b",
                             help="Size unit (default: b)")
    size_parser.add_argument("--min-size", type=float, help="Lower bound, in --unit")
    size_parser.add_argument("--max-size", type=float, help="Upper bound, in --unit")
    size_parser.set_defaults(func=cmd_size)

    # --- RUN command ---
    run_parser = subparsers.add_parser("run", help="Execute a file")
    run_parser.add_argument("file", type=Path, help="File to run")
    run_parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments for the file")
    run_parser.set_defaults(func=cmd_run)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.verbose:
        settings.verbose = True

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
