"""
Update action for injecting dictionary default values into translation calls.
"""

import sys
from pathlib import Path
from typing import List, Optional

from vuei18n.mods.call_rewriter import CallRewriter
from vuei18n.utils.dictionary_store import load_dictionary


def setup_update_default_value_parser(subparsers) -> None:
    """
    Set up the update-i18n-default-value command parser.

    Args:
        subparsers: The subparsers object from argparse
    """
    update_parser = subparsers.add_parser(
        "update-i18n-default-value",
        help="Update i18n default value",
        description="Add default values from a JSON dictionary to $t() calls in v-html, :placeholder and :label attributes.",
    )
    update_parser.add_argument("-f", "--from", type=Path, required=True, dest="source", help="File lang default value")
    update_parser.add_argument("-d", "--dir", type=Path, required=True, dest="directory", help="Root dir scan")
    update_parser.add_argument(
        "-e", "--exclude", action="append", dest="exclude", help="Directory names to exclude (can be specified multiple times, default: none)"
    )
    update_parser.add_argument("--dry-run", action="store_true", dest="dry_run", help="List files that would be modified without writing them")
    update_parser.set_defaults(func=run_update_default_value)


def run_update_default_value(args) -> int:
    """
    Run the update-i18n-default-value action.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    return update_default_values(
        source_path=args.source,
        directory=args.directory,
        exclude_dirs=args.exclude,
        dry_run=args.dry_run,
    )


def update_default_values(source_path: Path, directory: Path, exclude_dirs: Optional[List[str]] = None, dry_run: bool = False) -> int:
    """
    Rewrite translation calls under a directory to carry their default value.

    Args:
        source_path: Dictionary JSON file (must exist)
        directory: Root directory to rewrite
        exclude_dirs: Directory names to exclude
        dry_run: List files that would change without writing them

    Returns:
        Exit code (0 for success)

    Raises:
        FileNotFoundError: If the dictionary file does not exist
        ValueError: If the dictionary is invalid or the directory is unusable
        RewriteError: If a source file cannot be read or written
    """
    dictionary = load_dictionary(source_path)

    rewriter = CallRewriter(dictionary)
    modified_count = 0
    for file_path in rewriter.rewrite_directory_iter(directory, exclude_dirs, dry_run=dry_run):
        modified_count += 1
        if dry_run:
            print(f"Would modify file: {file_path}")
        else:
            print(f"Modified file: {file_path}")

    print(f"{modified_count} files modified", file=sys.stderr)
    print("Processing complete.")
    return 0
