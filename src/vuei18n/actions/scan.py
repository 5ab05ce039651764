"""
Scan action for collecting i18n keys and updating the key dictionary.
"""

import sys
from pathlib import Path
from typing import List, Optional

from vuei18n.mods.key_scanner import KeyScanner, reconcile
from vuei18n.utils.dictionary_store import load_dictionary, save_dictionary


def setup_scan_parser(subparsers) -> None:
    """
    Set up the i18n:scan command parser.

    Args:
        subparsers: The subparsers object from argparse
    """
    scan_parser = subparsers.add_parser(
        "i18n:scan",
        help="Scan and update i18n keys",
        description="Scans files for i18n keys and updates a specified JSON file, removing unused keys.",
    )
    scan_parser.add_argument("-o", "--output", type=Path, required=True, help="Output JSON file for i18n keys")
    scan_parser.add_argument("-d", "--dir", type=Path, required=True, dest="directory", help="Root directory to scan")
    scan_parser.add_argument(
        "-e", "--exclude", action="append", dest="exclude", help="Directory names to exclude (can be specified multiple times, default: none)"
    )
    scan_parser.add_argument("--dry-run", action="store_true", dest="dry_run", help="Report changes without writing the JSON file")
    scan_parser.set_defaults(func=run_scan)


def run_scan(args) -> int:
    """
    Run the scan action.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    return scan_keys(
        output_path=args.output,
        directory=args.directory,
        exclude_dirs=args.exclude,
        dry_run=args.dry_run,
    )


def scan_keys(output_path: Path, directory: Path, exclude_dirs: Optional[List[str]] = None, dry_run: bool = False) -> int:
    """
    Scan a source tree for i18n keys and reconcile them with the dictionary file.

    A missing dictionary file is treated as empty. A file that exists but
    cannot be parsed aborts the scan so that it is never overwritten.

    Args:
        output_path: Dictionary JSON file, read and then rewritten
        directory: Root directory to scan
        exclude_dirs: Directory names to exclude
        dry_run: Report changes without writing the dictionary

    Returns:
        Exit code (0 for success)

    Raises:
        ValueError: If the dictionary is invalid or the directory is unusable
        OSError: If the dictionary cannot be read or written
    """
    try:
        existing = load_dictionary(output_path)
    except FileNotFoundError:
        existing = {}

    scanner = KeyScanner(existing)
    found = scanner.scan_directory(directory, exclude_dirs)
    print(f"Scanned {scanner.processed_count} files", file=sys.stderr)
    if scanner.skipped_files:
        print(f"Warning: {len(scanner.skipped_files)} files could not be read", file=sys.stderr)

    result = reconcile(found, existing)

    if dry_run:
        print(f"Dry run: {output_path} was not written", file=sys.stderr)
    else:
        save_dictionary(result.dictionary, output_path)

    print(f"Found {result.key_count} keys ({len(result.added_keys)} added, {len(result.deleted_keys)} deleted)", file=sys.stderr)

    print("Deleted keys:")
    for key in result.deleted_keys:
        print(key)

    print("i18n scan and update complete.")
    return 0
