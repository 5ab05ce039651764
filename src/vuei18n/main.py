#!/usr/bin/env python3
"""
Vue i18n Tools

Command line entry point. Two independent actions are available:

- ``i18n:scan`` collects t()/$t() keys from .js/.ts/.vue/.jsx files and
  reconciles them with a flat JSON key dictionary.
- ``update-i18n-default-value`` copies dictionary values into $t() calls found
  in v-html, :placeholder and :label attributes.
"""

import argparse
import sys

from vuei18n.actions.scan import setup_scan_parser
from vuei18n.actions.update_default_value import setup_update_default_value_parser

EPILOG = """examples:
  vue-i18n-tools i18n:scan -o src/locales/default.json -d src
  vue-i18n-tools update-i18n-default-value -f src/locales/default.json -d src --dry-run
"""


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="vue-i18n-tools",
        description="Keep Vue i18n key dictionaries in sync with t()/$t() calls and inject default values into templates",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="action", help="Action to perform", required=True)

    setup_scan_parser(subparsers)
    setup_update_default_value_parser(subparsers)

    return parser


def main(argv=None) -> int:
    """
    Parse arguments and dispatch to the selected action.

    Args:
        argv: Argument list without the program name (default: sys.argv[1:])

    Returns:
        Exit code: 0 on success, 1 on a fatal error, 130 when interrupted
    """
    args = create_parser().parse_args(argv)

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130
    except Exception as e:
        # Dictionary, directory and file I/O failures all end the run here
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
