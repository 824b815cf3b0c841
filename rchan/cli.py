"""
Command-line entry point.

Usage:
    rchan                # Compare local PKGBUILDs with their remote copies
    rchan build          # Build every PKGBUILD directory with makepkg
    rchan build --debug  # Build with makepkg output shown live
    rchan -C path        # Operate on another directory
"""

import argparse
import sys
from pathlib import Path

from rchan import __version__
from rchan.builder import run_build
from rchan.errors import BuildSettingsError
from rchan.report import print_report
from rchan.scanner import scan_directory


def build_parser():
    parser = argparse.ArgumentParser(prog="rchan", description='rchan - PKGBUILD update checker and batch builder')
    parser.add_argument('command', nargs='?', choices=['build'], help='Build all PKGBUILD directories instead of checking for updates')
    parser.add_argument('-C', '--directory', type=Path, default=None, help='Directory to operate on (default: current directory)')
    parser.add_argument('--debug', action='store_true', help='Show makepkg output while building')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def run_scan(base):
    """Check every package under base and print the report."""
    print("rchan - PKGBUILD update checker")
    print("=" * 50)
    print(f"Scanning: {base}\n")

    results = scan_directory(base)

    if not results:
        print("No subdirectories with rchan.yaml + PKGBUILD found.")
        return results

    print_report(results)
    return results


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    base = args.directory if args.directory is not None else Path.cwd()

    try:
        if args.command == 'build':
            run_build(base, debug=args.debug)
        else:
            run_scan(base)
    except (OSError, BuildSettingsError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Per-package failures are part of the report, not of the exit status
    return 0


if __name__ == "__main__":
    sys.exit(main())
