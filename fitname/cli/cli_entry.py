"""
cli_entry.py - CLI Entry Point

Supports:
- Command-line argument mode
- Interactive mode (no paths given)
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..core import (
    TruncateOptions, RenamePlan, RenameResult, DEFAULT_MAX_LEN, DEFAULT_SECONDARY_EXT_LEN,
    plan_truncation, validate_plan, execute_rename,
)
from .cli_interactive import interactive_mode


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="fitname",
        description="Rename files and directories to fit length limits.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  python -m fitname.cli.cli_entry

  # Preview what would be renamed
  python -m fitname.cli.cli_entry ./backup --dry-run

  # Truncate to 100 bytes, keep .tar.gz style extensions, cut at spaces
  python -m fitname.cli.cli_entry ./backup --max-len 100 -w
"""
    )

    parser.add_argument("path", nargs="*", type=Path,
                        help="Paths to rename (recursively, if directories)")
    parser.add_argument("--max-len", type=int, default=DEFAULT_MAX_LEN,
                        help="Length to truncate to, in bytes (default chosen for rclone name encryption)")
    parser.add_argument("--secondary-ext-len", type=int, default=DEFAULT_SECONDARY_EXT_LEN,
                        help="Longest secondary extension to preserve, like tar in .tar.gz (0 disables)")
    parser.add_argument("--word-boundaries", "-w", action="store_true",
                        help="Cut at the last space when it loses few bytes")
    parser.add_argument("--dry-run", "-n", action="store_true",
                        help="Don't actually rename files. Just print.")
    parser.add_argument("--log-dir", type=Path, default=None,
                        help="Save JSON logs of the plan and result to this directory")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def print_plan_messages(plan: RenamePlan) -> None:
    """Print plan warnings and errors to stderr"""
    for err in plan.errors:
        print(f"Error: {err}", file=sys.stderr)
    for warn in plan.warnings:
        print(f"Warning: {warn}", file=sys.stderr)


def run_truncation(paths: List[Path], options: TruncateOptions) -> int:
    """
    Plan and apply truncation for all paths

    Files are renamed first, then directories (deepest first).

    Returns:
        Exit status
    """
    file_plan, dir_plan = plan_truncation(paths, options)

    print_plan_messages(file_plan)
    print_plan_messages(dir_plan)

    combined = RenamePlan(options=options)
    combined.extend(file_plan)
    combined.extend(dir_plan)
    for problem in validate_plan(combined):
        print(f"Warning: {problem}", file=sys.stderr)

    def progress_callback(current: int, total: int, msg: str):
        print(msg)

    result = RenameResult()
    for plan in (file_plan, dir_plan):
        result.merge(execute_rename(
            plan,
            dry_run=options.dry_run,
            progress_callback=progress_callback,
            log_dir=options.log_dir,
        ))

    if options.dry_run:
        print(f"\n[Preview mode] {result.success_count} names would be truncated")
    else:
        print()
        print(result.summary())

    if result.failed_count > 0 or file_plan.errors or dir_plan.errors:
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = TruncateOptions(
            max_len=args.max_len,
            secondary_ext_len=args.secondary_ext_len,
            word_boundaries=args.word_boundaries,
            dry_run=args.dry_run,
            log_dir=args.log_dir,
        )
    except ValueError as e:
        parser.error(str(e))

    if not args.path:
        # No paths, enter interactive mode
        return interactive_mode(options)

    return run_truncation(args.path, options)


if __name__ == "__main__":
    sys.exit(main())
