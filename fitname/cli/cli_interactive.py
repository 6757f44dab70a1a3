"""
cli_interactive.py - Interactive CLI

Provides a menu-style interactive interface
"""

import os
from dataclasses import replace
from pathlib import Path
from typing import Optional

from ..core import (
    plan_truncation, execute_rename, validate_plan,
    RenamePlan, TruncateOptions
)


def clear_screen():
    """Clear screen"""
    os.system('cls' if os.name == 'nt' else 'clear')


def print_header(title: str):
    """Print header"""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)
    print()


def input_directory(prompt: str = "Please enter directory path") -> Optional[Path]:
    """Input and validate directory"""
    while True:
        path_str = input(f"{prompt} (q to return): ").strip()
        if path_str.lower() == 'q':
            return None

        path = Path(path_str).expanduser()
        if path.is_dir():
            return path
        else:
            print(f"Error: Directory does not exist: {path}")


def input_bool(prompt: str, default: bool = False) -> bool:
    """Input boolean value"""
    default_str = "Y/n" if default else "y/N"
    value = input(f"{prompt} ({default_str}): ").strip().lower()
    if not value:
        return default
    return value == 'y'


def input_int(prompt: str, default: int = 0, min_val: int = 0) -> int:
    """Input integer"""
    while True:
        value = input(f"{prompt} [{default}]: ").strip()
        if not value:
            return default
        try:
            num = int(value)
            if num < min_val:
                print(f"Value cannot be less than {min_val}")
                continue
            return num
        except ValueError:
            print("Please enter a valid integer")


def input_options(defaults: TruncateOptions) -> TruncateOptions:
    """Ask for truncation options"""
    max_len = input_int("Maximum name length in bytes", default=defaults.max_len, min_val=1)
    secondary_ext_len = input_int("Longest secondary extension (0=disable)",
                                  default=defaults.secondary_ext_len, min_val=0)
    word_boundaries = input_bool("Cut at word boundaries", default=defaults.word_boundaries)
    return replace(defaults, max_len=max_len, secondary_ext_len=secondary_ext_len,
                   word_boundaries=word_boundaries)


def show_plan(file_plan: RenamePlan, dir_plan: RenamePlan) -> int:
    """Display plan, return number of renames"""
    ops = file_plan.valid_ops + dir_plan.valid_ops
    print(f"\nWill perform {len(ops)} rename operations:")
    print("-" * 70)
    for op in ops[:15]:
        kind = " [dir]" if op.is_dir else ""
        print(f"  {op.src.name:<30} -> {op.dst.name}{kind}")
    if len(ops) > 15:
        print(f"  ... and {len(ops) - 15} more operations")
    print("-" * 70)

    messages = file_plan.errors + dir_plan.errors + file_plan.warnings + dir_plan.warnings
    combined = RenamePlan(options=file_plan.options)
    combined.extend(file_plan)
    combined.extend(dir_plan)
    messages += validate_plan(combined)
    if messages:
        print("Warnings:")
        for msg in messages:
            print(f"  - {msg}")

    return len(ops)


def menu_truncate(defaults: TruncateOptions, preview_only: bool):
    """Truncate names menu"""
    print_header("Preview Truncation" if preview_only else "Truncate Names")

    # Input directory
    directory = input_directory("Please enter directory")
    if directory is None:
        return

    options = input_options(defaults)

    print(f"\nScanning {directory} ...")
    file_plan, dir_plan = plan_truncation([directory], options)

    count = show_plan(file_plan, dir_plan)
    if count == 0:
        print("No names need truncating")
        input("Press Enter to return...")
        return

    if preview_only:
        input("\nPress Enter to return...")
        return

    # Confirm execution
    print()
    if not input_bool("Confirm execution", default=False):
        print("Cancelled")
        input("Press Enter to return...")
        return

    # Execute, files before directories
    print("\nExecuting...")
    for plan in (file_plan, dir_plan):
        result = execute_rename(plan, dry_run=False, log_dir=options.log_dir)
        print()
        print(result.summary())

    input("\nPress Enter to return...")


def interactive_mode(defaults: Optional[TruncateOptions] = None) -> int:
    """Interactive mode main loop"""
    if defaults is None:
        defaults = TruncateOptions()

    while True:
        clear_screen()
        print_header("Name Truncation Tool")

        print("Please select function:")
        print()
        print("  1. Preview truncation")
        print("  2. Truncate names")
        print()
        print("  q. Exit")
        print()

        choice = input("Please select (1/2/q): ").strip().lower()

        if choice == 'q':
            print("Goodbye!")
            return 0
        elif choice == '1':
            menu_truncate(defaults, preview_only=True)
        elif choice == '2':
            menu_truncate(defaults, preview_only=defaults.dry_run)
        else:
            print("Invalid choice")
            input("Press Enter to continue...")


if __name__ == "__main__":
    interactive_mode()
