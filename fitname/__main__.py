#!/usr/bin/env python3
"""
Name Truncation Tool - Main Entry

Supports:
- GUI mode (default startup)
- CLI mode (--cli or -c parameter)

Usage:
    python -m fitname                          # GUI mode (default)
    python -m fitname --cli                    # CLI interactive mode
    python -m fitname -c ./dir                 # CLI command mode
    python -m fitname -c ./dir --max-len 100 -n  # CLI preview
"""

import sys


def main():
    """Main entry point"""
    # Check if CLI should be started
    if "--cli" in sys.argv or "-c" in sys.argv:
        # Remove --cli parameter
        sys.argv = [arg for arg in sys.argv if arg not in ("--cli", "-c")]

        # CLI mode
        from .cli import main as cli_main
        return cli_main()

    # Default to starting GUI
    try:
        from .gui import main as gui_main
    except ImportError as e:
        print(f"Error: Unable to start GUI, please ensure PySide6 is installed")
        print(f"Detailed error: {e}")
        print("\nInstall command: pip install PySide6")
        print("\nTo use CLI mode, run:")
        print("    python -m fitname --cli")
        print("or  python -m fitname -c")
        return 1
    return gui_main()


if __name__ == "__main__":
    sys.exit(main())
