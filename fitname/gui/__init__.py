"""
gui - PySide6 Interface for Name Truncation Tool
"""

from .gui_entry import main

__all__ = ["main"]
