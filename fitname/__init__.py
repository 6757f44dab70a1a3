"""
fitname - Rename files and directories to fit name length limits
"""

__version__ = "1.0.0"
