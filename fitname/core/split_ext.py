"""
split_ext.py - Extension Splitting

Splits a filename into raw stem, secondary extension and primary extension.
All lengths are measured in bytes.
"""

from typing import Optional, Tuple

from .models_fs import NameParts, DEFAULT_SECONDARY_EXT_LEN

SEPARATOR = b"/"


def _split_last_dot(name: bytes) -> Tuple[bytes, Optional[bytes]]:
    """
    Split at the last dot

    Everything after the last dot is the extension, even when the dot
    leads the name (".bashrc" splits into "" and "bashrc"). A dot is
    ignored when the part before it contains a path separator.

    Returns:
        (stem, extension or None)
    """
    stem, dot, ext = name.rpartition(b".")
    if not dot or SEPARATOR in stem:
        return name, None
    return stem, ext


def is_valid_text(raw: bytes) -> bool:
    """Check if bytes decode as UTF-8"""
    try:
        raw.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def split_name(name: bytes, secondary_ext_len: int = DEFAULT_SECONDARY_EXT_LEN) -> NameParts:
    """
    Split filename into its parts

    Args:
        name: Raw filename bytes
        secondary_ext_len: Longest secondary extension (bytes) still recognized, 0 disables

    Returns:
        NameParts whose join() gives back the original name
    """
    # Undecodable names keep everything in the stem
    if not is_valid_text(name):
        return NameParts(raw_stem=name)

    stem, primary = _split_last_dot(name)
    if primary is None:
        return NameParts(raw_stem=name)

    secondary = None
    if secondary_ext_len > 0:
        inner_stem, candidate = _split_last_dot(stem)
        if candidate is not None and len(candidate) <= secondary_ext_len:
            stem, secondary = inner_stem, candidate

    return NameParts(raw_stem=stem, secondary_ext=secondary, primary_ext=primary)
