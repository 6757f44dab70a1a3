"""
text_trunc.py - Byte-Safe Truncation

Provides UTF-8 safe byte truncation with optional word boundary snapping,
for file stems and whole directory names.
"""

WORD_BOUNDARY_TOLERANCE = 10    # Max bytes given up to end on a whole word


def longest_valid_prefix(raw: bytes) -> bytes:
    """
    Drop trailing bytes until the rest decodes as UTF-8

    Args:
        raw: Byte sequence, possibly cut inside a code point

    Returns:
        Longest prefix that is valid text (possibly empty)
    """
    try:
        raw.decode("utf-8")
    except UnicodeDecodeError as e:
        # Everything before the first bad byte is valid, anything longer is not
        return raw[:e.start]
    return raw


def snap_to_word(truncated: bytes, budget: int) -> bytes:
    """
    Cut at the last space if that loses little

    Args:
        truncated: Already truncated, valid text
        budget: Byte budget the truncation was made for

    Returns:
        Text ending before its last space, or unchanged
    """
    space = truncated.rfind(b" ")
    if space > 0 and space > budget - WORD_BOUNDARY_TOLERANCE:
        return truncated[:space]
    return truncated


def truncate_stem(stem: bytes, budget: int, word_boundaries: bool = False) -> bytes:
    """
    Truncate stem to at most budget bytes without splitting a code point

    Args:
        stem: Raw stem bytes
        budget: Maximum byte length
        word_boundaries: Whether to drop a trailing partial word

    Returns:
        Truncated stem (unchanged if it already fits)
    """
    if len(stem) <= budget:
        return stem

    truncated = longest_valid_prefix(stem[:max(budget, 0)])

    if word_boundaries:
        truncated = snap_to_word(truncated, budget)

    return truncated


def truncate_dir_name(name: bytes, max_len: int, word_boundaries: bool = False) -> bytes:
    """
    Truncate directory name (no extension handling, the whole name is the stem)

    Args:
        name: Raw directory name bytes
        max_len: Maximum byte length
        word_boundaries: Whether to drop a trailing partial word

    Returns:
        Truncated name
    """
    return truncate_stem(name, max_len, word_boundaries)
