#!/usr/bin/env python3
"""
Auxiliary utility functions for Katharsis

Size parsing and formatting plus path display helpers shared by the
scanner, the deletion step and the console report.
"""

import pathlib
from typing import Optional, Union

_SIZE_MULTIPLIERS = {"B": 1, "K": 1024, "M": 1024**2, "G": 1024**3}


def parse_size(value: str) -> int:
    """Parse a human-readable size string like "50M" into bytes

    Args:
        value: Plain byte count or number with a B/K/M/G suffix (binary multiples);
            "50MB" and "50MiB" are read as "50M"

    Returns:
        Size in bytes

    Raises:
        ValueError: If the string is not a valid size
        OverflowError: If the number is infinite or too large
    """
    text = value.strip().upper()
    if text.endswith("IB"):
        text = text[:-2]
    elif len(text) > 1 and text.endswith("B") and text[-2] in "KMG":
        text = text[:-1]
    for suffix, mult in _SIZE_MULTIPLIERS.items():
        if text.endswith(suffix):
            return int(float(text[: -len(suffix)]) * mult)
    return int(text)


def format_bytes(size_bytes: int) -> str:
    """Format byte size into human-readable string

    Args:
        size_bytes: Size in bytes to format

    Returns:
        Formatted string like "1.2 GiB", "345 MiB", "12 KiB", or "789 B"
    """
    if size_bytes >= 1024**3:
        return f"{size_bytes / (1024**3):.1f} GiB"
    if size_bytes >= 1024**2:
        return f"{size_bytes / (1024**2):.1f} MiB"
    if size_bytes >= 1024:
        return f"{size_bytes / 1024:.1f} KiB"
    return f"{size_bytes} B"


def format_mebibytes(size_bytes: int) -> str:
    """Format byte size as whole mebibytes, e.g. "60 MB" (rounded down)"""
    return f"{size_bytes // 1024**2} MB"


def format_path_for_display(path: Union[str, pathlib.Path], home_path: Optional[str] = None) -> str:
    """Format file path for display by replacing home directory with ~

    Args:
        path: File path to format
        home_path: Home directory path (defaults to platform home)

    Returns:
        Path with home directory replaced by ~ if applicable
    """
    if home_path is None:
        home_path = str(pathlib.Path.home())

    path = str(path)
    if home_path in ("", "/"):
        return path
    if path == home_path or path.startswith(home_path + "/"):
        return "~" + path[len(home_path) :]
    return path


def format_threshold(size_bytes: int) -> str:
    """Format a size threshold, e.g. "50MB" for whole mebibytes, else "1.5 MiB" """
    if size_bytes and size_bytes % 1024**2 == 0:
        return f"{size_bytes // 1024**2}MB"
    return format_bytes(size_bytes)
