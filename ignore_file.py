#!/usr/bin/env python3
"""
Ignore file maintenance

Appends removal patterns to a line-oriented ignore file such as .gitignore.
Existing lines are never reordered or rewritten, and the file is only
written when at least one pattern was missing.
"""

import pathlib
from dataclasses import dataclass, field

from cruft_scanner import CleanupError


class IgnoreFileError(CleanupError):
    """The ignore file cannot be read or written"""


@dataclass
class IgnoreUpdate:
    path: pathlib.Path
    added: list[str] = field(default_factory=list)

    @property
    def updated(self) -> bool:
        return bool(self.added)


def read_ignore_lines(path: pathlib.Path) -> list[str]:
    """Read the ignore file's lines; a missing file has none

    Raises:
        IgnoreFileError: If the file exists but cannot be read
    """
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as e:
        raise IgnoreFileError(f"Failed to read {path}: {getattr(e, 'strerror', None) or e}") from e


def missing_patterns(lines: list[str], patterns) -> list[str]:
    """Patterns not present as an exact line, in pattern order and without repeats"""
    existing = set(lines)
    missing = []
    for pattern in patterns:
        if pattern not in existing:
            missing.append(pattern)
            existing.add(pattern)
    return missing


def update_ignore_file(path: pathlib.Path, patterns) -> IgnoreUpdate:
    """Append every pattern not yet listed in the ignore file

    Raises:
        IgnoreFileError: If the file cannot be read or written
    """
    lines = read_ignore_lines(path)
    update = IgnoreUpdate(path=path, added=missing_patterns(lines, patterns))
    if not update.updated:
        return update

    content = "\n".join(lines + update.added) + "\n"
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise IgnoreFileError(f"Failed to update {path}: {e.strerror or e}") from e
    return update
