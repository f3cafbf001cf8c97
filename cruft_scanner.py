#!/usr/bin/env python3
"""
Cruft Scanner

Walks a directory tree once and sorts what it finds into two independent
lists: regular files above the size threshold, and entries whose name
matches one of the removal patterns. Matched directories are pruned, so
nothing below them is ever classified.
"""

import os
import pathlib
import re
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from katharsis_config import CleanupConfig


class CleanupError(Exception):
    """Base class for errors that abort a cleanup run"""


class ScanError(CleanupError):
    """The scan root cannot be walked"""


@dataclass(frozen=True)
class RemovalPattern:
    """A literal name or a '*' wildcard pattern matched against base names"""

    text: str
    regex: Optional[re.Pattern] = field(default=None, compare=False)

    @classmethod
    def compile(cls, text: str) -> "RemovalPattern":
        if "*" not in text:
            return cls(text)
        # Only '*' is special; everything else matches literally
        expr = ".*".join(re.escape(part) for part in text.split("*"))
        return cls(text, re.compile(expr, re.DOTALL))

    @property
    def is_wildcard(self) -> bool:
        return self.regex is not None

    def matches(self, name: str) -> bool:
        if self.regex is None:
            return name == self.text
        return self.regex.fullmatch(name) is not None


def compile_patterns(patterns) -> list[RemovalPattern]:
    """Compile pattern strings, preserving their order"""
    return [RemovalPattern.compile(p) for p in patterns]


def match_pattern(name: str, patterns: list[RemovalPattern]) -> Optional[RemovalPattern]:
    """Return the first pattern matching *name*, or None"""
    for pattern in patterns:
        if pattern.matches(name):
            return pattern
    return None


@dataclass
class OversizedEntry:
    path: pathlib.Path
    size: int


@dataclass
class RemovalCandidate:
    path: pathlib.Path
    pattern: RemovalPattern
    is_dir: bool = False


@dataclass
class ScanResult:
    """Both classifications of one traversal, in traversal order"""

    root_path: pathlib.Path
    oversized: list[OversizedEntry] = field(default_factory=list)
    candidates: list[RemovalCandidate] = field(default_factory=list)
    warnings: list[tuple[pathlib.Path, str]] = field(default_factory=list)
    dirs_scanned: int = 0
    scan_duration: float = 0.0


def _error_message(error: OSError) -> str:
    return error.strerror or str(error)


def _list_directory(directory: pathlib.Path) -> list[os.DirEntry]:
    with os.scandir(directory) as it:
        return sorted(it, key=lambda e: e.name)


def _regular_file_size(entry: os.DirEntry) -> Optional[int]:
    """Size of a regular file, None for anything else (symlinks included)"""
    if not entry.is_file(follow_symlinks=False):
        return None
    return entry.stat(follow_symlinks=False).st_size


def scan_tree(config: CleanupConfig, progress_callback: Optional[Callable[[str], None]] = None) -> ScanResult:
    """Walk ``config.root`` and classify every reachable entry

    Directories are visited depth-first in name order. Per-entry errors are
    recorded in ``ScanResult.warnings`` and the walk carries on.

    Raises:
        ScanError: If the root does not exist, is not a directory or cannot be listed
    """
    root = config.root
    result = ScanResult(root_path=root)
    patterns = compile_patterns(config.patterns)
    start = time.monotonic()

    if not root.is_dir():
        reason = "not a directory" if root.exists() else "no such directory"
        raise ScanError(f"Cannot scan {root}: {reason}")
    try:
        root_entries = _list_directory(root)
    except OSError as e:
        raise ScanError(f"Cannot scan {root}: {_error_message(e)}") from e

    # Each frame is a directory and the iterator over its remaining entries
    stack = [(root, iter(root_entries))]
    result.dirs_scanned = 1

    while stack:
        directory, entries = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        path = directory / entry.name
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            result.warnings.append((path, _error_message(e)))
            is_dir = False

        if not is_dir:
            try:
                size = _regular_file_size(entry)
            except OSError as e:
                # Size unknown: skip the size check, still match the name
                result.warnings.append((path, _error_message(e)))
                size = None
            if size is not None and size > config.threshold:
                result.oversized.append(OversizedEntry(path, size))

        matched = match_pattern(entry.name, patterns)
        if matched is not None:
            result.candidates.append(RemovalCandidate(path, matched, is_dir))
            continue

        if is_dir:
            try:
                children = _list_directory(path)
            except OSError as e:
                result.warnings.append((path, _error_message(e)))
                continue
            result.dirs_scanned += 1
            if progress_callback and result.dirs_scanned % 200 == 0:
                progress_callback(f"Scanning... {result.dirs_scanned} dirs")
            stack.append((path, iter(children)))

    result.scan_duration = time.monotonic() - start
    return result
