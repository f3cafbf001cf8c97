#!/usr/bin/env python3
"""
Configuration for Katharsis

Holds the immutable settings a cleanup run works with: where to scan, the
size threshold for oversized files, the removal patterns and the ignore file
to keep in sync with them.
"""

import argparse
import pathlib
from dataclasses import dataclass, field

from auxiliary import parse_size

DEFAULT_THRESHOLD = 50 * 1024**2  # 50 MiB
DEFAULT_PATTERNS = (
    "node_modules",
    "venv",
    ".env",
    "__pycache__",
    ".DS_Store",
    "*.log",
    "*.tmp",
    "dist",
    "build",
    "target",
)
DEFAULT_IGNORE_FILE = pathlib.Path(".gitignore")


@dataclass(frozen=True)
class CleanupConfig:
    """Settings for a single cleanup run"""

    root: pathlib.Path = field(default_factory=lambda: pathlib.Path("."))
    threshold: int = DEFAULT_THRESHOLD
    patterns: tuple[str, ...] = DEFAULT_PATTERNS
    ignore_file: pathlib.Path = DEFAULT_IGNORE_FILE

    def __post_init__(self):
        if self.threshold < 0:
            raise ValueError(f"threshold must not be negative: {self.threshold}")
        if not self.patterns:
            raise ValueError("at least one removal pattern is required")
        # Accept any iterable of patterns but store a tuple
        object.__setattr__(self, "patterns", tuple(self.patterns))
        object.__setattr__(self, "root", pathlib.Path(self.root))
        object.__setattr__(self, "ignore_file", pathlib.Path(self.ignore_file))

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "CleanupConfig":
        """Create from parsed command-line arguments, falling back to defaults"""
        threshold = DEFAULT_THRESHOLD
        if getattr(args, "threshold", None):
            threshold = parse_size(args.threshold)

        return cls(
            root=pathlib.Path(getattr(args, "root", None) or "."),
            threshold=threshold,
            patterns=tuple(getattr(args, "patterns", None) or DEFAULT_PATTERNS),
            ignore_file=pathlib.Path(getattr(args, "ignore_file", None) or DEFAULT_IGNORE_FILE),
        )
