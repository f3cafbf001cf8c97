#!/usr/bin/env python3
"""
File Operations Module

Deletes removal candidates one by one. Files and symlinks are unlinked,
directories are removed with their whole contents. A failing item is
recorded and the batch carries on; nothing is rolled back.
"""

import pathlib
import shutil
from dataclasses import dataclass, field
from typing import Callable, Optional

from cruft_scanner import RemovalCandidate


@dataclass
class DeletionResult:
    """Result of deleting a single candidate"""

    candidate: RemovalCandidate
    success: bool
    error_message: Optional[str] = None


@dataclass
class DeletionReport:
    """Outcome of a batch deletion, in candidate order"""

    deleted: list[pathlib.Path] = field(default_factory=list)
    failed: list[tuple[pathlib.Path, str]] = field(default_factory=list)


def delete_path(path: pathlib.Path):
    """Delete a file, a symlink or a directory tree

    Raises:
        OSError: If the path is missing or cannot be removed
    """
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def delete_candidate(candidate: RemovalCandidate) -> DeletionResult:
    try:
        delete_path(candidate.path)
    except OSError as e:
        return DeletionResult(candidate=candidate, success=False, error_message=e.strerror or str(e))
    return DeletionResult(candidate=candidate, success=True)


def delete_candidates(
    candidates: list[RemovalCandidate], progress_callback: Optional[Callable[[str], None]] = None
) -> DeletionReport:
    """Delete every candidate and report which ones succeeded"""
    report = DeletionReport()

    for i, candidate in enumerate(candidates):
        if progress_callback:
            progress_callback(f"Deleting {candidate.path.name} ({i + 1}/{len(candidates)})")

        result = delete_candidate(candidate)
        if result.success:
            report.deleted.append(candidate.path)
        else:
            report.failed.append((candidate.path, result.error_message))

    return report
