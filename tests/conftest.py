"""Shared fixtures for Katharsis tests."""

from pathlib import Path

import pytest

from console_ui import ConsoleUI

MIB = 1024**2


def make_sparse_file(path: Path, size: int) -> Path:
    """Create a file of the given logical size without writing its contents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        f.truncate(size)
    return path


@pytest.fixture
def sample_repo(tmp_path: Path) -> Path:
    """A repository with a dependency cache, a log file, a keeper and a large file."""
    repo = tmp_path / "repo"
    (repo / "node_modules").mkdir(parents=True)
    (repo / "node_modules" / "a.js").write_text("module.exports = {};\n")
    (repo / "report.log").write_text("log line\n")
    (repo / "keep.txt").write_text("keep me\n")
    make_sparse_file(repo / "big.bin", 60 * MIB)
    return repo


@pytest.fixture
def ui() -> ConsoleUI:
    return ConsoleUI(force_terminal=False)
