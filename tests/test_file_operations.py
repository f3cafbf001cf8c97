"""Tests for candidate deletion."""

from pathlib import Path

from cruft_scanner import RemovalCandidate, RemovalPattern
from file_operations import delete_candidate, delete_candidates


def candidate(path: Path, pattern: str = "x") -> RemovalCandidate:
    return RemovalCandidate(path, RemovalPattern.compile(pattern), path.is_dir())


def test_deletes_files_and_directory_trees(tmp_path):
    tree = tmp_path / "node_modules"
    (tree / "pkg" / "lib").mkdir(parents=True)
    (tree / "pkg" / "lib" / "index.js").write_text("")
    (tree / "a.js").write_text("")
    log = tmp_path / "app.log"
    log.write_text("")

    report = delete_candidates([candidate(tree), candidate(log)])

    assert report.deleted == [tree, log]
    assert report.failed == []
    assert not tree.exists()
    assert not log.exists()


def test_vanished_candidate_is_a_per_item_failure(tmp_path):
    gone = tmp_path / "gone.tmp"
    gone.write_text("")
    stale = candidate(gone)
    gone.unlink()
    keep_going = tmp_path / "dist"
    keep_going.mkdir()

    report = delete_candidates([stale, candidate(keep_going)])

    assert report.deleted == [keep_going]
    assert [path for path, _ in report.failed] == [gone]
    assert report.failed[0][1]
    assert not keep_going.exists()


def test_symlink_to_directory_is_unlinked_not_emptied(tmp_path):
    real = tmp_path / "real"
    real.mkdir()
    (real / "data.txt").write_text("keep")
    link = tmp_path / "venv"
    link.symlink_to(real, target_is_directory=True)

    result = delete_candidate(RemovalCandidate(link, RemovalPattern.compile("venv"), False))

    assert result.success
    assert not link.exists()
    assert (real / "data.txt").read_text() == "keep"


def test_progress_callback_called_per_item(tmp_path):
    paths = []
    for name in ("a.log", "b.log"):
        path = tmp_path / name
        path.write_text("")
        paths.append(path)
    messages = []

    delete_candidates([candidate(p) for p in paths], messages.append)

    assert messages == ["Deleting a.log (1/2)", "Deleting b.log (2/2)"]
