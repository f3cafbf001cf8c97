#!/usr/bin/env python3
"""
Katharsis — Ancient Greek κάθαρσις (cleansing)

A repository cleanup tool. Scans a directory tree for regenerable junk
(node_modules, __pycache__, build output, *.log, ...) and for files above
a size threshold, reports both, and after confirmation deletes the junk and
adds the removal patterns to .gitignore.

Usage:
    katharsis                          # Scan the current directory
    katharsis --root ~/src/project     # Scan another directory
    katharsis --threshold 100M         # Report files larger than 100 MiB
    katharsis --dry-run                # Just report findings
    katharsis --yes                    # Skip the confirmation prompt
"""

import argparse
import sys
from typing import Callable, Optional

from auxiliary import format_bytes, format_mebibytes, format_path_for_display, format_threshold, parse_size
from console_ui import ConsoleUI
from cruft_scanner import CleanupError, ScanResult, scan_tree
from file_operations import DeletionReport, delete_candidates
from ignore_file import IgnoreUpdate, update_ignore_file
from katharsis_config import DEFAULT_PATTERNS, CleanupConfig

CONFIRM_PROMPT = "\nConfirm deletion? (yes/no): "


def is_confirmation(answer: str) -> bool:
    """Only an explicit 'yes' (any case, surrounding whitespace ignored) confirms"""
    return answer.strip().lower() == "yes"


# ---------------------------------------------------------------------------
# Katharsis
# ---------------------------------------------------------------------------


class Katharsis:
    """Main application class for the Katharsis cleanup tool."""

    def __init__(self, config: CleanupConfig, ui: Optional[ConsoleUI] = None):
        self.config = config
        self.ui = ui or ConsoleUI()

    # -- scanning ------------------------------------------------------------

    def scan(self) -> ScanResult:
        progress = self.ui.create_activity_progress()
        with progress:
            task = progress.add_task("Scanning...", total=None)
            result = scan_tree(self.config, lambda msg: progress.update(task, description=msg))
        return result

    # -- reporting -----------------------------------------------------------

    def report(self, result: ScanResult):
        for path, err in result.warnings:
            self.ui.print_warning(f"Skipped {format_path_for_display(path)}: {err}")

        self.ui.print_section(f"Large files (>{format_threshold(self.config.threshold)}):")
        if not result.oversized:
            self.ui.print_plain("  none")
        for entry in result.oversized:
            self.ui.print_plain(f"{format_path_for_display(entry.path)} - {format_mebibytes(entry.size)}")

        self.ui.print_section("Files/folders to remove:")
        if not result.candidates:
            self.ui.print_plain("  none")
        for candidate in result.candidates:
            suffix = "/" if candidate.is_dir else ""
            self.ui.print_plain(f"{format_path_for_display(candidate.path)}{suffix}")

        oversized_size = sum(e.size for e in result.oversized)
        self.ui.print_info(
            f"\n{len(result.oversized)} large files ({format_bytes(oversized_size)}),"
            f" {len(result.candidates)} items to remove"
            f" ({result.dirs_scanned:,} dirs scanned in {result.scan_duration:.1f}s)"
        )

    # -- confirmation --------------------------------------------------------

    def ask_confirmation(self) -> bool:
        return is_confirmation(self.ui.read_line(CONFIRM_PROMPT))

    # -- execution -----------------------------------------------------------

    def delete(self, result: ScanResult) -> DeletionReport:
        if not result.candidates:
            return DeletionReport()

        progress = self.ui.create_progress()
        with progress:
            task = progress.add_task("Deleting...", total=len(result.candidates))

            def advance(message: str):
                progress.update(task, description=message)
                progress.advance(task)

            deletion = delete_candidates(result.candidates, advance)

        for path, err in deletion.failed:
            self.ui.print_error(f"Failed to delete {format_path_for_display(path)}: {err}")
        return deletion

    def update_ignore(self) -> IgnoreUpdate:
        update = update_ignore_file(self.config.ignore_file, self.config.patterns)
        name = self.config.ignore_file.name
        if update.updated:
            self.ui.print_success(f"{name} updated ({', '.join(update.added)}).")
        else:
            self.ui.print_info(f"{name} already up to date.")
        return update

    def summary(self, result: ScanResult, deletion: DeletionReport):
        """Show final execution results."""
        deleted = set(deletion.deleted)
        remaining = [e for e in result.oversized if e.path not in deleted]

        self.ui.print_section("Summary:")
        self.ui.print_plain(f"Deleted items: {len(deletion.deleted)}")
        for path in deletion.deleted:
            self.ui.print_plain(f"- {format_path_for_display(path)}")
        if deletion.failed:
            self.ui.print_error(f"Failed items: {len(deletion.failed)}")
        self.ui.print_plain(f"Remaining large files: {len(remaining)}")

    # -- main entry point ----------------------------------------------------

    def run(self, confirm: Optional[Callable[[], bool]] = None, dry_run: bool = False) -> int:
        """Run the whole pipeline and return the process exit status

        *confirm* decides whether to go ahead with deletion; it defaults to
        asking on standard input.
        """
        self.ui.print_header(
            "Katharsis",
            f"Cleaning {format_path_for_display(self.config.root)}"
            f" — size threshold {format_threshold(self.config.threshold)}",
        )

        try:
            result = self.scan()
        except CleanupError as e:
            self.ui.print_error(f"Error scanning directory: {e}")
            return 1

        self.report(result)

        if dry_run:
            return 0

        decide = confirm or self.ask_confirmation
        if not decide():
            self.ui.print_info("Cleanup cancelled.")
            return 0

        deletion = self.delete(result)

        try:
            self.update_ignore()
        except CleanupError as e:
            self.ui.print_error(str(e))
            return 1

        self.summary(result, deletion)
        return 0


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def _threshold(value: str) -> str:
    try:
        size = parse_size(value)
    except (ValueError, OverflowError):
        raise argparse.ArgumentTypeError(f"invalid size: {value!r}") from None
    if size <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive: {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="katharsis",
        description="Katharsis — repository cleanup tool",
    )
    parser.add_argument("--root", default=".", help="Directory to scan (default: current directory)")
    parser.add_argument(
        "--threshold", type=_threshold, default=None, help="Report files larger than this (e.g. 50M, 1G; default 50M)"
    )
    parser.add_argument(
        "--patterns",
        nargs="+",
        metavar="PATTERN",
        default=None,
        help=f"Removal patterns, replacing the defaults ({' '.join(DEFAULT_PATTERNS)})",
    )
    parser.add_argument("--ignore-file", default=None, help="Ignore file to update (default: .gitignore)")
    parser.add_argument("-y", "--yes", action="store_true", help="Delete without asking for confirmation")
    parser.add_argument("--dry-run", action="store_true", help="Report findings without deleting anything")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = CleanupConfig.from_args(args)
    app = Katharsis(config)

    confirm = (lambda: True) if args.yes else None
    try:
        return app.run(confirm=confirm, dry_run=args.dry_run)
    except KeyboardInterrupt:
        app.ui.print_warning("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
