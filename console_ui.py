#!/usr/bin/env python3
"""
Console UI Module using Rich

Provides the console interface for Katharsis: styled messages, a header
panel, progress displays and a single-line prompt. Regular output goes to
stdout, errors and warnings to stderr.
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn, TimeElapsedColumn


class ConsoleUI:
    """Console UI handler using Rich"""

    def __init__(self, force_terminal: Optional[bool] = None):
        """Initialize stdout and stderr consoles with optional terminal forcing"""
        # Soft wrap keeps long paths on one line so they can be copied
        self.console = Console(force_terminal=force_terminal, highlight=False, soft_wrap=True)
        self.error_console = Console(stderr=True, force_terminal=force_terminal, highlight=False, soft_wrap=True)

    # Basic styled output methods
    def print_success(self, message: str):
        """Print success message in green"""
        self.console.print(escape(message), style="green")

    def print_error(self, message: str):
        """Print error message in red to stderr"""
        self.error_console.print(escape(message), style="red bold")

    def print_warning(self, message: str):
        """Print warning message in yellow to stderr"""
        self.error_console.print(escape(message), style="yellow")

    def print_info(self, message: str):
        """Print info message in cyan"""
        self.console.print(escape(message), style="cyan")

    def print_plain(self, message: str):
        """Print message in plain white"""
        self.console.print(escape(message), style="white")

    def print_header(self, title: str, subtitle: Optional[str] = None):
        """Print a header with optional subtitle"""
        if subtitle:
            header_text = f"[bold]{escape(title)}[/bold]\n[dim]{escape(subtitle)}[/dim]"
        else:
            header_text = f"[bold]{escape(title)}[/bold]"

        panel = Panel(header_text, box=box.ROUNDED, padding=(0, 1))
        self.console.print(panel)

    def print_section(self, title: str):
        """Print a blank line followed by a bold section title"""
        self.console.print()
        self.console.print(f"[bold]{escape(title)}[/bold]")

    # Progress displays
    def create_progress(self):
        """Create a Rich progress context manager for batch operations"""
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TextColumn("({task.completed}/{task.total})"),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        )

    def create_activity_progress(self):
        """Create a Rich progress context manager for activity-only display (no counts)"""
        return Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        )

    # Interactive prompts
    def read_line(self, prompt: str) -> str:
        """Read a single line of input; end of input yields an empty string"""
        try:
            return self.console.input(escape(prompt))
        except EOFError:
            self.console.print()
            return ""
