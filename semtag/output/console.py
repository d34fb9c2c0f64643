"""Console output abstraction.

Commands write their result values to stdout with `typer.echo` and report
everything else (errors, hints, parsed fields, tag messages) through a
ConsoleProtocol, so output stays pipeable and tests can capture what
would have been shown.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "RichConsole",
    "Style",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    ERROR = auto()
    WARNING = auto()
    INFO = auto()
    DIM = auto()
    TABLE = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def table(self, title: str, rows: Sequence[tuple[str, str]]) -> None:
        """Render label/value pairs under a title."""
        ...


class RichConsole:
    """Console implementation using Rich.

    Writes to stderr by default so stdout only carries command results.
    """

    def __init__(self, *, stderr: bool = True) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console
        from rich.markup import escape

        self._escape = escape
        self._console = Console(stderr=stderr)
        self._style_map = {
            Style.DEFAULT: "",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.INFO: "cyan",
            Style.DIM: "dim",
            Style.TABLE: "",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(self._escape(message), style=rich_style, highlight=False)
        else:
            self._console.print(self._escape(message), highlight=False)

    def error(self, message: str) -> None:
        self._console.print(f"[red bold]error:[/red bold] {self._escape(message)}", highlight=False)

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]warning:[/yellow] {self._escape(message)}", highlight=False)

    def info(self, message: str) -> None:
        self._console.print(f"[cyan]info:[/cyan] {self._escape(message)}", highlight=False)

    def table(self, title: str, rows: Sequence[tuple[str, str]]) -> None:
        from rich.table import Table

        table = Table(title=self._escape(title), show_header=False, box=None, title_justify="left")
        table.add_column(style="dim")
        table.add_column(style="bold")
        for label, value in rows:
            table.add_row(self._escape(label), self._escape(value))
        self._console.print(table)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    """Factory for empty outputs list (helps type inference)."""
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"info: {message}", Style.INFO))

    def table(self, title: str, rows: Sequence[tuple[str, str]]) -> None:
        self.outputs.append(OutputRecord(title, Style.TABLE))
        for label, value in rows:
            self.outputs.append(OutputRecord(f"{label}: {value}", Style.TABLE))

    # Test helpers

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
