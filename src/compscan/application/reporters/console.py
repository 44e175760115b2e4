"""Console reporter: ComparisonResult → rich formatted string."""

from __future__ import annotations

import fnmatch
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Iterable

    from compscan.domain.model.comparison import ComparisonResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_summary: Show summary table after the sections.
        max_keys: Max keys listed per section. None = unlimited.
        exclude_keys: Glob patterns of compound keys to hide.
        width: Console width in characters.
        color: Emit ANSI colors.
    """

    show_summary: bool = True
    max_keys: int | None = None
    exclude_keys: tuple[str, ...] = ()
    width: int = 120
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_keys is not None and self.max_keys < 1:
            raise ValueError(f"max_keys must be >= 1, got {self.max_keys}")
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


# (title, marker, style) per section
_SECTIONS = (
    ("NEW COMPONENTS", "+", "green"),
    ("REMOVED COMPONENTS", "-", "red"),
    ("MODIFIED COMPONENTS", "~", "yellow"),
)


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    Section counts always reflect every change, even when keys are hidden
    by max_keys or exclude_keys.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: ComparisonResult) -> str:
        """Format comparison result as rich formatted string.

        Args:
            result: Snapshot comparison result.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        console.print()
        console.rule("[bold]COMPONENT CHANGES[/bold]")
        console.print()

        if not result.has_changes:
            console.print("[bold green]No architectural changes detected.[/bold green]")
            return output.getvalue()

        groups = (result.new, result.removed, result.modified)
        for (title, marker, style), keys in zip(_SECTIONS, groups, strict=True):
            self._render_section(console, title, marker, style, keys)

        if self._config.show_summary:
            self._render_summary(console, result)

        return output.getvalue()

    def _visible(self, keys: Iterable[str]) -> list[str]:
        """Sorted keys minus excluded ones."""
        patterns = self._config.exclude_keys
        return sorted(k for k in keys if not any(fnmatch.fnmatch(k, p) for p in patterns))

    def _render_section(
        self,
        console: Console,
        title: str,
        marker: str,
        style: str,
        keys: frozenset[str],
    ) -> None:
        """Render one change section."""
        if not keys:
            return

        console.print(f"[bold {style}]{title}[/bold {style}] ({len(keys)})")
        visible = self._visible(keys)
        limit = self._config.max_keys
        shown = visible if limit is None else visible[:limit]
        for key in shown:
            console.print(f"  [{style}]{marker}[/{style}] {key}", highlight=False)

        hidden = len(keys) - len(shown)
        if hidden:
            console.print(f"  [dim]... {hidden} more[/dim]")
        console.print()

    def _render_summary(self, console: Console, result: ComparisonResult) -> None:
        """Render summary table."""
        table = Table(title="Summary", show_header=True)
        table.add_column("Change")
        table.add_column("Count", justify="right")
        table.add_row("New", str(len(result.new)))
        table.add_row("Removed", str(len(result.removed)))
        table.add_row("Modified", str(len(result.modified)))
        table.add_row("[bold]Total[/bold]", f"[bold]{result.total_changes}[/bold]")
        console.print(table)
