"""Plain text change report.

Stdlib-only reporter, suitable for CI logs and commit messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from compscan.domain.model.comparison import ComparisonResult

NO_CHANGES = "No architectural changes detected."


class PlainTextReporter:
    """Plain text reporter: one section per change kind, keys sorted."""

    def report(self, result: ComparisonResult) -> str:
        """Format comparison result as plain text.

        Args:
            result: Snapshot comparison result

        Returns:
            Report text
        """
        if not result.has_changes:
            return NO_CHANGES

        lines = ["Component Architecture Changes Detected:", ""]
        lines += self._section("NEW COMPONENTS", "+", result.new)
        lines += self._section("REMOVED COMPONENTS", "-", result.removed)
        lines += self._section("MODIFIED COMPONENTS", "~", result.modified)
        lines.append(f"Total changes: {result.total_changes}")
        return "\n".join(lines)

    def _section(self, title: str, marker: str, keys: Iterable[str]) -> list[str]:
        """Format one section, empty if no keys."""
        ordered = sorted(keys)
        if not ordered:
            return []
        return [f"{title} ({len(ordered)}):", *(f"  {marker} {key}" for key in ordered), ""]
