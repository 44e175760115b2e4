"""Reporter protocol for change report formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from compscan.domain.model.comparison import ComparisonResult


class ReporterProtocol(Protocol):
    """Contract for change reporters.

    Output is str, not print(). Caller decides destination.
    compscan provides PlainTextReporter, ConsoleReporter and JsonReporter.
    """

    def report(self, result: ComparisonResult) -> str:
        """Format comparison result.

        Args:
            result: Snapshot comparison result

        Returns:
            Formatted report
        """
        ...
