"""JSON reporter: ComparisonResult → JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from compscan.domain.model.comparison import ComparisonResult


class JsonReporter:
    """JSON reporter: outputs machine-readable JSON.

    Key lists are sorted so the output is stable.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, result: ComparisonResult) -> str:
        """Format comparison result as JSON string."""
        data = {
            "hasChanges": result.has_changes,
            "new": sorted(result.new),
            "removed": sorted(result.removed),
            "modified": sorted(result.modified),
            "totalChanges": result.total_changes,
        }
        return json.dumps(data, indent=self._indent)
