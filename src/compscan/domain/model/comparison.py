"""Snapshot comparison result."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Difference between two snapshots.

    Produced fresh per comparison. Keys are compound container::component.

    Attributes:
        new: Keys present only in the new snapshot
        removed: Keys present only in the old snapshot
        modified: Keys present in both with different content
    """

    new: frozenset[str] = frozenset()
    removed: frozenset[str] = frozenset()
    modified: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for label, keys in (("new", self.new), ("removed", self.removed)):
            overlap = keys & self.modified
            if overlap:
                raise ValueError(f"{label} and modified overlap: {sorted(overlap)}")
        if self.new & self.removed:
            raise ValueError(f"new and removed overlap: {sorted(self.new & self.removed)}")

    @property
    def has_changes(self) -> bool:
        """Any component was added, removed or modified."""
        return bool(self.new or self.removed or self.modified)

    @property
    def total_changes(self) -> int:
        """Number of changed components."""
        return len(self.new) + len(self.removed) + len(self.modified)

    @classmethod
    def no_changes(cls) -> ComparisonResult:
        """Create result with no changes."""
        return cls()
