"""Snapshot store port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from compscan.domain.model.snapshot import ComponentSnapshot


class SnapshotStorePort(ABC):
    """Port for persisting snapshots between runs.

    Keeps a "latest" snapshot (overwritten each run) and an append-only history.
    """

    @abstractmethod
    def load_latest(self) -> ComponentSnapshot | None:
        """Load the latest snapshot.

        Returns:
            Latest snapshot, None if no prior snapshot exists
        """
        ...

    @abstractmethod
    def save_with_history(self, snapshot: ComponentSnapshot) -> None:
        """Save snapshot as latest and append it to history.

        Raises:
            OSError: If snapshot cannot be written
        """
        ...
