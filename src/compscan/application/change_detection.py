"""Change detection workflow: previous snapshot vs. current discovery."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from compscan.application.snapshot.canonical import content_hash
from compscan.application.snapshot.comparator import compare_snapshots
from compscan.application.snapshot.serializer import serialize_components
from compscan.domain.model.comparison import ComparisonResult

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from compscan.domain.model.component import ContainerComponents
    from compscan.domain.model.snapshot import ComponentSnapshot
    from compscan.domain.ports.snapshot_store import SnapshotStorePort

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChangeDetection:
    """Outcome of one change detection run.

    Attributes:
        result: Comparison of previous and current snapshot
        snapshot: Current snapshot (already saved)
        new_hash: Content hash of the current snapshot
        old_hash: Content hash of the previous snapshot, None for a baseline run
    """

    result: ComparisonResult
    snapshot: ComponentSnapshot
    new_hash: str
    old_hash: str | None = None

    @property
    def is_baseline(self) -> bool:
        """No previous snapshot existed."""
        return self.old_hash is None


class ChangeDetector:
    """Detects component changes between runs.

    Workflow:
    1. Load previous snapshot (absent = initial baseline)
    2. Serialize current components into a new snapshot
    3. Compare: equal content hashes short-circuit to "no changes"
    4. Save new snapshot as latest and into history
    """

    def __init__(self, store: SnapshotStorePort) -> None:
        """Initialize detector.

        Args:
            store: Snapshot persistence
        """
        self._store = store

    def detect_changes(
        self,
        containers: Mapping[str, ContainerComponents],
        *,
        now: datetime | None = None,
    ) -> ChangeDetection:
        """Run the full change detection workflow.

        Args:
            containers: Container key → discovered components
            now: Snapshot time (default: current time)

        Returns:
            Comparison result with both hashes

        Raises:
            OSError: If the new snapshot cannot be saved
        """
        old = self._store.load_latest()
        if old is None:
            logger.info("No previous snapshot found; this run is the initial baseline")

        new = serialize_components(containers, now=now)
        logger.info("New snapshot created with %d component(s)", new.component_count)

        new_hash = content_hash(new)
        old_hash = content_hash(old) if old is not None else None
        logger.debug("Content hash old=%s new=%s", old_hash, new_hash)

        if old_hash == new_hash:
            result = ComparisonResult.no_changes()
        else:
            result = compare_snapshots(old, new)

        self._store.save_with_history(new)
        return ChangeDetection(result=result, snapshot=new, new_hash=new_hash, old_hash=old_hash)

    def create_baseline(
        self,
        containers: Mapping[str, ContainerComponents],
        *,
        now: datetime | None = None,
    ) -> ComponentSnapshot:
        """Serialize and save a snapshot without comparing.

        Raises:
            OSError: If the snapshot cannot be saved
        """
        snapshot = serialize_components(containers, now=now)
        self._store.save_with_history(snapshot)
        logger.info("Baseline snapshot created with %d component(s)", snapshot.component_count)
        return snapshot
