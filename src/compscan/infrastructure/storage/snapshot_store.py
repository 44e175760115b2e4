"""File-based snapshot store: latest snapshot plus timestamped history."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from compscan.domain.model.snapshot import ComponentSnapshot
from compscan.domain.ports.snapshot_store import SnapshotStorePort

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY = Path("discovered-components")
LATEST_FILE = "components-latest.json"
HISTORY_PREFIX = "components-snapshot-"
HISTORY_TIME_FORMAT = "%Y%m%d-%H%M%S"


def write_snapshot(snapshot: ComponentSnapshot, path: Path) -> None:
    """Write snapshot as indented JSON with sorted keys.

    Written to a temporary sibling first, then moved into place,
    so a failed write never leaves a truncated file behind.

    Raises:
        OSError: If the file cannot be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(snapshot.to_dict(), indent=2, sort_keys=True, ensure_ascii=False)
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_text(text + "\n", encoding="utf-8")
    os.replace(tmp, path)


def read_snapshot(path: Path) -> ComponentSnapshot | None:
    """Read snapshot file.

    A missing file is a legitimate absence. An unreadable or corrupt file
    is logged and treated as absent, so every component reports as new.

    Returns:
        Snapshot, None if missing or unreadable
    """
    if not path.exists():
        logger.info("Snapshot file not found: %s", path)
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        snapshot = ComponentSnapshot.from_dict(data)
    except (OSError, ValueError, KeyError, TypeError, AttributeError):
        logger.error("Failed to load snapshot from %s", path, exc_info=True)
        return None

    logger.info("Component snapshot loaded from %s", path)
    return snapshot


class FileSnapshotStore(SnapshotStorePort):
    """Snapshots in a directory.

    Layout:
        <directory>/components-latest.json                    (overwritten)
        <directory>/components-snapshot-YYYYMMDD-HHMMSS.json  (append-only)
    """

    def __init__(
        self,
        directory: Path = DEFAULT_DIRECTORY,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize store.

        Args:
            directory: Snapshot directory (created on first save)
            clock: Time source for history file names
        """
        self._directory = directory
        self._clock = clock

    @property
    def latest_path(self) -> Path:
        """Path of the latest snapshot."""
        return self._directory / LATEST_FILE

    def history(self) -> list[Path]:
        """History files, oldest first."""
        if not self._directory.is_dir():
            return []
        return sorted(self._directory.glob(f"{HISTORY_PREFIX}*.json"))

    def load_latest(self) -> ComponentSnapshot | None:
        """Load the latest snapshot, None if there is none."""
        return read_snapshot(self.latest_path)

    def save_with_history(self, snapshot: ComponentSnapshot) -> None:
        """Save snapshot into history, then as latest.

        Raises:
            OSError: If either file cannot be written
        """
        history_path = self._next_history_path()
        write_snapshot(snapshot, history_path)
        write_snapshot(snapshot, self.latest_path)
        logger.info("Component snapshot saved: latest=%s history=%s", self.latest_path, history_path)

    def _next_history_path(self) -> Path:
        """History path for now, never reusing an existing file."""
        stamp = self._clock().strftime(HISTORY_TIME_FORMAT)
        path = self._directory / f"{HISTORY_PREFIX}{stamp}.json"
        counter = 1
        while path.exists():
            path = self._directory / f"{HISTORY_PREFIX}{stamp}-{counter}.json"
            counter += 1
        return path
