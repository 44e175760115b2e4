"""Snapshot persistence."""

from compscan.infrastructure.storage.snapshot_store import (
    DEFAULT_DIRECTORY,
    FileSnapshotStore,
    read_snapshot,
    write_snapshot,
)

__all__ = [
    "DEFAULT_DIRECTORY",
    "FileSnapshotStore",
    "read_snapshot",
    "write_snapshot",
]
