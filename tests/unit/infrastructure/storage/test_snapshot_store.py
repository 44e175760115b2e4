"""Tests for infrastructure/storage/snapshot_store.py."""

import json
import logging
from datetime import datetime
from pathlib import Path

import pytest

from compscan.infrastructure.storage import FileSnapshotStore, read_snapshot, write_snapshot
from tests.factories import make_serialized, make_snapshot

SAVED_AT = datetime(2024, 3, 5, 14, 30, 15)


@pytest.fixture
def snapshot():
    return make_snapshot({"core": [make_serialized("Billing", tags=("b", "a"))]})


@pytest.fixture
def store(tmp_path: Path) -> FileSnapshotStore:
    return FileSnapshotStore(tmp_path / "discovered-components", clock=lambda: SAVED_AT)


class TestFileSnapshotStore:
    """Tests for FileSnapshotStore."""

    def test_load_latest_without_files(self, store: FileSnapshotStore) -> None:
        assert store.load_latest() is None
        assert store.history() == []

    def test_save_then_load(self, store: FileSnapshotStore, snapshot) -> None:
        store.save_with_history(snapshot)
        assert store.load_latest() == snapshot

    def test_history_file_name(self, store: FileSnapshotStore, snapshot) -> None:
        store.save_with_history(snapshot)
        assert [p.name for p in store.history()] == ["components-snapshot-20240305-143015.json"]
        assert store.latest_path.name == "components-latest.json"

    def test_history_never_overwritten(self, store: FileSnapshotStore, snapshot) -> None:
        store.save_with_history(snapshot)
        store.save_with_history(snapshot)
        assert [p.name for p in store.history()] == [
            "components-snapshot-20240305-143015-1.json",
            "components-snapshot-20240305-143015.json",
        ]

    def test_file_format(self, store: FileSnapshotStore, snapshot) -> None:
        store.save_with_history(snapshot)
        text = store.latest_path.read_text(encoding="utf-8")
        data = json.loads(text)
        assert data["containers"]["core"]["components"]["Billing"]["tags"] == ["a", "b"]
        assert text.startswith('{\n  "containers"')

    def test_corrupt_latest_treated_as_absent(
        self, store: FileSnapshotStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        store.latest_path.parent.mkdir(parents=True)
        store.latest_path.write_text("{truncated", encoding="utf-8")

        with caplog.at_level(logging.ERROR):
            assert store.load_latest() is None
        assert "Failed to load snapshot" in caplog.text

    def test_wrong_shape_treated_as_absent(self, store: FileSnapshotStore) -> None:
        store.latest_path.parent.mkdir(parents=True)
        store.latest_path.write_text('{"containers": {}}', encoding="utf-8")
        assert store.load_latest() is None


class TestWriteSnapshot:
    """Tests for write_snapshot() and read_snapshot()."""

    def test_no_temporary_file_left(self, tmp_path: Path, snapshot) -> None:
        path = tmp_path / "nested" / "snapshot.json"
        write_snapshot(snapshot, path)
        assert [p.name for p in path.parent.iterdir()] == ["snapshot.json"]
        assert read_snapshot(path) == snapshot

    def test_write_failure_propagates(self, tmp_path: Path, snapshot) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not directory")
        with pytest.raises(OSError):
            write_snapshot(snapshot, blocker / "snapshot.json")
