"""Domain ports (interfaces implemented by outer layers)."""

from compscan.domain.ports.reporter import ReporterProtocol
from compscan.domain.ports.snapshot_store import SnapshotStorePort
from compscan.domain.ports.type_source import TypeSourcePort

__all__ = [
    "ReporterProtocol",
    "SnapshotStorePort",
    "TypeSourcePort",
]
