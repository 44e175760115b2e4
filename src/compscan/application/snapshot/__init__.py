"""Snapshots: serialization, canonical hashing and comparison."""

from compscan.application.snapshot.canonical import (
    PARALLEL_SORT_THRESHOLD,
    canonical_text,
    canonical_tree,
    content_hash,
    snapshots_equal,
)
from compscan.application.snapshot.comparator import (
    compare_snapshots,
    components_equal,
    relationships_equal,
)
from compscan.application.snapshot.serializer import serialize_components

__all__ = [
    "PARALLEL_SORT_THRESHOLD",
    "canonical_text",
    "canonical_tree",
    "compare_snapshots",
    "components_equal",
    "content_hash",
    "relationships_equal",
    "serialize_components",
    "snapshots_equal",
]
