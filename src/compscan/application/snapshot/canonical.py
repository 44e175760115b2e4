"""Canonical form and content hash of a snapshot.

The canonical form ignores volatile metadata (timestamp, generator, version)
and every collection ordering, so identical architectural content always
hashes to the same digest.
"""

from __future__ import annotations

import hashlib
import heapq
import json
import os
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, TypeAlias

from compscan.domain.model.snapshot import VOLATILE_FIELDS

if TYPE_CHECKING:
    from collections.abc import Callable

    from compscan.domain.model.snapshot import ComponentSnapshot

# Arrays at least this long are sorted in parallel chunks
PARALLEL_SORT_THRESHOLD = 1_000

Tree: TypeAlias = "dict[str, Tree] | list[Tree] | str | int | float | bool | None"


def canonical_json(value: Tree) -> str:
    """Serialize tree as canonical JSON text (sorted keys, compact, unescaped)."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _sort_key(items: list[Tree]) -> Callable[[Tree], object]:
    """Pick sort key with a single pass over the array."""
    all_text = True
    all_have_target = True
    for item in items:
        if not isinstance(item, str):
            all_text = False
        if not (isinstance(item, dict) and "target" in item):
            all_have_target = False
        if not all_text and not all_have_target:
            break

    if all_text:
        return lambda item: item
    if all_have_target:
        # target first, whole element breaks ties between equal targets
        return lambda item: (str(item["target"]), canonical_json(item))  # type: ignore[index]
    return canonical_json


def _parallel_sorted(items: list[Tree], key: Callable[[Tree], object]) -> list[Tree]:
    """Sort chunks on a thread pool, then merge.

    heapq.merge is stable across chunks, so the result equals sorted(items, key=key).
    """
    workers = min(os.cpu_count() or 1, 8)
    chunk_size = -(-len(items) // workers)
    chunks = [items[i : i + chunk_size] for i in range(0, len(items), chunk_size)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        sorted_chunks = list(pool.map(lambda chunk: sorted(chunk, key=key), chunks))
    return list(heapq.merge(*sorted_chunks, key=key))


def normalize(node: Tree, *, parallel: bool = True) -> Tree:
    """Return a copy of node with every array recursively sorted.

    Children are normalized before their parent array is sorted, so
    fallback keys (element JSON text) are themselves order-independent.

    Args:
        node: JSON-compatible tree
        parallel: Allow parallel sort for arrays above PARALLEL_SORT_THRESHOLD

    Returns:
        Normalized copy (input is not modified)
    """
    if isinstance(node, dict):
        return {key: normalize(value, parallel=parallel) for key, value in node.items()}

    if isinstance(node, list):
        items = [normalize(item, parallel=parallel) for item in node]
        if len(items) <= 1:
            return items
        key = _sort_key(items)
        if parallel and len(items) >= PARALLEL_SORT_THRESHOLD:
            return _parallel_sorted(items, key)
        return sorted(items, key=key)

    return node


def canonical_tree(snapshot: ComponentSnapshot, *, parallel: bool = True) -> Tree:
    """Snapshot as normalized tree without volatile fields."""
    root = snapshot.to_dict()
    for name in VOLATILE_FIELDS:
        root.pop(name, None)
    return normalize(root, parallel=parallel)  # type: ignore[arg-type]


def canonical_text(snapshot: ComponentSnapshot, *, parallel: bool = True) -> str:
    """Deterministic, order-independent text of a snapshot."""
    return canonical_json(canonical_tree(snapshot, parallel=parallel))


def content_hash(snapshot: ComponentSnapshot, *, parallel: bool = True) -> str:
    """SHA-256 of the canonical text, lowercase hex.

    Args:
        snapshot: Snapshot to hash
        parallel: Allow parallel sort (result is identical either way)

    Returns:
        64-character hex digest
    """
    text = canonical_text(snapshot, parallel=parallel)
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def snapshots_equal(old: ComponentSnapshot | None, new: ComponentSnapshot) -> bool:
    """Snapshots have identical content. A missing old snapshot never equals."""
    if old is None:
        return False
    return content_hash(old) == content_hash(new)
