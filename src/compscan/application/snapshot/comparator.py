"""Snapshot comparator: new / removed / modified components."""

from __future__ import annotations

from typing import TYPE_CHECKING

from compscan.domain.model.comparison import ComparisonResult

if TYPE_CHECKING:
    from compscan.domain.model.snapshot import (
        ComponentSnapshot,
        SerializedComponent,
        SerializedRelationship,
    )


def _relationship_key(r: SerializedRelationship) -> tuple[str, str, str, tuple[tuple[str, str], ...]]:
    return (r.target, r.description or "", r.type, tuple(sorted(r.properties.items())))


def relationships_equal(
    first: tuple[SerializedRelationship, ...],
    second: tuple[SerializedRelationship, ...],
) -> bool:
    """Relationship lists are equal regardless of order.

    Both lists are sorted (on private copies) by target, then compared
    element-wise on target, description, type and properties.
    """
    if len(first) != len(second):
        return False

    for a, b in zip(
        sorted(first, key=_relationship_key),
        sorted(second, key=_relationship_key),
        strict=True,
    ):
        if (
            a.target != b.target
            or a.description != b.description
            or a.type != b.type
            or dict(a.properties) != dict(b.properties)
        ):
            return False
    return True


def components_equal(first: SerializedComponent, second: SerializedComponent) -> bool:
    """Field-wise equality of two serialized components."""
    return (
        first.name == second.name
        and first.description == second.description
        and first.technology == second.technology
        and first.tags == second.tags
        and first.type == second.type
        and dict(first.metadata) == dict(second.metadata)
        and relationships_equal(first.relationships, second.relationships)
    )


def compare_snapshots(
    old: ComponentSnapshot | None,
    new: ComponentSnapshot,
) -> ComparisonResult:
    """Compare two snapshots component by component.

    Args:
        old: Previous snapshot. None = every component is new
        new: Current snapshot

    Returns:
        Fresh comparison result keyed by container::component
    """
    new_flat = new.flatten()
    if old is None:
        return ComparisonResult(new=frozenset(new_flat))

    old_flat = old.flatten()
    added = frozenset(new_flat.keys() - old_flat.keys())
    removed = frozenset(old_flat.keys() - new_flat.keys())
    modified = frozenset(
        key
        for key in new_flat.keys() & old_flat.keys()
        if not components_equal(old_flat[key], new_flat[key])
    )
    return ComparisonResult(new=added, removed=removed, modified=modified)
