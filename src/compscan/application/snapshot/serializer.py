"""Serialization of discovered components into an immutable snapshot."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from compscan.domain.model.snapshot import (
    COMPONENT_TYPE,
    ComponentSnapshot,
    ContainerSnapshot,
    SerializedComponent,
    SerializedRelationship,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from compscan.domain.model.component import (
        ContainerComponents,
        DiscoveredComponent,
        Relationship,
    )


def _serialize_relationship(relationship: Relationship) -> SerializedRelationship:
    return SerializedRelationship(
        target=relationship.target,
        description=relationship.description,
        type=relationship.kind,
        properties=dict(relationship.properties),
    )


def serialize_component(component: DiscoveredComponent) -> SerializedComponent:
    """Freeze one discovered component.

    Tags become a set; relationships keep discovery order.
    """
    return SerializedComponent(
        name=component.name,
        description=component.description,
        technology=component.technology,
        tags=frozenset(component.tags),
        type=COMPONENT_TYPE,
        relationships=tuple(_serialize_relationship(r) for r in component.relationships),
        metadata=dict(component.metadata),
    )


def serialize_container(container: ContainerComponents) -> ContainerSnapshot:
    """Freeze the components of one container."""
    return ContainerSnapshot(
        container_name=container.name,
        container_description=container.description,
        container_technology=container.technology,
        components={
            name: serialize_component(component)
            for name, component in container.components.items()
        },
    )


def serialize_components(
    containers: Mapping[str, ContainerComponents],
    *,
    now: datetime | None = None,
) -> ComponentSnapshot:
    """Build a new snapshot from live discovery state.

    Args:
        containers: Container key → discovered components
        now: Snapshot time (default: current local time)

    Returns:
        New immutable snapshot
    """
    moment = now if now is not None else datetime.now()
    return ComponentSnapshot(
        timestamp=moment.isoformat(timespec="seconds"),
        containers={key: serialize_container(c) for key, c in containers.items()},
    )
