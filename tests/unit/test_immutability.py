"""Immutability tests.

Configuration and snapshots are shared read-only after creation:
- Frozen dataclasses reject attribute assignment
- Mapping fields are read-only views
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from compscan.domain.model.comparison import ComparisonResult
from compscan.domain.model.container import ContainerDefinition
from compscan.domain.model.discovery_config import GlobalDiscoveryConfig
from compscan.domain.model.snapshot import (
    ComponentSnapshot,
    ContainerSnapshot,
    SerializedRelationship,
)
from compscan.domain.model.type_info import TypeInfo
from tests.factories import make_serialized, make_snapshot, make_strategy


class TestFrozen:
    """Frozen value objects reject assignment."""

    @pytest.mark.parametrize(
        ("instance", "attribute", "value"),
        [
            (make_strategy(), "enabled", False),
            (TypeInfo.from_fqn("com.acme.A"), "fqn", "com.acme.B"),
            (ContainerDefinition(key="core"), "name", "Other"),
            (GlobalDiscoveryConfig(), "exclude_test_types", False),
            (ComparisonResult.no_changes(), "new", frozenset({"c::A"})),
            (make_serialized("A"), "description", "changed"),
            (ComponentSnapshot(timestamp="2024-01-01T00:00:00"), "timestamp", "x"),
        ],
    )
    def test_assignment_raises(self, instance: object, attribute: str, value: object) -> None:
        with pytest.raises(FrozenInstanceError):
            setattr(instance, attribute, value)


class TestReadOnlyMappings:
    """Mapping fields cannot be mutated through the object."""

    def test_strategy_parameters(self) -> None:
        with pytest.raises(TypeError):
            make_strategy().parameters["annotationType"] = "x"  # type: ignore[index]

    def test_snapshot_containers(self) -> None:
        snapshot = make_snapshot({"core": [make_serialized("A")]})
        with pytest.raises(TypeError):
            snapshot.containers["web"] = snapshot.containers["core"]  # type: ignore[index]

    def test_relationship_properties_copied(self) -> None:
        source = {"p": "1"}
        relationship = SerializedRelationship("B", properties=source)
        source["p"] = "2"
        assert relationship.properties["p"] == "1"

    def test_components_dict_copied(self) -> None:
        components = {"A": make_serialized("A")}
        container = ContainerSnapshot(container_name="core", components=components)
        components.clear()
        assert container.component_count == 1
