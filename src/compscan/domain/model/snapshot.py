"""Component snapshot: immutable record of what was discovered.

Independent of how components were discovered. Field names of the JSON
document are given by the *_FIELD constants and to_dict() methods.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Default snapshot identity
GENERATED_BY = "compscan"
FORMAT_VERSION = "1.0"

# Type label of every serialized component
COMPONENT_TYPE = "Component"

# Compound key separator: container::component
KEY_SEPARATOR = "::"

# Top-level fields excluded from content hashing
VOLATILE_FIELDS = ("timestamp", "generatedBy", "version")


def _frozen_map(value: Mapping[str, object]) -> Mapping[str, object]:
    if isinstance(value, MappingProxyType):
        return value
    return MappingProxyType(dict(value))


@dataclass(frozen=True, slots=True)
class SerializedRelationship:
    """Canonical form of a relationship.

    Attributes:
        target: Target component name
        description: Relationship description
        type: Relationship kind label
        properties: Free-form properties
    """

    target: str
    description: str | None = None
    type: str = "uses"
    properties: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.target:
            raise ValueError("relationship target must not be empty")
        object.__setattr__(self, "properties", _frozen_map(self.properties))

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-compatible dict."""
        return {
            "target": self.target,
            "description": self.description,
            "type": self.type,
            "properties": dict(self.properties),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> SerializedRelationship:
        """Create from JSON-compatible dict."""
        return cls(
            target=str(data["target"]),
            description=_optional_str(data.get("description")),
            type=str(data.get("type") or "uses"),
            properties=_str_map(data.get("properties")),
        )


@dataclass(frozen=True, slots=True)
class SerializedComponent:
    """Canonical form of a discovered component.

    Attributes:
        name: Component name
        description: Description
        technology: Technology label
        tags: Tag set (unordered, deduplicated)
        type: Type label (always "Component")
        relationships: Relationships in discovery order
        metadata: Free-form metadata
    """

    name: str
    description: str | None = None
    technology: str | None = None
    tags: frozenset[str] = frozenset()
    type: str = COMPONENT_TYPE
    relationships: tuple[SerializedRelationship, ...] = ()
    metadata: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("component name must not be empty")
        object.__setattr__(self, "metadata", _frozen_map(self.metadata))

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-compatible dict. Tags are written sorted."""
        return {
            "name": self.name,
            "description": self.description,
            "technology": self.technology,
            "tags": sorted(self.tags),
            "type": self.type,
            "relationships": [r.to_dict() for r in self.relationships],
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> SerializedComponent:
        """Create from JSON-compatible dict."""
        tags = data.get("tags") or ()
        relationships = data.get("relationships") or ()
        return cls(
            name=str(data["name"]),
            description=_optional_str(data.get("description")),
            technology=_optional_str(data.get("technology")),
            tags=frozenset(str(t) for t in tags),  # type: ignore[union-attr]
            type=str(data.get("type") or COMPONENT_TYPE),
            relationships=tuple(
                SerializedRelationship.from_dict(r)
                for r in relationships  # type: ignore[union-attr]
            ),
            metadata=_str_map(data.get("metadata")),
        )


@dataclass(frozen=True, slots=True)
class ContainerSnapshot:
    """Components of one container at snapshot time.

    Attributes:
        container_name: Container display name
        container_description: Container description
        container_technology: Container technology
        components: Component name → serialized component
    """

    container_name: str
    container_description: str | None = None
    container_technology: str | None = None
    components: Mapping[str, SerializedComponent] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.container_name:
            raise ValueError("container_name must not be empty")
        object.__setattr__(self, "components", _frozen_map(self.components))

    @property
    def component_count(self) -> int:
        """Number of components."""
        return len(self.components)

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-compatible dict."""
        return {
            "containerName": self.container_name,
            "containerDescription": self.container_description,
            "containerTechnology": self.container_technology,
            "componentCount": self.component_count,
            "components": {name: c.to_dict() for name, c in self.components.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ContainerSnapshot:
        """Create from JSON-compatible dict.

        componentCount is derived, the stored value is not trusted.
        """
        components = data.get("components") or {}
        return cls(
            container_name=str(data["containerName"]),
            container_description=_optional_str(data.get("containerDescription")),
            container_technology=_optional_str(data.get("containerTechnology")),
            components={
                str(name): SerializedComponent.from_dict(c)
                for name, c in components.items()  # type: ignore[union-attr]
            },
        )


@dataclass(frozen=True, slots=True)
class ComponentSnapshot:
    """Immutable record of all discovered components across containers.

    A new run always produces a new snapshot, never mutates a prior one.

    Attributes:
        timestamp: ISO-8601 creation time
        containers: Container key → container snapshot
        generated_by: Generator identity
        version: Format version
    """

    timestamp: str
    containers: Mapping[str, ContainerSnapshot] = field(
        default_factory=lambda: MappingProxyType({})
    )
    generated_by: str = GENERATED_BY
    version: str = FORMAT_VERSION

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.timestamp:
            raise ValueError("timestamp must not be empty")
        object.__setattr__(self, "containers", _frozen_map(self.containers))

    @property
    def component_count(self) -> int:
        """Total number of components across containers."""
        return sum(c.component_count for c in self.containers.values())

    def flatten(self) -> dict[str, SerializedComponent]:
        """Components keyed by compound key container::component."""
        return {
            f"{key}{KEY_SEPARATOR}{name}": component
            for key, container in self.containers.items()
            for name, component in container.components.items()
        }

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-compatible dict."""
        return {
            "timestamp": self.timestamp,
            "generatedBy": self.generated_by,
            "version": self.version,
            "containers": {key: c.to_dict() for key, c in self.containers.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ComponentSnapshot:
        """Create from JSON-compatible dict."""
        containers = data.get("containers") or {}
        return cls(
            timestamp=str(data["timestamp"]),
            containers={
                str(key): ContainerSnapshot.from_dict(c)
                for key, c in containers.items()  # type: ignore[union-attr]
            },
            generated_by=str(data.get("generatedBy") or GENERATED_BY),
            version=str(data.get("version") or FORMAT_VERSION),
        )


def _optional_str(value: object) -> str | None:
    return None if value is None else str(value)


def _str_map(value: object) -> dict[str, str]:
    if not value:
        return {}
    return {str(k): str(v) for k, v in value.items()}  # type: ignore[attr-defined]
