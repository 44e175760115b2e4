"""Discovered components and the live per-container discovery state."""

from __future__ import annotations

from dataclasses import dataclass, field

# Relationship kind used when none is declared
DEFAULT_RELATIONSHIP_KIND = "uses"


@dataclass(frozen=True, slots=True)
class Relationship:
    """Outgoing relationship of a component.

    Attributes:
        target: Target component name
        kind: Relationship kind label
        description: Free-form description
        properties: Free-form properties
    """

    target: str
    kind: str = DEFAULT_RELATIONSHIP_KIND
    description: str | None = None
    properties: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.target:
            raise ValueError("relationship target must not be empty")
        if not self.kind:
            raise ValueError("relationship kind must not be empty")


@dataclass(slots=True)
class DiscoveredComponent:
    """Component found by a strategy.

    Mutable while its container is scanned: later strategies and the
    enrichment map augment it. Frozen into a snapshot afterwards.

    Attributes:
        name: Component name (identity within the container)
        fqn: Fully qualified name of the matched type
        technology: Technology label
        description: Description, None until synthesized or declared
        tags: Tag set
        relationships: Outgoing relationships in discovery order
        metadata: Free-form metadata
    """

    name: str
    fqn: str
    technology: str | None = None
    description: str | None = None
    tags: set[str] = field(default_factory=set)
    relationships: list[Relationship] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("component name must not be empty")
        if not self.fqn:
            raise ValueError("component fqn must not be empty")

    @property
    def has_description(self) -> bool:
        """Description is set and not blank."""
        return bool(self.description and self.description.strip())

    def add_tags(self, *tags: str) -> None:
        """Add tags, ignoring blanks."""
        self.tags.update(t.strip() for t in tags if t and t.strip())

    def add_relationship(self, relationship: Relationship) -> bool:
        """Add relationship unless an identical one exists.

        Returns:
            True if added
        """
        if relationship in self.relationships:
            return False
        self.relationships.append(relationship)
        return True


@dataclass(slots=True)
class ContainerComponents:
    """Components discovered for one container.

    Attributes:
        key: Container key
        name: Container display name
        description: Container description
        technology: Container technology
        components: Name → component, in discovery order
    """

    key: str
    name: str
    description: str | None = None
    technology: str | None = None
    components: dict[str, DiscoveredComponent] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.key:
            raise ValueError("container key must not be empty")
        if not self.name:
            raise ValueError("container name must not be empty")

    def __len__(self) -> int:
        return len(self.components)

    def get(self, name: str) -> DiscoveredComponent | None:
        """Component with exact name, None if absent."""
        return self.components.get(name)

    def add(self, component: DiscoveredComponent) -> DiscoveredComponent:
        """Add component, or return the existing one with the same name."""
        existing = self.components.get(component.name)
        if existing is not None:
            return existing
        self.components[component.name] = component
        return component
