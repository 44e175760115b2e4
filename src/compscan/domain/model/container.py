"""Container definitions and declarative component details.

A container declares an optional list of component details used to enrich
discovered components (technology, tags, description, relations).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from compscan.domain.exceptions import DuplicateComponentError


@dataclass(frozen=True, slots=True)
class RelationDetail:
    """Declared outgoing relation.

    Attributes:
        target: Target component name (exact, within the same container)
        kind: Relationship kind label (e.g., "uses", "calls")
    """

    target: str
    kind: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.target:
            raise ValueError("relation target must not be empty")


@dataclass(frozen=True, slots=True)
class ComponentDetail:
    """Declared metadata of one component.

    Attributes:
        component_name: Name matched case-insensitively against discovered components
        technology: Technology override
        tags: Tags to add
        description: Description override
        relations: Outgoing relations to add
    """

    component_name: str
    technology: str | None = None
    tags: frozenset[str] = frozenset()
    description: str | None = None
    relations: tuple[RelationDetail, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.component_name:
            raise ValueError("component_name must not be empty")

    @staticmethod
    def split_tags(tags: str | None) -> frozenset[str]:
        """Split comma-separated tag string into a tag set."""
        if not tags:
            return frozenset()
        return frozenset(t.strip() for t in tags.split(",") if t.strip())


def normalize_component_name(name: str) -> str:
    """Key under which declared details match component names."""
    return name.strip().lower()


def build_detail_map(
    container: str,
    details: Iterable[ComponentDetail],
) -> Mapping[str, ComponentDetail]:
    """Index declared component details by name.

    Args:
        container: Container key (for error reporting)
        details: Declared details in file order

    Returns:
        Read-only name → detail mapping, declaration order kept

    Raises:
        DuplicateComponentError: If two details share a name, ignoring case
            and surrounding whitespace
    """
    by_name: dict[str, ComponentDetail] = {}
    seen: set[str] = set()
    for detail in details:
        key = normalize_component_name(detail.component_name)
        if key in seen:
            raise DuplicateComponentError(container, detail.component_name)
        seen.add(key)
        by_name[detail.component_name] = detail
    return MappingProxyType(by_name)


@dataclass(frozen=True, slots=True)
class ContainerDefinition:
    """Logical container (architectural layer) to scan.

    Attributes:
        key: Identifier strategies map to
        name: Display name (defaults to key)
        description: Container description
        technology: Container technology
        details: Declared component details by name
    """

    key: str
    name: str = ""
    description: str | None = None
    technology: str | None = None
    details: Mapping[str, ComponentDetail] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.key:
            raise ValueError("container key must not be empty")

        if not self.name:
            object.__setattr__(self, "name", self.key)
