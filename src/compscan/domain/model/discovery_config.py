"""Discovery configuration loaded once per run."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from compscan.domain.model.container import ContainerDefinition

if TYPE_CHECKING:
    from compscan.domain.model.strategy import StrategyDescriptor

# Technology label used when a container has no default technology
FALLBACK_TECHNOLOGY = "Java"


@dataclass(frozen=True, slots=True)
class GlobalDiscoveryConfig:
    """Settings shared by all strategies.

    Attributes:
        base_paths: Container key → scan root
        default_technologies: Container key → technology label
        exclude_inner_types: Drop nested types ($ in fqn)
        exclude_test_types: Drop types following test naming conventions
    """

    base_paths: Mapping[str, Path] = field(default_factory=lambda: MappingProxyType({}))
    default_technologies: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    exclude_inner_types: bool = True
    exclude_test_types: bool = True

    def base_path(self, container: str) -> Path | None:
        """Scan root for container, None if not configured."""
        return self.base_paths.get(container)

    def technology(self, container: str) -> str:
        """Default technology for container, with fallback."""
        return self.default_technologies.get(container) or FALLBACK_TECHNOLOGY


@dataclass(frozen=True, slots=True)
class DiscoveryConfiguration:
    """Complete discovery configuration.

    Immutable after load; may be shared by all containers.

    Attributes:
        strategies: All strategy descriptors, in configuration order
        global_config: Global settings
        containers: Explicit container definitions by key
    """

    strategies: tuple[StrategyDescriptor, ...] = ()
    global_config: GlobalDiscoveryConfig = field(default_factory=GlobalDiscoveryConfig)
    containers: Mapping[str, ContainerDefinition] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def strategies_for(self, container: str) -> tuple[StrategyDescriptor, ...]:
        """Enabled strategies mapped to container, in configuration order."""
        return tuple(s for s in self.strategies if s.targets(container))

    def container_definitions(self) -> tuple[ContainerDefinition, ...]:
        """All containers to scan.

        Explicit definitions first, then implicit ones for keys that only
        appear in base paths or strategy mappings.
        """
        seen: dict[str, ContainerDefinition] = dict(self.containers)
        implicit = [*self.global_config.base_paths, *(s.container for s in self.strategies)]
        for key in implicit:
            if key and key not in seen:
                seen[key] = ContainerDefinition(key=key)
        return tuple(seen.values())
