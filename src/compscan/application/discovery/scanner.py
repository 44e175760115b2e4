"""Discovery scanner: applies enabled strategies to a container's scan root."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from compscan.application.discovery.conventions import describe, functional_tags, is_excluded
from compscan.application.discovery.enrichment import apply_enrichment
from compscan.application.strategies import build_matcher
from compscan.domain.exceptions import NoComponentsError
from compscan.domain.model.component import ContainerComponents, DiscoveredComponent

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from compscan.domain.matchers import TypeMatcher
    from compscan.domain.model.container import ComponentDetail, ContainerDefinition
    from compscan.domain.model.discovery_config import DiscoveryConfiguration
    from compscan.domain.model.strategy import StrategyDescriptor
    from compscan.domain.model.type_info import TypeInfo
    from compscan.domain.ports.type_source import TypeSourcePort

logger = logging.getLogger(__name__)


class ComponentScanner:
    """Populates containers with components found by their strategies.

    Strategies of a container run sequentially in configuration order;
    a later strategy matching an already-discovered type augments the
    existing component. Each strategy first collects its matches into a
    private list, merged into the container only when the strategy
    completed, so a failing strategy leaves no partial result.

    Failures are isolated per strategy: a strategy that fails validation
    or raises while scanning is logged and skipped, the others proceed.
    """

    def __init__(
        self,
        configuration: DiscoveryConfiguration,
        type_source: TypeSourcePort,
    ) -> None:
        """Initialize scanner.

        Args:
            configuration: Loaded discovery configuration (read-only)
            type_source: Provider of compiled type metadata
        """
        self._configuration = configuration
        self._type_source = type_source

    def scan_container(
        self,
        container: ContainerDefinition,
        details: Mapping[str, ComponentDetail] | None = None,
    ) -> ContainerComponents:
        """Discover components of one container.

        Zero components is a valid outcome: a container without enabled
        strategies or without an existing scan root yields an empty result.

        Args:
            container: Container to scan
            details: Declared details overriding container.details

        Returns:
            Components discovered for the container
        """
        result = ContainerComponents(
            key=container.key,
            name=container.name,
            description=container.description,
            technology=container.technology,
        )

        strategies = self._configuration.strategies_for(container.key)
        if not strategies:
            logger.info("No strategies configured for container '%s'", container.key)
            return result

        root = self._configuration.global_config.base_path(container.key)
        if root is None:
            logger.info("No base path configured for container '%s'", container.key)
            return result
        if not root.exists():
            logger.warning(
                "Path %s doesn't exist; skipping container '%s'", root, container.key
            )
            return result

        for strategy in strategies:
            self._run_strategy(result, root, strategy)

        enrichment = container.details if details is None else details
        if enrichment:
            apply_enrichment(result, enrichment)

        logger.info(
            "Container '%s': %d component(s) discovered", container.key, len(result)
        )
        return result

    def scan_all(
        self,
        detail_maps: Mapping[str, Mapping[str, ComponentDetail]] | None = None,
    ) -> dict[str, ContainerComponents]:
        """Discover components of every configured container.

        Containers are independent and scanned one after another.

        Args:
            detail_maps: Container key → declared details overriding the configured ones

        Returns:
            Container key → discovered components, in configuration order
        """
        results: dict[str, ContainerComponents] = {}
        for container in self._configuration.container_definitions():
            details = detail_maps.get(container.key) if detail_maps else None
            results[container.key] = self.scan_container(container, details)
        return results

    def _run_strategy(
        self,
        container: ContainerComponents,
        root: Path,
        strategy: StrategyDescriptor,
    ) -> None:
        """Apply one strategy, isolating its failures."""
        logger.debug("Applying strategy '%s' to %s", strategy.name, root)
        try:
            matcher = build_matcher(strategy)
            matches = self._collect_matches(matcher, root)
        except Exception:  # isolated per strategy, logged with traceback
            logger.error(
                "Strategy '%s' (%s) failed for container '%s'",
                strategy.name,
                strategy.kind.value,
                container.key,
                exc_info=True,
            )
            return

        for type_info in matches:
            self._add_component(container, type_info, strategy)
        logger.debug("Strategy '%s' matched %d type(s)", strategy.name, len(matches))

    def _collect_matches(self, matcher: TypeMatcher, root: Path) -> list[TypeInfo]:
        """Run matcher over every type under root, applying global filters."""
        global_config = self._configuration.global_config
        return [
            type_info
            for type_info in self._type_source.iter_types(root)
            if matcher(type_info) and not is_excluded(type_info, global_config)
        ]

    def _add_component(
        self,
        container: ContainerComponents,
        type_info: TypeInfo,
        strategy: StrategyDescriptor,
    ) -> None:
        """Add or augment component for a matched type."""
        technology = self._configuration.global_config.technology(container.key)
        component = container.add(
            DiscoveredComponent(name=type_info.name, fqn=type_info.fqn, technology=technology)
        )

        if not component.has_description:
            component.description = describe(component.name, type_info.fqn, strategy.name)

        component.add_tags(strategy.kind.provenance_tag, *functional_tags(type_info.fqn))
        logger.debug(
            "Discovered component '%s' using strategy '%s'", component.name, strategy.name
        )


def require_components(results: Mapping[str, ContainerComponents]) -> int:
    """Check that at least one component was discovered.

    Args:
        results: Container key → discovered components

    Returns:
        Total number of components

    Raises:
        NoComponentsError: If no container holds a component
    """
    total = sum(len(c) for c in results.values())
    if total == 0:
        raise NoComponentsError(len(results))
    logger.info(
        "%d component(s) found across %d container(s)", total, len(results)
    )
    return total
