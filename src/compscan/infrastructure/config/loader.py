"""Loading of the declarative discovery configuration.

The document is validated against CONFIGURATION_SCHEMA before any domain
object is built. Declared component lists are indexed by name at load time,
so duplicate names fail here rather than at scan time.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from jsonschema import Draft7Validator

from compscan.domain.exceptions import ConfigurationError
from compscan.domain.model.container import (
    ComponentDetail,
    ContainerDefinition,
    RelationDetail,
    build_detail_map,
)
from compscan.domain.model.discovery_config import DiscoveryConfiguration, GlobalDiscoveryConfig
from compscan.domain.model.enums import StrategyKind
from compscan.domain.model.strategy import StrategyDescriptor
from compscan.infrastructure.config.schema import CONFIGURATION_SCHEMA

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

_VALIDATOR = Draft7Validator(dict(CONFIGURATION_SCHEMA))


def load_configuration(path: Path) -> DiscoveryConfiguration:
    """Load configuration from a JSON file.

    Args:
        path: Configuration file

    Returns:
        Immutable discovery configuration

    Raises:
        ConfigurationError: If file is missing, not JSON or invalid
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(f"configuration file not found: {path}") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{path} is not valid JSON: {e}") from e

    configuration = parse_configuration(document)
    logger.info(
        "Loaded %d strateg(ies) and %d container(s) from %s",
        len(configuration.strategies),
        len(configuration.container_definitions()),
        path,
    )
    return configuration


def parse_configuration(document: Any) -> DiscoveryConfiguration:
    """Build configuration from a parsed JSON document.

    Raises:
        ConfigurationError: If document violates the schema
        DuplicateComponentError: If a container declares a component twice
    """
    errors = sorted(_VALIDATOR.iter_errors(document), key=lambda e: [str(p) for p in e.absolute_path])
    if errors:
        details = "; ".join(
            f"{'/'.join(str(p) for p in e.absolute_path) or '<root>'}: {e.message}"
            for e in errors
        )
        raise ConfigurationError(details)

    global_config = _parse_global_config(document.get("globalConfig") or {})
    strategies = tuple(_parse_strategy(s) for s in document["strategies"])
    containers = {
        key: _parse_container(key, data)
        for key, data in (document.get("containers") or {}).items()
    }

    return DiscoveryConfiguration(
        strategies=strategies,
        global_config=global_config,
        containers=MappingProxyType(containers),
    )


def _parse_strategy(data: Mapping[str, Any]) -> StrategyDescriptor:
    return StrategyDescriptor(
        name=data["name"],
        kind=StrategyKind.parse(data["type"]),
        parameters=data.get("config") or {},
        container=data.get("containerMapping"),
        enabled=data.get("enabled", True),
    )


def _parse_global_config(data: Mapping[str, Any]) -> GlobalDiscoveryConfig:
    base_paths = {key: Path(value) for key, value in (data.get("basePaths") or {}).items()}
    return GlobalDiscoveryConfig(
        base_paths=MappingProxyType(base_paths),
        default_technologies=MappingProxyType(dict(data.get("defaultTechnologies") or {})),
        exclude_inner_types=data.get("excludeInnerClasses", True),
        exclude_test_types=data.get("excludeTestClasses", True),
    )


def _parse_detail(data: Mapping[str, Any]) -> ComponentDetail:
    return ComponentDetail(
        component_name=data["componentName"],
        technology=data.get("technology"),
        tags=ComponentDetail.split_tags(data.get("tags")),
        description=data.get("description"),
        relations=tuple(
            RelationDetail(target=r["target"], kind=r.get("type"))
            for r in data.get("relations") or ()
        ),
    )


def _parse_container(key: str, data: Mapping[str, Any]) -> ContainerDefinition:
    details = build_detail_map(key, (_parse_detail(d) for d in data.get("objectMapper") or ()))
    return ContainerDefinition(
        key=key,
        name=data.get("name") or key,
        description=data.get("description"),
        technology=data.get("technology"),
        details=details,
    )
