"""Enrichment of discovered components from declared component details.

Only augments already-discovered components, never creates new ones.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from compscan.domain.exceptions import DuplicateComponentError
from compscan.domain.model.component import DEFAULT_RELATIONSHIP_KIND, Relationship
from compscan.domain.model.container import normalize_component_name

if TYPE_CHECKING:
    from collections.abc import Mapping

    from compscan.domain.model.component import ContainerComponents
    from compscan.domain.model.container import ComponentDetail

logger = logging.getLogger(__name__)


def apply_enrichment(
    container: ContainerComponents,
    details: Mapping[str, ComponentDetail],
) -> int:
    """Apply declared details to matching components.

    A detail applies to the component whose name equals the detail key
    case-insensitively (surrounding whitespace ignored). Relations are added
    only when the target exists in the container under its exact name;
    otherwise they are dropped with a warning.

    Args:
        container: Components discovered for the container (mutated)
        details: Declared details by component name

    Returns:
        Number of relationships added

    Raises:
        DuplicateComponentError: If two detail keys differ only in case
    """
    if not details:
        return 0

    by_normalized: dict[str, ComponentDetail] = {}
    for key, detail in details.items():
        normalized = normalize_component_name(key)
        if normalized in by_normalized:
            raise DuplicateComponentError(container.key, key)
        by_normalized[normalized] = detail

    added = 0
    for component in list(container.components.values()):
        detail = by_normalized.get(normalize_component_name(component.name))
        if detail is None:
            continue

        if detail.technology is not None:
            component.technology = detail.technology
        if detail.tags:
            component.add_tags(*detail.tags)
        if detail.description is not None:
            component.description = detail.description

        for relation in detail.relations:
            if container.get(relation.target) is None:
                logger.warning(
                    "Relation target '%s' not found in container '%s'; dropped relation from '%s'",
                    relation.target,
                    container.key,
                    component.name,
                )
                continue

            kind = relation.kind or DEFAULT_RELATIONSHIP_KIND
            relationship = Relationship(target=relation.target, kind=kind, description=kind)
            if component.add_relationship(relationship):
                added += 1
                logger.debug(
                    "Added relation %s -[%s]-> %s", component.name, kind, relation.target
                )

    return added
