"""Strategy registry: declarative descriptors → matchers.

validate() is the single point of truth for required parameters;
create_matcher() trusts a validated descriptor and never re-validates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from types import MappingProxyType
from typing import TYPE_CHECKING

from compscan.domain.exceptions import ConfigurationError, StrategyValidationError
from compscan.domain.matchers import (
    has_annotation,
    has_annotation_property,
    has_name_ending_with,
    has_name_matching,
)
from compscan.domain.model.enums import StrategyKind

if TYPE_CHECKING:
    from compscan.domain.matchers import TypeMatcher
    from compscan.domain.model.strategy import StrategyDescriptor

logger = logging.getLogger(__name__)

# Key reported when a descriptor is not mapped to any container
CONTAINER_KEY = "containerMapping"

# Required parameter keys per kind, in the order they are checked
REQUIRED_PARAMETERS: MappingProxyType[StrategyKind, tuple[str, ...]] = MappingProxyType(
    {
        StrategyKind.ANNOTATION: ("annotationType",),
        StrategyKind.REGEX: ("pattern",),
        StrategyKind.NAME_SUFFIX: ("suffix",),
        StrategyKind.ANNOTATION_PROPERTY: (
            "annotationType",
            "propertyName",
            "annotationProperty",
        ),
    }
)


def _annotation(d: StrategyDescriptor) -> TypeMatcher:
    return has_annotation(str(d.parameters["annotationType"]))


def _regex(d: StrategyDescriptor) -> TypeMatcher:
    return has_name_matching(str(d.parameters["pattern"]))


def _name_suffix(d: StrategyDescriptor) -> TypeMatcher:
    return has_name_ending_with(str(d.parameters["suffix"]))


def _annotation_property(d: StrategyDescriptor) -> TypeMatcher:
    return has_annotation_property(
        str(d.parameters["annotationType"]),
        str(d.parameters["propertyName"]),
        str(d.parameters["annotationProperty"]),
    )


# Registry - one factory per kind
_FACTORIES: MappingProxyType[StrategyKind, Callable[[StrategyDescriptor], TypeMatcher]] = (
    MappingProxyType(
        {
            StrategyKind.ANNOTATION: _annotation,
            StrategyKind.REGEX: _regex,
            StrategyKind.NAME_SUFFIX: _name_suffix,
            StrategyKind.ANNOTATION_PROPERTY: _annotation_property,
        }
    )
)


def validate(descriptor: StrategyDescriptor) -> None:
    """Check descriptor has its container mapping and every required parameter.

    Args:
        descriptor: Strategy to check

    Raises:
        StrategyValidationError: Naming the strategy and the first missing key
            (null, empty and blank values count as missing)
    """
    if not descriptor.container:
        raise StrategyValidationError(descriptor.name, CONTAINER_KEY)

    for key in REQUIRED_PARAMETERS[descriptor.kind]:
        value = descriptor.parameter(key)
        if value is None or not value.strip():
            raise StrategyValidationError(descriptor.name, key, descriptor.kind.value)


def validate_all(descriptors: Iterable[StrategyDescriptor]) -> None:
    """Validate every descriptor and compile its matcher, failing on the first invalid one.

    Run before any scanning starts: a configuration error aborts the run.
    Compiling catches values that are present but unusable (e.g., invalid regex).

    Raises:
        StrategyValidationError: For the first descriptor missing a key
        ConfigurationError: For the first descriptor with an unusable value
    """
    count = 0
    for descriptor in descriptors:
        validate(descriptor)
        try:
            create_matcher(descriptor)
        except ValueError as e:
            raise ConfigurationError(f"strategy '{descriptor.name}': {e}") from e
        count += 1
    logger.debug("Validated %d strategy descriptor(s)", count)


def create_matcher(descriptor: StrategyDescriptor) -> TypeMatcher:
    """Create matcher for a validated descriptor.

    Args:
        descriptor: Descriptor that passed validate()

    Returns:
        Matcher function

    Raises:
        ValueError: If a parameter value is unusable (e.g., invalid regex)
    """
    return _FACTORIES[descriptor.kind](descriptor)


def build_matcher(descriptor: StrategyDescriptor) -> TypeMatcher:
    """Validate descriptor, then create its matcher.

    Raises:
        StrategyValidationError: If a required key is missing
        ValueError: If a parameter value is unusable
    """
    validate(descriptor)
    return create_matcher(descriptor)
