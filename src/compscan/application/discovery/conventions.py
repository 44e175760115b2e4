"""Naming conventions: global filters, synthesized descriptions, functional tags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from compscan.domain.model.type_info import NESTED_TYPE_MARKER

if TYPE_CHECKING:
    from compscan.domain.model.discovery_config import GlobalDiscoveryConfig
    from compscan.domain.model.type_info import TypeInfo

# fqn substring → functional tag, in tagging order
FUNCTIONAL_TAGS: tuple[tuple[str, str], ...] = (
    ("Factory", "Factory"),
    ("Impl", "Implementation"),
    ("Serializer", "Serializer"),
    ("Whiteboard", "Whiteboard"),
    ("Connector", "Connector"),
)

TEST_PACKAGE_MARKER = ".test."
TEST_NAME_SUFFIXES = ("Test", "Tests")


def is_test_type(fqn: str) -> bool:
    """fqn follows test naming conventions."""
    return TEST_PACKAGE_MARKER in fqn or fqn.endswith(TEST_NAME_SUFFIXES)


def is_excluded(type_info: TypeInfo, config: GlobalDiscoveryConfig) -> bool:
    """Type is dropped by the global filters.

    Args:
        type_info: Matched type
        config: Global settings (exclude flags)

    Returns:
        True if the type must not become a component
    """
    if config.exclude_inner_types and NESTED_TYPE_MARKER in type_info.fqn:
        return True
    return config.exclude_test_types and is_test_type(type_info.fqn)


def describe(name: str, fqn: str, strategy_name: str) -> str:
    """Synthesize a description from naming conventions.

    Args:
        name: Component name
        fqn: Fully qualified name of the matched type
        strategy_name: Strategy that found the component

    Returns:
        Description text
    """
    if "Factory" in fqn:
        return f"Factory component for creating {name.replace('Factory', '').lower()} instances"
    if "Impl" in fqn:
        return f"Implementation of {name.replace('Impl', '')} interface"
    if "Serializer" in fqn:
        return f"Serialization component for {name.replace('Serializer', '').lower()}"
    if "Whiteboard" in fqn:
        return (
            "Registration and tracking component for "
            f"{name.replace('Whiteboard', '').lower()}"
        )
    return f"Component discovered by {strategy_name}"


def functional_tags(fqn: str) -> tuple[str, ...]:
    """Tags inferred from substrings of the fully qualified name."""
    return tuple(tag for marker, tag in FUNCTIONAL_TAGS if marker in fqn)
