"""Type matchers.

Each factory validates its arguments immediately and returns a pure
predicate over TypeInfo. Predicates never raise for well-formed TypeInfo.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from compscan.domain.matchers.base import TypeMatcher
from compscan.domain.model.annotation import ArrayValue, to_type_descriptor

if TYPE_CHECKING:
    from compscan.domain.model.type_info import TypeInfo


def _require(value: str | None, what: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{what} must be supplied")
    return value


def has_annotation(annotation_type: str) -> TypeMatcher:
    """Create matcher: type carries annotation.

    Args:
        annotation_type: Dotted annotation name (e.g., "com.acme.Service")

    Returns:
        Matcher function

    Raises:
        ValueError: If annotation_type is empty
    """
    descriptor = to_type_descriptor(_require(annotation_type, "annotation type"))

    def matcher(type_info: TypeInfo) -> bool:
        return any(a.type_descriptor == descriptor for a in type_info.annotations)

    return matcher


def has_name_matching(pattern: str) -> TypeMatcher:
    """Create matcher: fully qualified name matches regex in full.

    Args:
        pattern: Regular expression pattern

    Returns:
        Matcher function

    Raises:
        ValueError: If pattern is empty or invalid
    """
    _require(pattern, "pattern")
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise ValueError(f"Invalid regex '{pattern}': {e}") from e

    def matcher(type_info: TypeInfo) -> bool:
        return compiled.fullmatch(type_info.fqn) is not None

    return matcher


def has_name_ending_with(suffix: str) -> TypeMatcher:
    """Create matcher: simple name ends with suffix.

    Args:
        suffix: Required suffix

    Returns:
        Matcher function

    Raises:
        ValueError: If suffix is empty
    """
    _require(suffix, "suffix")

    def matcher(type_info: TypeInfo) -> bool:
        return type_info.name.endswith(suffix)

    return matcher


def has_annotation_property(
    annotation_type: str,
    property_name: str,
    annotation_property: str,
) -> TypeMatcher:
    """Create matcher: annotation array element declares a property.

    Matches types like:

        @Component(property = {"connector=isma.himsa", "version=2.1"})

    with annotation_type="...Component", annotation_property="property",
    property_name="connector". Only the first entry of the annotation type
    is inspected.

    Args:
        annotation_type: Dotted annotation name
        property_name: Property looked up as "<property_name>=" prefix
        annotation_property: Annotation element holding the string array

    Returns:
        Matcher function

    Raises:
        ValueError: If any argument is empty
    """
    descriptor = to_type_descriptor(_require(annotation_type, "annotation type"))
    prefix = _require(property_name, "property name") + "="
    element_name = _require(annotation_property, "annotation property")

    def matcher(type_info: TypeInfo) -> bool:
        for entry in type_info.annotations:
            if entry.type_descriptor != descriptor:
                continue
            value = entry.element(element_name)
            if not isinstance(value, ArrayValue):
                return False
            return any(v.stringify().startswith(prefix) for v in value.values)
        return False

    return matcher
