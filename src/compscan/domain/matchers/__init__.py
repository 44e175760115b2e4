"""Matchers: pure predicates deciding whether a compiled type is a component."""

from compscan.domain.matchers.base import TypeMatcher
from compscan.domain.matchers.type_matchers import (
    has_annotation,
    has_annotation_property,
    has_name_ending_with,
    has_name_matching,
)

__all__ = [
    "TypeMatcher",
    "has_annotation",
    "has_annotation_property",
    "has_name_ending_with",
    "has_name_matching",
]
