"""Domain enumerations."""

from __future__ import annotations

from enum import Enum


class StrategyKind(Enum):
    """Kind of a component discovery strategy.

    Value is the name used in configuration files.
    """

    ANNOTATION = "ANNOTATION"  # annotation presence
    REGEX = "REGEX"  # fully-qualified name matches pattern
    NAME_SUFFIX = "NAME_SUFFIX"  # simple name ends with suffix
    ANNOTATION_PROPERTY = "ANNOTATION_PROPERTY"  # annotation array element "name=..."

    @classmethod
    def parse(cls, value: str) -> StrategyKind:
        """Parse configuration value into a kind.

        CUSTOM_ANNOTATION is accepted as an alias of ANNOTATION_PROPERTY.

        Raises:
            ValueError: If value names no known kind
        """
        if value == "CUSTOM_ANNOTATION":
            return cls.ANNOTATION_PROPERTY
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(k.value for k in cls)
            raise ValueError(f"unknown strategy type '{value}' (expected one of: {known})") from None

    @property
    def provenance_tag(self) -> str:
        """Tag attached to every component found by this kind of strategy."""
        match self:
            case StrategyKind.ANNOTATION | StrategyKind.ANNOTATION_PROPERTY:
                return "Annotated"
            case StrategyKind.REGEX:
                return "Pattern-Matched"
            case StrategyKind.NAME_SUFFIX:
                return "Convention-Based"
