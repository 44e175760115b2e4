"""Annotation metadata value objects.

Mirror of what a compiled type exposes about its annotations:
an entry per annotation, each with named element-value pairs.
Element values form a tagged union, all rendering to text via stringify().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class ConstantValue:
    """Primitive or string constant element value.

    Attributes:
        tag: Element tag (B, C, D, F, I, J, S, Z or s)
        value: Decoded constant
    """

    tag: str
    value: str | int | float | bool

    def stringify(self) -> str:
        """Render as text the way the constant reads in source."""
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        return str(self.value)


@dataclass(frozen=True, slots=True)
class EnumValue:
    """Enum constant element value.

    Attributes:
        type_descriptor: Enum type in internal form (Lcom/x/Kind;)
        constant: Enum constant name
    """

    type_descriptor: str
    constant: str

    def stringify(self) -> str:
        """Render as text (constant name only)."""
        return self.constant


@dataclass(frozen=True, slots=True)
class ClassValue:
    """Class literal element value.

    Attributes:
        descriptor: Return descriptor of the class literal (Lcom/x/Type;)
    """

    descriptor: str

    def stringify(self) -> str:
        """Render as text."""
        return self.descriptor


@dataclass(frozen=True, slots=True)
class ArrayValue:
    """Array element value.

    Attributes:
        values: Array elements in declaration order
    """

    values: tuple[ElementValue, ...] = ()

    def stringify(self) -> str:
        """Render as text: [a, b, c]."""
        return "[" + ", ".join(v.stringify() for v in self.values) + "]"


@dataclass(frozen=True, slots=True)
class NestedAnnotationValue:
    """Annotation used as an element value."""

    annotation: AnnotationEntry

    def stringify(self) -> str:
        """Render as text."""
        return str(self.annotation)


ElementValue: TypeAlias = ConstantValue | EnumValue | ClassValue | ArrayValue | NestedAnnotationValue


@dataclass(frozen=True, slots=True)
class ElementValuePair:
    """Named element of an annotation.

    Attributes:
        name: Element name (e.g., "property")
        value: Element value
    """

    name: str
    value: ElementValue

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("element name must not be empty")


@dataclass(frozen=True, slots=True)
class AnnotationEntry:
    """Annotation attached to a compiled type.

    Attributes:
        type_descriptor: Annotation type in internal form
            (e.g., "Lorg/osgi/service/component/annotations/Component;")
        elements: Explicitly given element-value pairs
        runtime_visible: Retained for runtime reflection
    """

    type_descriptor: str
    elements: tuple[ElementValuePair, ...] = ()
    runtime_visible: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type_descriptor:
            raise ValueError("annotation type_descriptor must not be empty")

    def element(self, name: str) -> ElementValue | None:
        """Get element value by name, None if not given."""
        for pair in self.elements:
            if pair.name == name:
                return pair.value
        return None

    def __str__(self) -> str:
        """Format as @Type(name=value, ...)."""
        args = ", ".join(f"{p.name}={p.value.stringify()}" for p in self.elements)
        return f"@{self.type_descriptor}({args})"


def to_type_descriptor(dotted_name: str) -> str:
    """Convert dotted type name to internal descriptor form.

    Example:
        >>> to_type_descriptor("org.osgi.service.component.annotations.Component")
        'Lorg/osgi/service/component/annotations/Component;'
    """
    return "L" + dotted_name.replace(".", "/") + ";"
