"""Compiled type value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from compscan.domain.model.annotation import AnnotationEntry

# Marker separating outer and nested type names in binary names
NESTED_TYPE_MARKER = "$"


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """Metadata of one compiled type, as exposed by a type source.

    Attributes:
        name: Simple name (last segment of fqn, nested marker kept)
        fqn: Fully qualified dotted name (e.g., "com.acme.Outer$Inner")
        annotations: Annotation entries attached to the type
    """

    name: str
    fqn: str
    annotations: tuple[AnnotationEntry, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("type name must not be empty")

        if not self.fqn:
            raise ValueError("fqn must not be empty")

        if not self.fqn.endswith(self.name):
            raise ValueError(f"fqn '{self.fqn}' must end with name '{self.name}'")

    @property
    def package(self) -> str:
        """Package part of fqn ("" for the default package)."""
        head, _, _ = self.fqn.rpartition(".")
        return head

    @property
    def is_nested(self) -> bool:
        """Type is nested inside another type."""
        return NESTED_TYPE_MARKER in self.fqn

    @classmethod
    def from_fqn(cls, fqn: str, annotations: tuple[AnnotationEntry, ...] = ()) -> TypeInfo:
        """Create from fully qualified name, deriving the simple name."""
        return cls(name=fqn.rpartition(".")[2], fqn=fqn, annotations=annotations)
