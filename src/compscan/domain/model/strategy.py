"""Strategy descriptor: declarative component discovery rule."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from compscan.domain.model.enums import StrategyKind


@dataclass(frozen=True, slots=True)
class StrategyDescriptor:
    """Named, declarative rule describing how to find components.

    Kind-specific parameters are NOT validated here: the strategy registry
    is the single point of truth for them (see validate()).

    Attributes:
        name: Human-readable label, used in diagnostics
        kind: Which matcher the strategy compiles to
        parameters: Kind-specific parameters (scalar values)
        container: Target container key. None = unmapped (invalid)
        enabled: Disabled strategies are never applied
    """

    name: str
    kind: StrategyKind
    parameters: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))
    container: str | None = None
    enabled: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("strategy name must not be empty")

        if not isinstance(self.kind, StrategyKind):
            raise TypeError(f"kind must be StrategyKind, got {type(self.kind).__name__}")

        if not isinstance(self.parameters, MappingProxyType):
            object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def parameter(self, key: str) -> str | None:
        """Get parameter as text. None if absent or null."""
        value = self.parameters.get(key)
        return None if value is None else str(value)

    def targets(self, container: str) -> bool:
        """Strategy is enabled and mapped to container."""
        return self.enabled and self.container == container
