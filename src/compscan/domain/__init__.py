"""compscan domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, re, types, collections.abc
"""

from compscan.domain.exceptions import (
    ClassFileError,
    CompScanError,
    ConfigurationError,
    DuplicateComponentError,
    NoComponentsError,
    ScanTimeoutError,
    StrategyValidationError,
)
from compscan.domain.model import (
    ComparisonResult,
    ComponentDetail,
    ComponentSnapshot,
    ContainerComponents,
    ContainerDefinition,
    ContainerSnapshot,
    DiscoveredComponent,
    DiscoveryConfiguration,
    GlobalDiscoveryConfig,
    SerializedComponent,
    SerializedRelationship,
    StrategyDescriptor,
    StrategyKind,
    TypeInfo,
)
from compscan.domain.ports import (
    ReporterProtocol,
    SnapshotStorePort,
    TypeSourcePort,
)

__all__ = [
    # Exceptions
    "CompScanError",
    "ConfigurationError",
    "StrategyValidationError",
    "DuplicateComponentError",
    "ClassFileError",
    "ScanTimeoutError",
    "NoComponentsError",
    # Enums
    "StrategyKind",
    # Entities
    "TypeInfo",
    "StrategyDescriptor",
    "GlobalDiscoveryConfig",
    "DiscoveryConfiguration",
    "ContainerDefinition",
    "ComponentDetail",
    "DiscoveredComponent",
    "ContainerComponents",
    # Snapshots
    "ComponentSnapshot",
    "ContainerSnapshot",
    "SerializedComponent",
    "SerializedRelationship",
    "ComparisonResult",
    # Ports
    "TypeSourcePort",
    "SnapshotStorePort",
    "ReporterProtocol",
]
