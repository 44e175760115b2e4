"""Domain model entities."""

from compscan.domain.model.annotation import (
    AnnotationEntry,
    ArrayValue,
    ClassValue,
    ConstantValue,
    ElementValue,
    ElementValuePair,
    EnumValue,
    NestedAnnotationValue,
    to_type_descriptor,
)
from compscan.domain.model.comparison import ComparisonResult
from compscan.domain.model.component import (
    ContainerComponents,
    DiscoveredComponent,
    Relationship,
)
from compscan.domain.model.container import (
    ComponentDetail,
    ContainerDefinition,
    RelationDetail,
    build_detail_map,
    normalize_component_name,
)
from compscan.domain.model.discovery_config import (
    DiscoveryConfiguration,
    GlobalDiscoveryConfig,
)
from compscan.domain.model.enums import StrategyKind
from compscan.domain.model.snapshot import (
    ComponentSnapshot,
    ContainerSnapshot,
    SerializedComponent,
    SerializedRelationship,
)
from compscan.domain.model.strategy import StrategyDescriptor
from compscan.domain.model.type_info import TypeInfo

__all__ = [
    # Enums
    "StrategyKind",
    # Type metadata
    "AnnotationEntry",
    "ArrayValue",
    "ClassValue",
    "ConstantValue",
    "ElementValue",
    "ElementValuePair",
    "EnumValue",
    "NestedAnnotationValue",
    "TypeInfo",
    "to_type_descriptor",
    # Configuration
    "StrategyDescriptor",
    "GlobalDiscoveryConfig",
    "DiscoveryConfiguration",
    "ContainerDefinition",
    "ComponentDetail",
    "RelationDetail",
    "build_detail_map",
    "normalize_component_name",
    # Discovery
    "DiscoveredComponent",
    "Relationship",
    "ContainerComponents",
    # Snapshots
    "ComponentSnapshot",
    "ContainerSnapshot",
    "SerializedComponent",
    "SerializedRelationship",
    "ComparisonResult",
]
