"""Pydantic v2 data models for blueprint graphs and data sources."""

from journey.models.graph import (
    BlueprintGraph,
    DependencyInfo,
    Edge,
    FieldInfo,
    FieldSchema,
    FormDefinition,
    FormNode,
    MappingType,
    NodeData,
    PrefillMapping,
)
from journey.models.sources import (
    DataSourceGroup,
    DataSourceItem,
    GlobalDataSourceConfig,
    GlobalField,
)

__all__ = [
    "BlueprintGraph",
    "DependencyInfo",
    "Edge",
    "FieldInfo",
    "FieldSchema",
    "FormDefinition",
    "FormNode",
    "MappingType",
    "NodeData",
    "PrefillMapping",
    "DataSourceGroup",
    "DataSourceItem",
    "GlobalDataSourceConfig",
    "GlobalField",
]
