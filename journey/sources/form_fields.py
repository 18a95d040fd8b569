"""Providers that offer fields of upstream forms.

Direct dependencies are the forms a node lists in its prerequisites;
transitive dependencies are reached only through other forms.  Both
providers build one group per dependency node.
"""

from __future__ import annotations

from journey.graph.fields import get_form_fields
from journey.graph.index import build_node_index
from journey.graph.resolver import get_direct_dependencies, get_transitive_dependencies
from journey.models.graph import BlueprintGraph, FormNode, MappingType
from journey.models.sources import DataSourceGroup, DataSourceItem
from journey.sources.base import DataSourceProvider


class _DependencyFieldsProvider(DataSourceProvider):
    """Shared group construction for the dependency-field providers."""

    group_description: str

    def _group_for_node(self, dependency: FormNode, graph: BlueprintGraph) -> DataSourceGroup:
        return DataSourceGroup(
            id=f"form-{dependency.id}",
            name=dependency.name,
            type="form",
            description=self.group_description,
            items=[
                DataSourceItem(
                    id=f"{dependency.id}:{field.id}",
                    label=f"{dependency.name}.{field.name}",
                    type=MappingType.FORM_FIELD,
                    source_id=dependency.id,
                    source_name=dependency.name,
                    field_id=field.id,
                    field_name=field.name,
                    field_type=field.avantos_type or field.type,
                )
                for field in get_form_fields(dependency, graph)
            ],
        )


class DirectDependencyFieldsProvider(_DependencyFieldsProvider):
    """Fields of the forms a node immediately depends on."""

    id = "direct-dependencies"
    name = "Direct Dependencies"
    priority = 10
    group_description = "Direct dependency"

    def is_applicable(self, node: FormNode, graph: BlueprintGraph) -> bool:
        # Dangling prerequisite ids still count.
        return len(node.prerequisites) > 0

    def get_data_sources(self, node: FormNode, graph: BlueprintGraph) -> list[DataSourceGroup]:
        index = build_node_index(graph.nodes)
        return [self._group_for_node(dep, graph) for dep in get_direct_dependencies(node, index)]


class TransitiveDependencyFieldsProvider(_DependencyFieldsProvider):
    """Fields of the forms a node depends on through other forms."""

    id = "transitive-dependencies"
    name = "Transitive Dependencies"
    priority = 20
    group_description = "Transitive dependency"

    def is_applicable(self, node: FormNode, graph: BlueprintGraph) -> bool:
        index = build_node_index(graph.nodes)
        return len(get_transitive_dependencies(node, index)) > 0

    def get_data_sources(self, node: FormNode, graph: BlueprintGraph) -> list[DataSourceGroup]:
        index = build_node_index(graph.nodes)
        return [self._group_for_node(dep, graph) for dep in get_transitive_dependencies(node, index)]
