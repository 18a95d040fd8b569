"""Graph indexing, dependency resolution, field extraction and mapping edits."""

from journey.graph.fields import get_form_definition, get_form_fields
from journey.graph.index import build_node_index
from journey.graph.mapping import clear_prefill_mapping, update_prefill_mapping
from journey.graph.resolver import (
    TopologyReport,
    analyze_topology,
    get_all_ancestors,
    get_all_dependencies,
    get_dependents,
    get_direct_dependencies,
    get_transitive_dependencies,
    topological_sort,
)

__all__ = [
    "build_node_index",
    "get_direct_dependencies",
    "get_transitive_dependencies",
    "get_all_dependencies",
    "get_all_ancestors",
    "get_dependents",
    "analyze_topology",
    "topological_sort",
    "TopologyReport",
    "get_form_definition",
    "get_form_fields",
    "update_prefill_mapping",
    "clear_prefill_mapping",
]
