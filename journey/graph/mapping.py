"""Copy-on-write edits to a node's prefill mappings.

The input graph is never touched; each edit returns a new
:class:`BlueprintGraph` sharing every unchanged node with the original.
"""

from __future__ import annotations

from typing import Optional

import structlog

from journey.errors import NodeNotFoundError
from journey.models.graph import BlueprintGraph, PrefillMapping

logger = structlog.get_logger(__name__)


def update_prefill_mapping(
    graph: BlueprintGraph,
    node_id: str,
    field_id: str,
    mapping: Optional[PrefillMapping],
) -> BlueprintGraph:
    """Return a copy of *graph* with one field's mapping set or removed.

    Args:
        graph: The current graph snapshot.
        node_id: Id of the node owning the target field.
        field_id: Target field id within the node's form.
        mapping: The new mapping, or ``None`` to remove any existing one.

    Returns:
        A new graph value.

    Raises:
        NodeNotFoundError: If no node has id *node_id*.
    """
    position = next((i for i, n in enumerate(graph.nodes) if n.id == node_id), None)
    if position is None:
        raise NodeNotFoundError(node_id)

    node = graph.nodes[position]
    input_mapping = dict(node.data.input_mapping)
    if mapping is None:
        input_mapping.pop(field_id, None)
    else:
        input_mapping[field_id] = mapping

    updated_node = node.model_copy(
        update={"data": node.data.model_copy(update={"input_mapping": input_mapping})}
    )
    nodes = list(graph.nodes)
    nodes[position] = updated_node

    logger.info(
        "prefill_mapping_updated",
        node_id=node_id,
        field_id=field_id,
        cleared=mapping is None,
    )
    return graph.model_copy(update={"nodes": nodes})


def clear_prefill_mapping(graph: BlueprintGraph, node_id: str, field_id: str) -> BlueprintGraph:
    """Return a copy of *graph* without a mapping for *field_id*."""
    return update_prefill_mapping(graph, node_id, field_id, None)
