"""Node-id index over a blueprint's form nodes."""

from __future__ import annotations

from typing import Iterable, Mapping

from journey.models.graph import FormNode

NodeIndex = Mapping[str, FormNode]


def build_node_index(nodes: Iterable[FormNode]) -> dict[str, FormNode]:
    """Map each node id to its node for O(1) lookup during traversal.

    Duplicate ids are not an error: the last node with a given id wins.
    """
    return {node.id: node for node in nodes}
