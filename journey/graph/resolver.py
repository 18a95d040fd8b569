"""Dependency resolution over a blueprint's prerequisite graph.

Every function here reads only each node's own ``prerequisites`` list;
the graph's ``edges`` collection is never consulted.  Nothing in this
module raises on malformed input: prerequisite ids that do not resolve
are skipped, and cycles degrade :func:`topological_sort` to a best-effort
order while emitting a ``cycle_detected`` warning.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator

import structlog

from journey.graph.index import NodeIndex, build_node_index
from journey.models.graph import DependencyInfo, FormNode

logger = structlog.get_logger(__name__)


# ------------------------------------------------------------------
# Dependency classification
# ------------------------------------------------------------------


def get_direct_dependencies(node: FormNode, index: NodeIndex) -> list[FormNode]:
    """Return the nodes *node* immediately depends on.

    Args:
        node: The node whose prerequisites are resolved.
        index: Node-id index built by :func:`build_node_index`.

    Returns:
        Resolved prerequisites in declared order.  Dangling ids are
        dropped.
    """
    return [index[prereq_id] for prereq_id in node.prerequisites if prereq_id in index]


def get_transitive_dependencies(node: FormNode, index: NodeIndex) -> list[FormNode]:
    """Return the nodes *node* depends on only through intermediate hops.

    Breadth-first from the node's direct prerequisites.  A node reachable
    along several paths is reported once; direct dependencies are never
    reported here even when they are also reachable indirectly.

    Args:
        node: The node whose ancestry is walked.
        index: Node-id index built by :func:`build_node_index`.

    Returns:
        Transitive dependencies in first-discovery (BFS layer) order,
        which is not necessarily a topological order.
    """
    direct_ids = set(node.prerequisites)
    visited: set[str] = {node.id}
    recorded: set[str] = set()
    transitive: list[FormNode] = []
    queue: deque[str] = deque(node.prerequisites)

    while queue:
        current_id = queue.popleft()
        if current_id in visited:
            continue
        visited.add(current_id)

        current = index.get(current_id)
        if current is None:
            continue

        for prereq_id in current.prerequisites:
            if prereq_id in visited:
                continue
            queue.append(prereq_id)
            if prereq_id in direct_ids or prereq_id in recorded:
                continue
            prereq = index.get(prereq_id)
            if prereq is not None:
                recorded.add(prereq_id)
                transitive.append(prereq)

    return transitive


def get_all_dependencies(node: FormNode, index: NodeIndex) -> DependencyInfo:
    """Classify *node*'s dependencies as direct or transitive."""
    return DependencyInfo(
        direct=get_direct_dependencies(node, index),
        transitive=get_transitive_dependencies(node, index),
    )


def get_all_ancestors(node: FormNode, index: NodeIndex) -> list[FormNode]:
    """Return every node reachable by following prerequisites, once each.

    Equivalent, as a set, to the union of the direct and transitive
    dependencies, except that a node listing itself as a prerequisite is
    its own direct dependency but never its own ancestor.  Order is
    breadth-first discovery order.
    """
    ancestors: list[FormNode] = []
    visited: set[str] = {node.id}
    queue: deque[str] = deque(node.prerequisites)

    while queue:
        current_id = queue.popleft()
        if current_id in visited:
            continue
        visited.add(current_id)

        current = index.get(current_id)
        if current is None:
            continue

        ancestors.append(current)
        queue.extend(p for p in current.prerequisites if p not in visited)

    return ancestors


def get_dependents(node: FormNode, index: NodeIndex) -> list[FormNode]:
    """Return the nodes that list *node* as a direct prerequisite."""
    return [other for other in index.values() if node.id in other.prerequisites]


# ------------------------------------------------------------------
# Topological ordering
# ------------------------------------------------------------------


@dataclass
class TopologyReport:
    """Result of ordering a node collection.

    Attributes:
        order: Every input node exactly once, prerequisites first where
            the graph is acyclic.
        cycles: One entry per back edge met during traversal, listing the
            node ids along the cycle with the repeated id at both ends.
    """

    order: list[FormNode] = field(default_factory=list)
    cycles: list[list[str]] = field(default_factory=list)

    @property
    def has_cycles(self) -> bool:
        return bool(self.cycles)


def analyze_topology(nodes: Iterable[FormNode]) -> TopologyReport:
    """Order *nodes* depth-first, post-order, and record any cycles.

    A prerequisite that is already on the active path closes a cycle: the
    traversal does not descend into it again and carries on with the
    remaining prerequisites.  The cyclic region then comes out in visit
    order, which is not a valid topological order.

    Args:
        nodes: The flat node collection to order.  An index is built
            internally.

    Returns:
        A :class:`TopologyReport` whose ``order`` is a permutation of the
        distinct input nodes.
    """
    nodes = list(nodes)
    index = build_node_index(nodes)
    report = TopologyReport()
    visited: set[str] = set()

    for root in nodes:
        if root.id in visited:
            continue

        # Explicit stack of (node, remaining prerequisite ids); long chains
        # must not hit the interpreter's recursion limit.
        path: list[str] = [root.id]
        on_path: set[str] = {root.id}
        stack: list[tuple[FormNode, Iterator[str]]] = [(root, iter(root.prerequisites))]

        while stack:
            current, pending = stack[-1]
            for prereq_id in pending:
                prereq = index.get(prereq_id)
                if prereq is None or prereq_id in visited:
                    continue
                if prereq_id in on_path:
                    cycle = path[path.index(prereq_id):] + [prereq_id]
                    report.cycles.append(cycle)
                    logger.warning("cycle_detected", cycle=cycle)
                    continue
                path.append(prereq_id)
                on_path.add(prereq_id)
                stack.append((prereq, iter(prereq.prerequisites)))
                break
            else:
                stack.pop()
                path.pop()
                on_path.discard(current.id)
                visited.add(current.id)
                report.order.append(current)

    return report


def topological_sort(nodes: Iterable[FormNode]) -> list[FormNode]:
    """Return *nodes* ordered so each appears after its prerequisites.

    Takes the flat collection rather than an index.  Cycles never raise;
    see :func:`analyze_topology` for the diagnostic.
    """
    return analyze_topology(nodes).order
