"""Shared fixtures: small blueprint graphs built through the models."""

from __future__ import annotations

from typing import Callable

import pytest

from journey.models.graph import (
    BlueprintGraph,
    Edge,
    FieldSchema,
    FormDefinition,
    FormNode,
    NodeData,
)

PERSON_FORM = FormDefinition(
    id="f-person",
    name="Person",
    field_schema=FieldSchema(
        type="object",
        properties={
            "name": FieldSchema(type="string", title="Name", avantos_type="short-text"),
            "email": FieldSchema(type="string", format="email"),
            "tags": FieldSchema(type="array", title="Tags", avantos_type="multi-select"),
        },
    ),
)

EMPTY_FORM = FormDefinition(id="f-empty", name="Empty")


def make_node(node_id: str, prerequisites: tuple[str, ...] = (), component_id: str = "f-person") -> FormNode:
    return FormNode(
        id=node_id,
        data=NodeData(
            id=f"data-{node_id}",
            component_key=node_id,
            component_id=component_id,
            name=f"Form {node_id}",
            prerequisites=list(prerequisites),
        ),
    )


def make_graph(*nodes: FormNode) -> BlueprintGraph:
    return BlueprintGraph(
        id="bp-test",
        name="Test blueprint",
        nodes=list(nodes),
        edges=[Edge(source=p, target=n.id) for n in nodes for p in n.prerequisites],
        forms=[PERSON_FORM, EMPTY_FORM],
    )


@pytest.fixture
def node_factory() -> Callable[..., FormNode]:
    return make_node


@pytest.fixture
def graph_factory() -> Callable[..., BlueprintGraph]:
    return make_graph


@pytest.fixture
def linear_graph() -> BlueprintGraph:
    """A <- B <- C."""
    return make_graph(
        make_node("C", ("B",)),
        make_node("A"),
        make_node("B", ("A",)),
    )


@pytest.fixture
def diamond_graph() -> BlueprintGraph:
    """D depends on B and C, which both depend on A."""
    return make_graph(
        make_node("A"),
        make_node("B", ("A",)),
        make_node("C", ("A",)),
        make_node("D", ("B", "C")),
    )


@pytest.fixture
def cyclic_graph() -> BlueprintGraph:
    """X -> Z -> Y -> X, plus an unrelated root W and a node V hanging off X."""
    return make_graph(
        make_node("W"),
        make_node("X", ("Z",)),
        make_node("Y", ("X",)),
        make_node("Z", ("Y",)),
        make_node("V", ("X", "W")),
    )


@pytest.fixture
def dangling_graph() -> BlueprintGraph:
    """N lists a prerequisite that does not exist; M uses a missing form."""
    return make_graph(
        make_node("A"),
        make_node("M", ("A",), component_id="f-missing"),
        make_node("N", ("ghost", "M")),
    )
