"""Tests for field extraction from form definitions."""

from __future__ import annotations

from journey.graph.fields import get_form_definition, get_form_fields
from journey.models.graph import FieldInfo


def test_fields_follow_schema_order(linear_graph):
    node = linear_graph.nodes[0]
    fields = get_form_fields(node, linear_graph)
    assert [f.id for f in fields] == ["name", "email", "tags"]


def test_title_becomes_display_name(linear_graph):
    name_field = get_form_fields(linear_graph.nodes[0], linear_graph)[0]
    assert name_field == FieldInfo(id="name", name="Name", type="string", avantos_type="short-text")


def test_display_name_defaults_to_field_id(linear_graph):
    email_field = get_form_fields(linear_graph.nodes[0], linear_graph)[1]
    assert email_field.name == "email"
    assert email_field.avantos_type is None


def test_missing_form_definition(dangling_graph):
    missing = next(n for n in dangling_graph.nodes if n.id == "M")
    assert get_form_definition(missing, dangling_graph) is None
    assert get_form_fields(missing, dangling_graph) == []


def test_form_without_properties(node_factory, graph_factory):
    node = node_factory("E", component_id="f-empty")
    graph = graph_factory(node)
    assert get_form_definition(node, graph).name == "Empty"
    assert get_form_fields(node, graph) == []


def test_shared_form_definition(diamond_graph):
    definitions = {get_form_definition(n, diamond_graph).id for n in diamond_graph.nodes}
    assert definitions == {"f-person"}
