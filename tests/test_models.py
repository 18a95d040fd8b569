"""Tests for graph and data-source model validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from journey.models.graph import BlueprintGraph, MappingType, PrefillMapping
from journey.models.sources import DataSourceItem

API_PAYLOAD = {
    "$schema": "https://api.avantos.ai/v1/blueprints/graph.json",
    "id": "bp_01",
    "tenant_id": "1",
    "name": "Onboarding",
    "nodes": [
        {
            "id": "form-a",
            "type": "form",
            "position": {"x": 10, "y": 20},
            "data": {
                "id": "bp_c_a",
                "component_key": "form-a",
                "component_type": "form",
                "component_id": "f_1",
                "name": "Form A",
                "prerequisites": [],
                "input_mapping": {},
                "sla_duration": {"number": 0, "unit": "minutes"},
            },
        },
        {
            "id": "form-b",
            "type": "form",
            "position": {"x": 30, "y": 40},
            "data": {
                "component_id": "f_1",
                "name": "Form B",
                "prerequisites": ["form-a"],
                "input_mapping": {
                    "email": {"type": "form_field", "source_form_id": "form-a", "source_field_id": "email"},
                },
            },
        },
        {
            "id": "form-c",
            "type": "form",
            "data": {
                "component_id": "f_1",
                "name": "Form C",
                "prerequisites": ["form-b"],
                "input_mapping": {
                    "email": {"type": "form_field", "sourceFormId": "form-a", "sourceFieldId": "email"},
                    "choices": {"type": "global", "sourceFieldId": "org_name", "sourcePath": "client-org-properties.org_name"},
                },
            },
        },
    ],
    "edges": [{"source": "form-a", "target": "form-b"}, {"source": "form-b", "target": "form-c"}],
    "forms": [
        {
            "id": "f_1",
            "name": "test form",
            "is_reusable": False,
            "field_schema": {
                "type": "object",
                "properties": {
                    "email": {"type": "string", "format": "email", "avantos_type": "short-text"},
                    "choices": {
                        "type": "array",
                        "items": {"type": "string", "enum": ["a", "b"]},
                        "uniqueItems": True,
                    },
                },
                "required": ["email"],
            },
        }
    ],
}


class TestBlueprintGraph:
    def test_parses_api_payload(self):
        graph = BlueprintGraph.model_validate(API_PAYLOAD)
        assert graph.schema_url.endswith("graph.json")
        assert [n.id for n in graph.nodes] == ["form-a", "form-b", "form-c"]
        assert graph.nodes[1].prerequisites == ["form-a"]
        assert graph.nodes[1].name == "Form B"
        assert graph.forms[0].field_schema.properties["choices"].unique_items is True

    def test_mapping_is_typed(self):
        graph = BlueprintGraph.model_validate(API_PAYLOAD)
        mapping = graph.nodes[1].data.input_mapping["email"]
        assert mapping.type is MappingType.FORM_FIELD
        assert mapping.source_form_id == "form-a"

    def test_camel_case_mapping_keys(self):
        graph = BlueprintGraph.model_validate(API_PAYLOAD)
        mappings = graph.nodes[2].data.input_mapping
        assert mappings["email"] == PrefillMapping(
            type=MappingType.FORM_FIELD, source_form_id="form-a", source_field_id="email"
        )
        assert mappings["choices"].source_path == "client-org-properties.org_name"

    def test_mappings_are_written_snake_case(self):
        dumped = BlueprintGraph.model_validate(API_PAYLOAD).model_dump(mode="json", by_alias=True)
        written = dumped["nodes"][2]["data"]["input_mapping"]["email"]
        assert written == {
            "type": "form_field",
            "source_field_id": "email",
            "source_form_id": "form-a",
            "source_path": None,
        }

    def test_dump_uses_wire_names(self):
        dumped = BlueprintGraph.model_validate(API_PAYLOAD).model_dump(mode="json", by_alias=True)
        assert "$schema" in dumped
        assert dumped["forms"][0]["field_schema"]["properties"]["choices"]["uniqueItems"] is True

    def test_graph_is_frozen(self):
        graph = BlueprintGraph.model_validate(API_PAYLOAD)
        with pytest.raises(ValidationError):
            graph.name = "changed"


class TestPrefillMapping:
    def test_form_field_requires_source_form(self):
        with pytest.raises(ValidationError, match="source_form_id"):
            PrefillMapping(type="form_field", source_field_id="email")

    def test_form_field_rejects_path(self):
        with pytest.raises(ValidationError):
            PrefillMapping(
                type="form_field",
                source_form_id="form-a",
                source_field_id="email",
                source_path="a.b",
            )

    def test_global_rejects_source_form(self):
        with pytest.raises(ValidationError, match="global mapping"):
            PrefillMapping(type="global", source_form_id="form-a", source_field_id="org_name")

    def test_global_with_path(self):
        mapping = PrefillMapping(type="global", source_field_id="org_name", source_path="client-org-properties.org_name")
        assert mapping.type is MappingType.GLOBAL

    def test_camel_case_kind_check(self):
        with pytest.raises(ValidationError, match="source_form_id"):
            PrefillMapping.model_validate({"type": "form_field", "sourceFieldId": "email"})

    def test_unknown_type(self):
        with pytest.raises(ValidationError):
            PrefillMapping(type="constant", source_field_id="x")


class TestDataSourceItem:
    def test_form_field_item_to_mapping(self):
        item = DataSourceItem(
            id="form-a:email",
            label="Form A.email",
            type=MappingType.FORM_FIELD,
            source_id="form-a",
            source_name="Form A",
            field_id="email",
            field_name="email",
        )
        assert item.to_mapping() == PrefillMapping(
            type=MappingType.FORM_FIELD, source_form_id="form-a", source_field_id="email"
        )

    def test_global_item_to_mapping(self):
        item = DataSourceItem(
            id="user-context:user_email",
            label="User Context.User Email",
            type=MappingType.GLOBAL,
            source_id="user-context",
            source_name="User Context",
            field_id="user_email",
            field_name="User Email",
            path="user-context.user_email",
        )
        mapping = item.to_mapping()
        assert mapping.source_form_id is None
        assert mapping.source_path == "user-context.user_email"
