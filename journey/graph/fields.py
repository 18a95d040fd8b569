"""Field extraction from the form definition a node instantiates."""

from __future__ import annotations

from typing import Optional

from journey.models.graph import BlueprintGraph, FieldInfo, FormDefinition, FormNode


def get_form_definition(node: FormNode, graph: BlueprintGraph) -> Optional[FormDefinition]:
    """Return the form definition referenced by *node*, or ``None``."""
    return next((form for form in graph.forms if form.id == node.data.component_id), None)


def get_form_fields(node: FormNode, graph: BlueprintGraph) -> list[FieldInfo]:
    """Flatten *node*'s form schema into a list of fields.

    A missing form definition, or one without ``properties``, yields an
    empty list.  The display name falls back to the field id when the
    schema declares no title.

    Args:
        node: The node whose form is inspected.
        graph: The graph holding the form definitions.

    Returns:
        One :class:`FieldInfo` per top-level property, in schema order.
    """
    form = get_form_definition(node, graph)
    if form is None or not form.field_schema.properties:
        return []

    return [
        FieldInfo(
            id=field_id,
            name=schema.title or field_id,
            type=schema.type,
            avantos_type=schema.avantos_type,
        )
        for field_id, schema in form.field_schema.properties.items()
    ]
