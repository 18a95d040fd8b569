"""Blueprint graph data models: form nodes, edges, form definitions and
prefill mappings.

These Pydantic v2 models mirror the JSON returned by the blueprint API's
``/actions/blueprints/{id}/graph`` endpoint.  All of them are frozen: a
graph is a value, and edits go through
:func:`journey.graph.mapping.update_prefill_mapping`, which returns a
new graph.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class MappingType(str, enum.Enum):
    """Where a prefilled field takes its value from."""

    FORM_FIELD = "form_field"
    GLOBAL = "global"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class FieldSchema(_Frozen):
    """JSON-schema fragment describing one form field (or a whole form).

    Attributes:
        type: Declared value type (``string``, ``object``, ``array`` ...).
        title: Optional display title.
        avantos_type: Optional semantic subtype (``short-text``,
            ``multi-select`` ...), used for display only.
        properties: Child field schemas keyed by field id, for objects.
    """

    type: str = Field("string", description="Declared value type.")
    title: Optional[str] = Field(None, description="Display title.")
    avantos_type: Optional[str] = Field(None, description="Semantic subtype.")
    format: Optional[str] = None
    items: Optional[dict[str, Any]] = None
    enum: Optional[list[Any]] = None
    unique_items: Optional[bool] = Field(None, alias="uniqueItems")
    properties: Optional[dict[str, FieldSchema]] = None
    required: list[str] = Field(default_factory=list)


class FormDefinition(_Frozen):
    """A reusable form schema referenced by one or more nodes."""

    id: str = Field(..., description="Form definition identifier.")
    name: str = Field(..., description="Form name.")
    description: str = ""
    is_reusable: bool = False
    field_schema: FieldSchema = Field(default_factory=lambda: FieldSchema(type="object"))
    ui_schema: Optional[dict[str, Any]] = None
    dynamic_field_config: Optional[dict[str, Any]] = None


class PrefillMapping(_Frozen):
    """Describes where a target field's value is prefilled from.

    A ``form_field`` mapping points at a field of an upstream node and
    must carry ``source_form_id``.  A ``global`` mapping points at a
    global context value and may carry a dotted ``source_path``; it must
    not name a source form.

    The builder UI stores mappings with camelCase keys (``sourceFormId``
    ...); both spellings are accepted and snake_case is written back.
    """

    type: MappingType
    source_field_id: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("source_field_id", "sourceFieldId")
    )
    source_form_id: Optional[str] = Field(
        None, validation_alias=AliasChoices("source_form_id", "sourceFormId")
    )
    source_path: Optional[str] = Field(
        None, validation_alias=AliasChoices("source_path", "sourcePath")
    )

    @model_validator(mode="after")
    def _check_kind(self) -> PrefillMapping:
        if self.type is MappingType.FORM_FIELD:
            if not self.source_form_id:
                raise ValueError("form_field mapping requires source_form_id")
            if self.source_path is not None:
                raise ValueError("form_field mapping cannot carry source_path")
        elif self.source_form_id is not None:
            raise ValueError("global mapping cannot carry source_form_id")
        return self


class NodePosition(_Frozen):
    x: float = 0.0
    y: float = 0.0


class SlaDuration(_Frozen):
    number: int = 0
    unit: str = "minutes"


class NodeData(_Frozen):
    """Payload of a form node.

    Attributes:
        id: Node-local data identifier.
        component_id: Identifier of the :class:`FormDefinition` this node
            instantiates.
        name: Display name of the form instance.
        prerequisites: Ordered ids of the nodes this node directly
            depends on.  Ids that do not resolve are tolerated.
        input_mapping: Target field id to prefill mapping.
    """

    id: str = ""
    component_key: str = ""
    component_type: str = "form"
    component_id: str = ""
    name: str = ""
    prerequisites: list[str] = Field(default_factory=list)
    permitted_roles: list[str] = Field(default_factory=list)
    input_mapping: dict[str, PrefillMapping] = Field(default_factory=dict)
    sla_duration: Optional[SlaDuration] = None
    approval_required: bool = False
    approval_roles: list[str] = Field(default_factory=list)


class FormNode(_Frozen):
    """A form instance in the blueprint's dependency graph."""

    id: str = Field(..., description="Unique node identifier.")
    type: str = "form"
    position: NodePosition = Field(default_factory=NodePosition)
    data: NodeData = Field(default_factory=NodeData)

    @property
    def name(self) -> str:
        return self.data.name

    @property
    def prerequisites(self) -> list[str]:
        return self.data.prerequisites


class Edge(_Frozen):
    """Informational ``source -> target`` edge; resolution never reads it."""

    source: str
    target: str


class BlueprintGraph(_Frozen):
    """Complete blueprint graph as held by a caller for one session.

    Attributes:
        nodes: Form instances, each carrying its own prerequisite list.
        edges: Derived edges mirroring the prerequisite lists, kept for
            visualisation.
        forms: Form definitions referenced by ``node.data.component_id``.
    """

    schema_url: Optional[str] = Field(None, alias="$schema")
    id: str = ""
    tenant_id: str = ""
    name: str = ""
    description: str = ""
    category: str = ""
    nodes: list[FormNode] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    forms: list[FormDefinition] = Field(default_factory=list)
    branches: list[Any] = Field(default_factory=list)
    triggers: list[Any] = Field(default_factory=list)


class FieldInfo(_Frozen):
    """Flattened view of one form field for display and data sources."""

    id: str
    name: str
    type: str
    avantos_type: Optional[str] = None


class DependencyInfo(_Frozen):
    """A node's prerequisites split into direct and transitive sets."""

    direct: list[FormNode] = Field(default_factory=list)
    transitive: list[FormNode] = Field(default_factory=list)
