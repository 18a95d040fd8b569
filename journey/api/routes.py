"""FastAPI route definitions for the Journey prefill API.

Provides endpoints for:

- ``GET /graph``: the blueprint graph currently held by the service.
- ``GET /forms``: every form in topological order, with cycle diagnostics.
- ``GET /forms/{node_id}/dependencies``: direct, transitive and
  downstream forms.
- ``GET /forms/{node_id}/fields``: the form's fields and their mappings.
- ``GET /forms/{node_id}/data-sources``: candidate prefill sources.
- ``PUT`` / ``DELETE /forms/{node_id}/mappings/{field_id}``: edit a
  field's prefill mapping.

The graph lives on ``app.state.graph`` and is replaced wholesale on each
edit; handlers never mutate it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from fastapi import APIRouter, HTTPException, Request, status

from journey.errors import NodeNotFoundError
from journey.graph.fields import get_form_fields
from journey.graph.index import build_node_index
from journey.graph.mapping import clear_prefill_mapping, update_prefill_mapping
from journey.graph.resolver import analyze_topology, get_all_dependencies, get_dependents
from journey.models.graph import BlueprintGraph, FieldInfo, FormNode, PrefillMapping
from journey.models.sources import DataSourceGroup
from journey.sources.registry import DataSourceRegistry

router = APIRouter()


# ------------------------------------------------------------------
# Response schemas
# ------------------------------------------------------------------


class FormSummary(BaseModel):
    """Compact description of a form node.

    Attributes:
        id: Node identifier.
        name: Display name.
        component_id: Form definition the node instantiates.
        prerequisites: Declared prerequisite ids, dangling ones included.
    """

    id: str
    name: str
    component_id: str
    prerequisites: list[str] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: FormNode) -> FormSummary:
        return cls(
            id=node.id,
            name=node.name,
            component_id=node.data.component_id,
            prerequisites=list(node.prerequisites),
        )


class FormListResponse(BaseModel):
    """Response from ``GET /forms``."""

    forms: list[FormSummary] = Field(default_factory=list, description="Forms, prerequisites first.")
    cycles: list[list[str]] = Field(default_factory=list, description="Cycles met while ordering.")


class DependenciesResponse(BaseModel):
    """Response from ``GET /forms/{node_id}/dependencies``."""

    node_id: str
    direct: list[FormSummary] = Field(default_factory=list)
    transitive: list[FormSummary] = Field(default_factory=list)
    dependents: list[FormSummary] = Field(default_factory=list)


class FieldsResponse(BaseModel):
    """Response from ``GET /forms/{node_id}/fields`` and mapping edits."""

    node_id: str
    fields: list[FieldInfo] = Field(default_factory=list)
    mappings: dict[str, PrefillMapping] = Field(default_factory=dict)


class DataSourcesResponse(BaseModel):
    """Response from ``GET /forms/{node_id}/data-sources``."""

    node_id: str
    groups: list[DataSourceGroup] = Field(default_factory=list)


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _current_graph(request: Request) -> BlueprintGraph:
    """Return the graph held by the app.

    Raises:
        HTTPException: 503 if no graph could be loaded at startup.
    """
    graph: BlueprintGraph | None = getattr(request.app.state, "graph", None)
    if graph is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=(
                "No blueprint graph loaded. Set JOURNEY_GRAPH_FILE or make "
                "sure the blueprint API at JOURNEY_API_BASE_URL is reachable."
            ),
        )
    return graph


def _find_node(graph: BlueprintGraph, node_id: str) -> FormNode:
    node = build_node_index(graph.nodes).get(node_id)
    if node is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Node not found: {node_id}",
        )
    return node


def _fields_response(graph: BlueprintGraph, node_id: str) -> FieldsResponse:
    node = _find_node(graph, node_id)
    return FieldsResponse(
        node_id=node.id,
        fields=get_form_fields(node, graph),
        mappings=dict(node.data.input_mapping),
    )


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------


@router.get(
    "/graph",
    response_model=BlueprintGraph,
    summary="Current blueprint graph",
)
async def read_graph(request: Request) -> BlueprintGraph:
    return _current_graph(request)


@router.get(
    "/forms",
    response_model=FormListResponse,
    summary="List forms in dependency order",
    description=(
        "Return every form node ordered so that each form comes after its "
        "prerequisites.  Cycles do not fail the request; they are listed "
        "in ``cycles`` and the affected forms keep visit order."
    ),
)
async def list_forms(request: Request) -> FormListResponse:
    report = analyze_topology(_current_graph(request).nodes)
    return FormListResponse(
        forms=[FormSummary.from_node(node) for node in report.order],
        cycles=report.cycles,
    )


@router.get(
    "/forms/{node_id}/dependencies",
    response_model=DependenciesResponse,
    summary="Classify a form's dependencies",
)
async def form_dependencies(node_id: str, request: Request) -> DependenciesResponse:
    """Return the forms *node_id* depends on, split into direct and
    transitive, plus the forms that depend on it directly.

    Raises:
        HTTPException: 404 if the node does not exist.
    """
    graph = _current_graph(request)
    node = _find_node(graph, node_id)
    index = build_node_index(graph.nodes)
    deps = get_all_dependencies(node, index)
    return DependenciesResponse(
        node_id=node.id,
        direct=[FormSummary.from_node(n) for n in deps.direct],
        transitive=[FormSummary.from_node(n) for n in deps.transitive],
        dependents=[FormSummary.from_node(n) for n in get_dependents(node, index)],
    )


@router.get(
    "/forms/{node_id}/fields",
    response_model=FieldsResponse,
    summary="List a form's fields and prefill mappings",
)
async def form_fields(node_id: str, request: Request) -> FieldsResponse:
    return _fields_response(_current_graph(request), node_id)


@router.get(
    "/forms/{node_id}/data-sources",
    response_model=DataSourcesResponse,
    summary="Candidate prefill sources for a form",
    description=(
        "Aggregate data-source groups from every registered provider that "
        "applies to the form, in provider priority order."
    ),
)
async def form_data_sources(node_id: str, request: Request) -> DataSourcesResponse:
    graph = _current_graph(request)
    node = _find_node(graph, node_id)
    registry: DataSourceRegistry = request.app.state.registry
    return DataSourcesResponse(
        node_id=node.id,
        groups=registry.get_all_data_sources(node, graph),
    )


@router.put(
    "/forms/{node_id}/mappings/{field_id}",
    response_model=FieldsResponse,
    summary="Set a field's prefill mapping",
)
async def set_mapping(
    node_id: str,
    field_id: str,
    mapping: PrefillMapping,
    request: Request,
) -> FieldsResponse:
    """Point *field_id* of *node_id* at a new source.

    Raises:
        HTTPException: 404 if the node does not exist.  An invalid
            mapping body is rejected with 422 by request validation.
    """
    graph = _current_graph(request)
    try:
        updated = update_prefill_mapping(graph, node_id, field_id, mapping)
    except NodeNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exc.message,
        )
    request.app.state.graph = updated
    return _fields_response(updated, node_id)


@router.delete(
    "/forms/{node_id}/mappings/{field_id}",
    response_model=FieldsResponse,
    summary="Clear a field's prefill mapping",
)
async def delete_mapping(node_id: str, field_id: str, request: Request) -> FieldsResponse:
    graph = _current_graph(request)
    try:
        updated = clear_prefill_mapping(graph, node_id, field_id)
    except NodeNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exc.message,
        )
    request.app.state.graph = updated
    return _fields_response(updated, node_id)
