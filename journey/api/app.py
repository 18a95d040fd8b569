"""FastAPI application factory and lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from journey import __version__
from journey.api.routes import router
from journey.client import BlueprintClient, load_graph_file
from journey.config import settings
from journey.errors import JourneyError
from journey.logging import setup_logging
from journey.models.graph import BlueprintGraph
from journey.sources import build_default_registry
from journey.sources.registry import DataSourceRegistry

logger = structlog.get_logger(__name__)


def load_configured_graph() -> Optional[BlueprintGraph]:
    """Load the graph named by the settings, or ``None`` if that fails.

    A local snapshot (``JOURNEY_GRAPH_FILE``) takes precedence over the
    blueprint API.
    """
    try:
        if settings.graph_file:
            return load_graph_file(settings.graph_file)
        client = BlueprintClient(settings.api_base_url, settings.request_timeout_seconds)
        return client.fetch_graph(settings.tenant_id, settings.blueprint_id)
    except (JourneyError, FileNotFoundError, ValueError):
        logger.exception("graph_load_failed")
        return None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler: configure logging and load the graph.

    Args:
        app: The FastAPI application instance.
    """
    setup_logging(settings.log_level, json_output=settings.log_json)
    if app.state.graph is None:
        app.state.graph = load_configured_graph()
    yield


def create_app(
    graph: Optional[BlueprintGraph] = None,
    registry: Optional[DataSourceRegistry] = None,
) -> FastAPI:
    """Build and return the configured FastAPI application.

    Args:
        graph: Graph to serve.  When omitted, the graph is loaded from the
            configured snapshot or API during startup.
        registry: Provider registry to aggregate data sources with.
            Defaults to :func:`build_default_registry`.

    Returns:
        A fully wired :class:`FastAPI` instance.
    """
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description=(
            "Journey prefill API: inspect a blueprint's form dependency "
            "graph and choose where each form field is prefilled from."
        ),
        lifespan=lifespan,
    )
    app.state.graph = graph
    app.state.registry = registry if registry is not None else build_default_registry()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router, tags=["Prefill"])
    return app


app = create_app()
