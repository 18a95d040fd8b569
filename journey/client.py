"""Retrieval of blueprint graph snapshots.

:class:`BlueprintClient` fetches a graph from the blueprint API over
HTTP with ``requests``; :func:`load_graph_file` reads a JSON snapshot
saved to disk.  Both return a validated :class:`BlueprintGraph`.
"""

from __future__ import annotations

import json
import pathlib

import requests
import structlog
from pydantic import ValidationError

from journey.config import settings
from journey.errors import ApiError, NetworkError
from journey.models.graph import BlueprintGraph

logger = structlog.get_logger(__name__)


class BlueprintClient:
    """Thin HTTP client for the blueprint graph endpoint.

    Usage::

        client = BlueprintClient("http://localhost:3000")
        graph = client.fetch_graph("1", "bp_01jk766tckfwx84xjcxazggzyc")

    Args:
        base_url: API root, without a trailing ``/api/v1``.
        timeout: Per-request timeout in seconds.
        session: Optional pre-configured :class:`requests.Session`.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout or settings.request_timeout_seconds
        self._session = session or requests.Session()

    def graph_url(self, tenant_id: str, blueprint_id: str) -> str:
        return f"{self.base_url}/api/v1/{tenant_id}/actions/blueprints/{blueprint_id}/graph"

    def fetch_graph(self, tenant_id: str, blueprint_id: str) -> BlueprintGraph:
        """Fetch and validate one blueprint graph.

        Args:
            tenant_id: Tenant owning the blueprint.
            blueprint_id: Blueprint identifier.

        Returns:
            The parsed :class:`BlueprintGraph`.

        Raises:
            NetworkError: If the API cannot be reached.
            ApiError: On a non-2xx response or an invalid payload.
        """
        url = self.graph_url(tenant_id, blueprint_id)
        logger.info("graph_fetch_started", url=url)

        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("graph_fetch_unreachable", url=url, error=str(exc))
            raise NetworkError(
                f"Failed to connect to the blueprint API at {self.base_url}. "
                "Make sure the server is running."
            ) from exc

        if not response.ok:
            raise ApiError(
                f"API request failed: {response.status_code} {response.reason}",
                status_code=response.status_code,
            )

        try:
            graph = BlueprintGraph.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise ApiError(f"Invalid graph payload from {url}: {exc}") from exc

        logger.info(
            "graph_fetched",
            blueprint=graph.id,
            nodes=len(graph.nodes),
            forms=len(graph.forms),
        )
        return graph


def load_graph_file(path: str | pathlib.Path) -> BlueprintGraph:
    """Load a graph snapshot from a JSON file.

    Args:
        path: Path to a JSON document shaped like the API response.

    Returns:
        The parsed :class:`BlueprintGraph`.

    Raises:
        FileNotFoundError: If *path* does not exist.
        pydantic.ValidationError: If the document is not a valid graph.
    """
    file_path = pathlib.Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Graph snapshot not found: {file_path}")

    graph = BlueprintGraph.model_validate(json.loads(file_path.read_text(encoding="utf-8")))
    logger.info("graph_loaded", path=str(file_path), nodes=len(graph.nodes))
    return graph
