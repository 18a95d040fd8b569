"""Registry that aggregates data sources across providers.

Adding a new data source requires only:

1. Creating a subclass of :class:`DataSourceProvider`.
2. Registering an instance via :meth:`DataSourceRegistry.register`.
"""

from __future__ import annotations

from typing import Optional

import structlog

from journey.models.graph import BlueprintGraph, FormNode
from journey.models.sources import DataSourceGroup
from journey.sources.base import DataSourceProvider

logger = structlog.get_logger(__name__)


class DataSourceRegistry:
    """Id-keyed table of providers, aggregated in priority order.

    Usage::

        registry = DataSourceRegistry()
        registry.register(GlobalDataProvider())
        groups = registry.get_all_data_sources(node, graph)

    Registering a provider whose id is already present replaces the
    earlier one.  The registry is not thread-safe: callers must not
    register or unregister while another thread is aggregating.
    """

    def __init__(self) -> None:
        self._providers: dict[str, DataSourceProvider] = {}

    def register(self, provider: DataSourceProvider) -> None:
        """Add *provider*, replacing any provider with the same id.

        Args:
            provider: A concrete :class:`DataSourceProvider` instance.
        """
        replaced = provider.id in self._providers
        self._providers[provider.id] = provider
        logger.debug(
            "provider_registered",
            provider=provider.id,
            priority=provider.priority,
            replaced=replaced,
        )

    def unregister(self, provider_id: str) -> None:
        """Remove the provider with *provider_id*; unknown ids are ignored."""
        if self._providers.pop(provider_id, None) is not None:
            logger.debug("provider_unregistered", provider=provider_id)

    def get(self, provider_id: str) -> Optional[DataSourceProvider]:
        """Return the provider registered under *provider_id*, if any."""
        return self._providers.get(provider_id)

    def get_providers(self) -> list[DataSourceProvider]:
        """Return all providers sorted by ascending priority.

        The relative order of providers sharing a priority is not part of
        the contract.
        """
        return sorted(self._providers.values(), key=lambda p: p.priority)

    def get_all_data_sources(self, node: FormNode, graph: BlueprintGraph) -> list[DataSourceGroup]:
        """Collect groups from every applicable provider.

        Args:
            node: The currently selected form node.
            graph: The complete blueprint graph.

        Returns:
            Groups in provider priority order, then each provider's own
            group order.  Inapplicable providers contribute nothing.
        """
        groups: list[DataSourceGroup] = []
        for provider in self.get_providers():
            if not provider.is_applicable(node, graph):
                continue
            contributed = provider.get_data_sources(node, graph)
            groups.extend(contributed)
            logger.debug(
                "provider_contributed",
                provider=provider.id,
                node_id=node.id,
                groups=len(contributed),
            )
        return groups

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._providers

    def __len__(self) -> int:
        return len(self._providers)
