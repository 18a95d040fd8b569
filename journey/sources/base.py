"""Abstract base class for all data-source providers.

A provider contributes candidate prefill sources for a selected node.
Every new source must subclass :class:`DataSourceProvider` and be
registered with a :class:`~journey.sources.registry.DataSourceRegistry`.
"""

from __future__ import annotations

import abc

from journey.models.graph import BlueprintGraph, FormNode
from journey.models.sources import DataSourceGroup


class DataSourceProvider(abc.ABC):
    """Contract that every data-source provider must fulfil.

    Subclasses set three class attributes and implement two methods:

    * ``id``: stable identifier, the registry key.
    * ``name``: display name.
    * ``priority``: ordering key, lower values come first.

    Attributes:
        id: Unique provider identifier.
        name: Human-readable provider name.
        priority: Aggregation order (ascending).
    """

    id: str
    name: str
    priority: int

    @abc.abstractmethod
    def is_applicable(self, node: FormNode, graph: BlueprintGraph) -> bool:
        """Return ``True`` if this provider has anything to offer *node*.

        Args:
            node: The currently selected form node.
            graph: The complete blueprint graph.
        """

    @abc.abstractmethod
    def get_data_sources(self, node: FormNode, graph: BlueprintGraph) -> list[DataSourceGroup]:
        """Return the groups of selectable items this provider offers.

        Args:
            node: The currently selected form node.
            graph: The complete blueprint graph.

        Returns:
            Zero or more groups, in the order they should be displayed.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, priority={self.priority})"
