"""Provider for global context values that do not depend on the graph.

The built-in categories cover the current action, the client
organisation, the signed-in user and the system clock.  Further
categories can be added at runtime with
:meth:`GlobalDataProvider.add_source`; the table belongs to the provider
instance, never to the module.
"""

from __future__ import annotations

from typing import Iterable, Optional

import structlog

from journey.models.graph import BlueprintGraph, FormNode, MappingType
from journey.models.sources import (
    DataSourceGroup,
    DataSourceItem,
    GlobalDataSourceConfig,
    GlobalField,
)
from journey.sources.base import DataSourceProvider

logger = structlog.get_logger(__name__)


DEFAULT_GLOBAL_SOURCES: tuple[GlobalDataSourceConfig, ...] = (
    GlobalDataSourceConfig(
        id="action-properties",
        name="Action Properties",
        description="Properties of the current action/workflow",
        fields=[
            GlobalField(id="action_id", name="Action ID"),
            GlobalField(id="action_name", name="Action Name"),
            GlobalField(id="action_status", name="Action Status"),
            GlobalField(id="created_at", name="Created At", type="datetime"),
            GlobalField(id="updated_at", name="Updated At", type="datetime"),
        ],
    ),
    GlobalDataSourceConfig(
        id="client-org-properties",
        name="Client Organisation Properties",
        description="Properties of the client organization",
        fields=[
            GlobalField(id="org_id", name="Organisation ID"),
            GlobalField(id="org_name", name="Organisation Name"),
            GlobalField(id="org_email", name="Organisation Email", type="email"),
            GlobalField(id="org_country", name="Country"),
            GlobalField(id="org_timezone", name="Timezone"),
        ],
    ),
    GlobalDataSourceConfig(
        id="user-context",
        name="User Context",
        description="Information about the current user",
        fields=[
            GlobalField(id="user_id", name="User ID"),
            GlobalField(id="user_email", name="User Email", type="email"),
            GlobalField(id="user_name", name="User Name"),
            GlobalField(id="user_role", name="User Role"),
        ],
    ),
    GlobalDataSourceConfig(
        id="system-context",
        name="System Context",
        description="System-level information",
        fields=[
            GlobalField(id="current_date", name="Current Date", type="date"),
            GlobalField(id="current_time", name="Current Time", type="time"),
            GlobalField(id="current_datetime", name="Current DateTime", type="datetime"),
            GlobalField(id="environment", name="Environment"),
        ],
    ),
)


class GlobalDataProvider(DataSourceProvider):
    """Offers one group per configured global data source.

    Args:
        sources: Initial source categories.  Defaults to
            :data:`DEFAULT_GLOBAL_SOURCES`.  The provider keeps its own
            copies, so later edits never leak between instances.
    """

    id = "global-data"
    name = "Global Data"
    priority = 30

    def __init__(self, sources: Optional[Iterable[GlobalDataSourceConfig]] = None) -> None:
        initial = DEFAULT_GLOBAL_SOURCES if sources is None else sources
        self._sources: list[GlobalDataSourceConfig] = [s.model_copy(deep=True) for s in initial]

    @property
    def sources(self) -> list[GlobalDataSourceConfig]:
        """Copies of the configured source categories, in display order."""
        return [s.model_copy(deep=True) for s in self._sources]

    def is_applicable(self, node: FormNode, graph: BlueprintGraph) -> bool:
        return True

    def get_data_sources(self, node: FormNode, graph: BlueprintGraph) -> list[DataSourceGroup]:
        return [self._group_for_source(source) for source in self._sources]

    def add_source(self, source: GlobalDataSourceConfig) -> None:
        """Append a copy of *source*, replacing an existing source with the same id in place."""
        source = source.model_copy(deep=True)
        for position, existing in enumerate(self._sources):
            if existing.id == source.id:
                self._sources[position] = source
                logger.debug("global_source_replaced", source=source.id)
                return
        self._sources.append(source)
        logger.debug("global_source_added", source=source.id, fields=len(source.fields))

    def remove_source(self, source_id: str) -> None:
        """Drop the source with *source_id*; unknown ids are ignored."""
        self._sources = [s for s in self._sources if s.id != source_id]

    @staticmethod
    def _group_for_source(source: GlobalDataSourceConfig) -> DataSourceGroup:
        return DataSourceGroup(
            id=f"global-{source.id}",
            name=source.name,
            type="global",
            description=source.description,
            items=[
                DataSourceItem(
                    id=f"{source.id}:{field.id}",
                    label=f"{source.name}.{field.name}",
                    type=MappingType.GLOBAL,
                    source_id=source.id,
                    source_name=source.name,
                    field_id=field.id,
                    field_name=field.name,
                    field_type=field.type,
                    path=field.path or f"{source.id}.{field.id}",
                )
                for field in source.fields
            ],
        )


def create_global_data_provider(
    sources: Optional[Iterable[GlobalDataSourceConfig]] = None,
) -> GlobalDataProvider:
    """Build a :class:`GlobalDataProvider` over *sources* or the defaults."""
    return GlobalDataProvider(sources)
