"""Extensible data sources for prefilling form fields.

To add a source, subclass :class:`DataSourceProvider` and register an
instance on the registry your application built at startup::

    registry = build_default_registry()
    registry.register(MyCustomProvider())
"""

from journey.sources.base import DataSourceProvider
from journey.sources.form_fields import (
    DirectDependencyFieldsProvider,
    TransitiveDependencyFieldsProvider,
)
from journey.sources.global_data import (
    DEFAULT_GLOBAL_SOURCES,
    GlobalDataProvider,
    create_global_data_provider,
)
from journey.sources.registry import DataSourceRegistry


def build_default_registry() -> DataSourceRegistry:
    """Create a :class:`DataSourceRegistry` pre-loaded with the built-in providers.

    Returns:
        A registry owned by the caller; nothing is shared between calls.
    """
    registry = DataSourceRegistry()
    registry.register(DirectDependencyFieldsProvider())
    registry.register(TransitiveDependencyFieldsProvider())
    registry.register(GlobalDataProvider())
    return registry


__all__ = [
    "DataSourceProvider",
    "DataSourceRegistry",
    "DirectDependencyFieldsProvider",
    "TransitiveDependencyFieldsProvider",
    "GlobalDataProvider",
    "DEFAULT_GLOBAL_SOURCES",
    "build_default_registry",
    "create_global_data_provider",
]
