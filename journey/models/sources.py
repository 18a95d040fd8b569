"""Data-source view models produced by providers.

Groups and items are rebuilt on every query and never persisted.  An item
carries enough information to become a :class:`PrefillMapping`.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from journey.models.graph import MappingType, PrefillMapping


class DataSourceItem(BaseModel):
    """One selectable (field, source) pair.

    Attributes:
        id: Unique item id, ``<source id>:<field id>``.
        label: Display label, ``<source name>.<field name>``.
        type: ``form_field`` for upstream form fields, ``global`` otherwise.
        source_id: Node id for form fields, source category id for globals.
        source_name: Display name of the source.
        field_id: Field identifier within the source.
        field_name: Display name of the field.
        field_type: Semantic subtype or declared type, if known.
        path: Dotted path for global values.
    """

    id: str
    label: str
    type: MappingType
    source_id: str
    source_name: str
    field_id: str
    field_name: str
    field_type: Optional[str] = None
    path: Optional[str] = None

    def to_mapping(self) -> PrefillMapping:
        """Build the mapping descriptor that selecting this item produces."""
        if self.type is MappingType.FORM_FIELD:
            return PrefillMapping(
                type=MappingType.FORM_FIELD,
                source_form_id=self.source_id,
                source_field_id=self.field_id,
            )
        return PrefillMapping(
            type=MappingType.GLOBAL,
            source_field_id=self.field_id,
            source_path=self.path,
        )


class DataSourceGroup(BaseModel):
    """A named bucket of items from one originating entity."""

    id: str
    name: str
    type: Literal["form", "global"]
    items: list[DataSourceItem] = Field(default_factory=list)
    description: Optional[str] = None


class GlobalField(BaseModel):
    """A single value exposed by a global data source."""

    id: str
    name: str
    type: str = "string"
    path: Optional[str] = None


class GlobalDataSourceConfig(BaseModel):
    """A named category of global context values."""

    id: str
    name: str
    description: Optional[str] = None
    fields: list[GlobalField] = Field(default_factory=list)
