"""Core data models for structured property projection.

These models define the contract between components:
- The persistence layer supplies ValueAssignments and PropertyDefinitions
- Projectors turn them into StructuredPropertiesEntry rows
- Resolvers turn URN-valued text into Entity references
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from structprops.core.urn import Urn

# =============================================================================
# Enums
# =============================================================================


class EntityType(StrEnum):
    """Entity kinds a resolved reference can carry."""

    STRUCTURED_PROPERTY = "STRUCTURED_PROPERTY"
    CORP_USER = "CORP_USER"
    CORP_GROUP = "CORP_GROUP"
    DATASET = "DATASET"
    DATA_PLATFORM = "DATA_PLATFORM"
    DASHBOARD = "DASHBOARD"
    CHART = "CHART"
    DATA_FLOW = "DATA_FLOW"
    DATA_JOB = "DATA_JOB"
    DOMAIN = "DOMAIN"
    GLOSSARY_TERM = "GLOSSARY_TERM"
    GLOSSARY_NODE = "GLOSSARY_NODE"
    TAG = "TAG"
    CONTAINER = "CONTAINER"
    DATA_PRODUCT = "DATA_PRODUCT"
    ML_MODEL = "ML_MODEL"


# =============================================================================
# Inputs (Contract: persistence layer → projectors)
# =============================================================================


@dataclass(frozen=True)
class PropertyDefinition:
    """A structured property type. Only ``urn`` takes part in projection."""

    urn: Urn
    display_name: str | None = None
    value_type: str | None = None  # e.g. "urn:li:dataType:datahub.string"
    cardinality: str = "SINGLE"  # "SINGLE" | "MULTIPLE"
    entity_types: tuple[str, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class ValueAssignment:
    """One property's value(s) for one entity."""

    property_urn: Urn
    values: tuple[str | float, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))


@dataclass
class QueryContext:
    """Caller context handed through to the reference resolver."""

    actor_urn: str | None = None
    authorized: bool = True
    extras: dict[str, Any] = field(default_factory=dict)


# =============================================================================
# Outputs (Contract: projectors → request layer)
# =============================================================================


@dataclass(frozen=True)
class StringValue:
    string_value: str


@dataclass(frozen=True)
class NumberValue:
    number_value: float


PropertyValue = StringValue | NumberValue


@dataclass(frozen=True)
class Entity:
    """A resolved entity reference. ``type`` is None for unknown kinds."""

    urn: str
    type: EntityType | None = None


@dataclass(frozen=True)
class StructuredPropertyEntity:
    """The property a projected entry belongs to."""

    urn: str
    type: EntityType = EntityType.STRUCTURED_PROPERTY


@dataclass
class StructuredPropertiesEntry:
    """One row of the projected view.

    ``values`` and ``value_entities`` are always lists. They are parallel
    but not index-aligned: only URN-valued text contributes an entity.
    """

    structured_property: StructuredPropertyEntity
    associated_urn: str
    values: list[PropertyValue] = field(default_factory=list)
    value_entities: list[Entity] = field(default_factory=list)

    @property
    def property_urn(self) -> str:
        return self.structured_property.urn

    @property
    def is_placeholder(self) -> bool:
        return not self.values


@dataclass
class StructuredProperties:
    """The projected view for one entity."""

    properties: list[StructuredPropertiesEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.properties)

    def __iter__(self):
        return iter(self.properties)
