"""structprops: project structured property assignments into a complete view."""

from structprops.catalog import InMemoryDefinitionCatalog
from structprops.core.models import (
    Entity,
    EntityType,
    NumberValue,
    PropertyDefinition,
    QueryContext,
    StringValue,
    StructuredProperties,
    StructuredPropertiesEntry,
    StructuredPropertyEntity,
    ValueAssignment,
)
from structprops.core.urn import Urn, UrnParseError, parse_urn
from structprops.projectors.structured import (
    StructuredPropertiesProjector,
    project_all_structured_properties,
    project_structured_properties,
)

__all__ = [
    "Entity",
    "EntityType",
    "InMemoryDefinitionCatalog",
    "NumberValue",
    "PropertyDefinition",
    "QueryContext",
    "StringValue",
    "StructuredProperties",
    "StructuredPropertiesEntry",
    "StructuredPropertiesProjector",
    "StructuredPropertyEntity",
    "Urn",
    "UrnParseError",
    "ValueAssignment",
    "parse_urn",
    "project_all_structured_properties",
    "project_structured_properties",
]
