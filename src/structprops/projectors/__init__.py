"""Projectors: turn stored structured property assignments into a view.

Core abstractions:
- UrnParser: decides whether a text value is an entity identifier
- ReferenceResolver: turns an identifier into an Entity
- DefinitionCatalog: supplies the ordered definitions for an entity type
- StructuredPropertiesProjector: project / project_all / classify
"""

from structprops.projectors.base import (
    DefaultUrnParser,
    DefinitionCatalog,
    ReferenceResolver,
    UrnParser,
)
from structprops.projectors.structured import (
    StructuredPropertiesProjector,
    project_all_structured_properties,
    project_structured_properties,
)

__all__ = [
    "DefaultUrnParser",
    "DefinitionCatalog",
    "ReferenceResolver",
    "StructuredPropertiesProjector",
    "UrnParser",
    "project_all_structured_properties",
    "project_structured_properties",
]
