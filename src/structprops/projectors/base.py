"""Projection protocols: the collaborators the projector consumes.

UrnParser: decides whether a text value is an entity identifier
ReferenceResolver: turns a parsed identifier into an Entity
DefinitionCatalog: supplies the ordered definitions for an entity type
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from structprops.core.models import Entity, PropertyDefinition, QueryContext
from structprops.core.urn import Urn, parse_urn


@runtime_checkable
class UrnParser(Protocol):
    """Parses text into a Urn, or None when the text is not one."""

    def parse(self, text: str) -> Urn | None:
        ...


@runtime_checkable
class ReferenceResolver(Protocol):
    """Resolves a Urn into a downstream Entity. Context may be None."""

    def resolve(self, urn: Urn, context: QueryContext | None = None) -> Entity:
        ...


@runtime_checkable
class DefinitionCatalog(Protocol):
    """Supplies every property definition applicable to an entity type."""

    def definitions_for(self, entity_type: str) -> list[PropertyDefinition]:
        """Definitions in their authoritative order."""
        ...


class DefaultUrnParser:
    """UrnParser backed by parse_urn."""

    def parse(self, text: str) -> Urn | None:
        return parse_urn(text)
