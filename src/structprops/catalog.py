"""In-memory definition catalog for tests and embedded use."""

from __future__ import annotations

from collections.abc import Iterable

from structprops.core.models import PropertyDefinition


class InMemoryDefinitionCatalog:
    """DefinitionCatalog implementation using Python dicts.

    Definitions are returned in registration order. Registering a urn a
    second time replaces the definition but keeps its original position.
    """

    def __init__(self, definitions: Iterable[PropertyDefinition] = ()) -> None:
        self._definitions: dict[str, PropertyDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: PropertyDefinition) -> None:
        self._definitions[str(definition.urn)] = definition

    def unregister(self, urn: str) -> bool:
        return self._definitions.pop(urn, None) is not None

    def get(self, urn: str) -> PropertyDefinition | None:
        return self._definitions.get(urn)

    def definitions_for(self, entity_type: str) -> list[PropertyDefinition]:
        # No entity_types on a definition means it applies everywhere
        return [
            d for d in self._definitions.values()
            if not d.entity_types or entity_type in d.entity_types
        ]

    def __len__(self) -> int:
        return len(self._definitions)
