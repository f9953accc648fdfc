"""Structured property projector.

Reconciles the properties assigned to an entity with the catalog of
properties that could apply to it:

- project():     assigned properties only, 1:1 and in input order
- project_all(): one entry per catalog definition, in catalog order;
                 unassigned definitions become empty placeholder entries
- classify():    per-value dispatch. Numbers pass through; text is kept
                 verbatim and, when it parses as a URN, also resolved into
                 an Entity for ``value_entities``
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from structprops.config import ProjectionConfig, get_config
from structprops.core.models import (
    Entity,
    NumberValue,
    PropertyDefinition,
    PropertyValue,
    QueryContext,
    StringValue,
    StructuredProperties,
    StructuredPropertiesEntry,
    StructuredPropertyEntity,
    ValueAssignment,
)
from structprops.core.urn import Urn
from structprops.observability.logging import get_logger
from structprops.projectors.base import (
    DefaultUrnParser,
    DefinitionCatalog,
    ReferenceResolver,
    UrnParser,
)
from structprops.projectors.registry import get_resolver
from structprops.resolvers.urn_entity import UrnEntityResolver


def _require(value: object, name: str) -> None:
    if value is None:
        raise ValueError(f"{name} is required")


def _as_urn(entity_urn: Urn | str) -> Urn:
    _require(entity_urn, "entity_urn")
    if isinstance(entity_urn, Urn):
        return entity_urn
    return Urn.from_string(entity_urn)


@dataclass
class StructuredPropertiesProjector:
    """Project value assignments into StructuredPropertiesEntry rows.

    Holds only its collaborators, so one instance can be shared freely
    across callers and threads.

    With resolve_references=False text values are never parsed or resolved:
    a URN-valued string is emitted in ``values`` but gains no entry in
    ``value_entities``.

    Usage:
        projector = StructuredPropertiesProjector()
        view = projector.project_all(assignments, entity_urn, catalog)
    """

    resolver: ReferenceResolver = field(default_factory=UrnEntityResolver)
    parser: UrnParser = field(default_factory=DefaultUrnParser)
    resolve_references: bool = True

    @classmethod
    def from_config(cls, config: ProjectionConfig | None = None) -> StructuredPropertiesProjector:
        config = config or get_config()
        return cls(
            resolver=get_resolver(config.resolver),
            resolve_references=config.resolve_references,
        )

    # -------------------------------------------------------------------------
    # Projection
    # -------------------------------------------------------------------------

    def project(
        self,
        assignments: Iterable[ValueAssignment],
        entity_urn: Urn | str,
        context: QueryContext | None = None,
    ) -> StructuredProperties:
        """Map each assignment to an entry, preserving input order."""
        _require(assignments, "assignments")
        associated_urn = str(_as_urn(entity_urn))
        return StructuredProperties(
            properties=[
                self._map_assignment(a, associated_urn, context) for a in assignments
            ]
        )

    def project_all(
        self,
        assignments: Iterable[ValueAssignment],
        entity_urn: Urn | str,
        catalog: Sequence[PropertyDefinition],
        context: QueryContext | None = None,
    ) -> StructuredProperties:
        """One entry per catalog definition, in catalog order.

        Assignments for properties missing from the catalog are not
        represented in the output.
        """
        _require(assignments, "assignments")
        _require(catalog, "catalog")
        associated_urn = str(_as_urn(entity_urn))

        # Last assignment wins on duplicate property urns
        assigned: Mapping[str, ValueAssignment] = MappingProxyType(
            {str(a.property_urn): a for a in assignments}
        )

        entries = [
            self._map_assignment(assigned[str(d.urn)], associated_urn, context)
            if str(d.urn) in assigned
            else self._placeholder(d, associated_urn)
            for d in catalog
        ]

        orphaned = assigned.keys() - {str(d.urn) for d in catalog}
        if orphaned:
            get_logger(__name__).debug(
                "structured_properties.orphaned_assignments",
                entity_urn=associated_urn,
                count=len(orphaned),
                property_urns=sorted(orphaned),
            )

        return StructuredProperties(properties=entries)

    def project_for_entity(
        self,
        assignments: Iterable[ValueAssignment],
        entity_urn: Urn | str,
        catalog_provider: DefinitionCatalog,
        context: QueryContext | None = None,
    ) -> StructuredProperties:
        """Full projection against the catalog for the entity's own type."""
        urn = _as_urn(entity_urn)
        catalog = catalog_provider.definitions_for(urn.entity_type)
        return self.project_all(assignments, urn, catalog, context)

    # -------------------------------------------------------------------------
    # Values
    # -------------------------------------------------------------------------

    def classify(
        self,
        value: str | float,
        context: QueryContext | None = None,
    ) -> tuple[PropertyValue, Entity | None]:
        """Classify one scalar value.

        Returns the projected value and, for text that parses as a URN,
        the resolved entity.
        """
        if isinstance(value, bool):
            raise TypeError(f"Unsupported property value type: {type(value).__name__}")
        if isinstance(value, (int, float)):
            try:
                return NumberValue(float(value)), None
            except OverflowError:
                raise ValueError("Numeric property value out of float range") from None
        if not isinstance(value, str):
            raise TypeError(f"Unsupported property value type: {type(value).__name__}")

        if not self.resolve_references:
            return StringValue(value), None

        urn = self.parser.parse(value)
        if urn is None:
            get_logger(__name__).debug("structured_properties.value_not_urn", value=value)
            return StringValue(value), None
        try:
            entity = self.resolver.resolve(urn, context)
        except Exception as exc:
            # Degrade to a text-only value
            get_logger(__name__).debug(
                "structured_properties.resolve_failed",
                value=value,
                error=repr(exc),
            )
            return StringValue(value), None
        return StringValue(value), entity

    def _map_assignment(
        self,
        assignment: ValueAssignment,
        associated_urn: str,
        context: QueryContext | None,
    ) -> StructuredPropertiesEntry:
        values: list[PropertyValue] = []
        entities: list[Entity] = []
        for raw in assignment.values:
            value, entity = self.classify(raw, context)
            values.append(value)
            if entity is not None:
                entities.append(entity)
        return StructuredPropertiesEntry(
            structured_property=StructuredPropertyEntity(urn=str(assignment.property_urn)),
            associated_urn=associated_urn,
            values=values,
            value_entities=entities,
        )

    @staticmethod
    def _placeholder(
        definition: PropertyDefinition,
        associated_urn: str,
    ) -> StructuredPropertiesEntry:
        return StructuredPropertiesEntry(
            structured_property=StructuredPropertyEntity(urn=str(definition.urn)),
            associated_urn=associated_urn,
        )


# -----------------------------------------------------------------------------
# Free functions (projector built from config on each call)
# -----------------------------------------------------------------------------


def project_structured_properties(
    assignments: Iterable[ValueAssignment],
    entity_urn: Urn | str,
    context: QueryContext | None = None,
) -> StructuredProperties:
    return StructuredPropertiesProjector.from_config().project(
        assignments, entity_urn, context
    )


def project_all_structured_properties(
    assignments: Iterable[ValueAssignment],
    entity_urn: Urn | str,
    catalog: Sequence[PropertyDefinition],
    context: QueryContext | None = None,
) -> StructuredProperties:
    return StructuredPropertiesProjector.from_config().project_all(
        assignments, entity_urn, catalog, context
    )
