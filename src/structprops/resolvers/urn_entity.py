"""URN → Entity resolver keyed on the URN's entity-type segment."""

from __future__ import annotations

from dataclasses import dataclass, field

from structprops.core.models import Entity, EntityType, QueryContext
from structprops.core.urn import Urn
from structprops.observability.logging import get_logger

URN_ENTITY_TYPES: dict[str, EntityType] = {
    "structuredProperty": EntityType.STRUCTURED_PROPERTY,
    "corpuser": EntityType.CORP_USER,
    "corpGroup": EntityType.CORP_GROUP,
    "dataset": EntityType.DATASET,
    "dataPlatform": EntityType.DATA_PLATFORM,
    "dashboard": EntityType.DASHBOARD,
    "chart": EntityType.CHART,
    "dataFlow": EntityType.DATA_FLOW,
    "dataJob": EntityType.DATA_JOB,
    "domain": EntityType.DOMAIN,
    "glossaryTerm": EntityType.GLOSSARY_TERM,
    "glossaryNode": EntityType.GLOSSARY_NODE,
    "tag": EntityType.TAG,
    "container": EntityType.CONTAINER,
    "dataProduct": EntityType.DATA_PRODUCT,
    "mlModel": EntityType.ML_MODEL,
}


@dataclass
class UrnEntityResolver:
    """Build an Entity straight from the URN, without any lookup.

    Unknown entity types still resolve, with ``type=None``.
    """

    entity_types: dict[str, EntityType] = field(
        default_factory=lambda: dict(URN_ENTITY_TYPES)
    )

    def resolve(self, urn: Urn, context: QueryContext | None = None) -> Entity:
        entity_type = self.entity_types.get(urn.entity_type)
        if entity_type is None:
            get_logger(__name__).debug(
                "resolver.unknown_entity_type",
                urn=str(urn),
                entity_type=urn.entity_type,
            )
        return Entity(urn=str(urn), type=entity_type)
