"""Reference resolvers: turn URN-valued text into Entity references."""

from structprops.resolvers.urn_entity import URN_ENTITY_TYPES, UrnEntityResolver

__all__ = ["URN_ENTITY_TYPES", "UrnEntityResolver"]
