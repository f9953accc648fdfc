"""Resolver registry: register and retrieve reference resolvers by name."""

from __future__ import annotations

from typing import Any

from structprops.projectors.base import ReferenceResolver

_resolvers: dict[str, type] = {}


def reset() -> None:
    """Clear the registry and re-register the built-in resolvers."""
    _resolvers.clear()
    _register_builtins()


def register_resolver(name: str, cls: type) -> None:
    _resolvers[name] = cls


def get_resolver(name: str, **kwargs: Any) -> ReferenceResolver:
    if name not in _resolvers:
        raise KeyError(f"Unknown reference resolver: {name!r}. Available: {list(_resolvers)}")
    return _resolvers[name](**kwargs)


def available_resolvers() -> list[str]:
    return list(_resolvers)


def _register_builtins() -> None:
    from structprops.resolvers.urn_entity import UrnEntityResolver

    register_resolver("urn", UrnEntityResolver)


_register_builtins()
