"""URN identifiers: ``urn:<namespace>:<entity_type>:<entity_key>``.

Two entry points:
- parse_urn(text) returns a Urn or None. Cheap, never raises; meant to be
  called speculatively on every text value.
- Urn.from_string(text) raises UrnParseError for callers that require a
  well-formed identifier.
"""

from __future__ import annotations

from dataclasses import dataclass

URN_PREFIX = "urn:"


class UrnParseError(ValueError):
    """Raised by Urn.from_string on malformed input."""


@dataclass(frozen=True)
class Urn:
    """A parsed entity identifier."""

    namespace: str
    entity_type: str
    entity_key: str

    def __str__(self) -> str:
        return f"{URN_PREFIX}{self.namespace}:{self.entity_type}:{self.entity_key}"

    @classmethod
    def from_string(cls, text: str) -> Urn:
        urn = parse_urn(text)
        if urn is None:
            raise UrnParseError(f"Not a valid urn: {text!r}")
        return urn


def _balanced(key: str) -> bool:
    depth = 0
    for ch in key:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def parse_urn(text: object) -> Urn | None:
    """Parse text as a Urn, returning None when it is not one."""
    if not isinstance(text, str) or not text.startswith(URN_PREFIX):
        return None
    parts = text[len(URN_PREFIX):].split(":", 2)
    if len(parts) != 3:
        return None
    namespace, entity_type, entity_key = parts
    if not namespace or not entity_type or not entity_key:
        return None
    if any(c.isspace() for c in namespace + entity_type):
        return None
    # Tuple keys: (urn:li:dataPlatform:hive,db.table,PROD)
    if entity_key.startswith("(") and not entity_key.endswith(")"):
        return None
    if not _balanced(entity_key):
        return None
    return Urn(namespace=namespace, entity_type=entity_type, entity_key=entity_key)
