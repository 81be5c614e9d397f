"""Inline ``$ref`` pointers and ``x-onyxia`` overrides into a self-contained JSON Schema.

Three kinds of indirection are expanded:

* ``{"$ref": "#/definitions/Name"}`` is looked up in the document being
  resolved (always the root of the call, also from inside registry schemas);
* any other ``$ref`` is looked up in the schema registry;
* a property whose schema carries ``{"x-onyxia": {"overwriteSchemaWith": "name"}}``
  is replaced by the registry schema ``name``.

Targets that cannot be found are left untouched. The input document and the
registry's schemas are never mutated, every container in the result is new.
"""

from __future__ import annotations

from typing import Any

from chart_catalog.core.schema_registry import SchemaRegistry

REF = "$ref"
LOCAL_PREFIX = "#/definitions/"
OVERRIDE_EXTENSION = "x-onyxia"
OVERRIDE_KEY = "overwriteSchemaWith"


def json_pointer(document: Any, pointer: str) -> Any | None:
    """Return the node ``pointer`` (RFC 6901, e.g. ``/definitions/Name``) addresses, or None."""
    if pointer == "":
        return document
    if not pointer.startswith("/"):
        return None
    node = document
    for token in pointer[1:].split("/"):
        token = token.replace("~1", "/").replace("~0", "~")
        if isinstance(node, dict):
            if token not in node:
                return None
            node = node[token]
        elif isinstance(node, list):
            if not token.isdigit() or int(token) >= len(node):
                return None
            node = node[int(token)]
        else:
            return None
    return node


class SchemaResolver:
    """Expands references in JSON Schema documents.

    Without a registry only local ``#/definitions/`` pointers are followed.
    A reference that is already being expanded higher up the same branch is
    left as is, so self-referencing schemas terminate.
    """

    def __init__(self, registry: SchemaRegistry | None = None):
        self.registry = registry

    def resolve(self, schema: Any) -> Any:
        return self._resolve(schema, schema, ())

    def _resolve(self, node: Any, root: Any, active: tuple[str, ...]) -> Any:
        if isinstance(node, dict):
            return self._resolve_object(node, root, active)
        if isinstance(node, list):
            return [self._resolve(item, root, active) for item in node]
        return node

    def _resolve_object(self, node: dict, root: Any, active: tuple[str, ...]) -> dict:
        target: dict | None = None
        ref = node.get(REF)
        if isinstance(ref, str):
            target = self._follow(ref, self._lookup_ref(ref, root), root, active)

        resolved: dict[str, Any] = {}
        for key, value in node.items():
            if key == REF and target is not None:
                continue
            overridden = self._override(value, root, active)
            resolved[key] = overridden if overridden is not None else self._resolve(value, root, active)

        if target is None:
            return resolved
        # the referenced fields overwrite the ones written next to the $ref
        return {**resolved, **target}

    def _override(self, value: Any, root: Any, active: tuple[str, ...]) -> dict | None:
        if not isinstance(value, dict):
            return None
        extension = value.get(OVERRIDE_EXTENSION)
        if not isinstance(extension, dict) or OVERRIDE_KEY not in extension:
            return None
        name = str(extension[OVERRIDE_KEY])
        return self._follow(name, self._lookup_registry(name), root, active)

    def _follow(self, key: str, target: Any, root: Any, active: tuple[str, ...]) -> dict | None:
        if key in active or not isinstance(target, dict):
            return None
        return self._resolve_object(target, root, active + (key,))

    def _lookup_ref(self, ref: str, root: Any) -> Any | None:
        if ref.startswith(LOCAL_PREFIX):
            return json_pointer(root, ref[1:])
        return self._lookup_registry(ref)

    def _lookup_registry(self, name: str) -> Any | None:
        if self.registry is None:
            return None
        return self.registry.get(name)


def resolve_internal_references(schema: Any) -> Any:
    """Resolve only the document's own ``#/definitions/`` pointers."""
    return SchemaResolver().resolve(schema)


def resolve_references(schema: Any, registry: SchemaRegistry) -> Any:
    return SchemaResolver(registry).resolve(schema)
