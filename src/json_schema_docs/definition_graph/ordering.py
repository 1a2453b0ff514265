"""Deterministic definition and property ordering."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

DEFINITION_POINTER_PREFIXES = ("#/$defs/", "#/definitions/")
FALLBACK_ROOT_DEFINITION = "Config"


def definition_name_from_ref(ref: str) -> str:
    """Return the definition name a local ``$defs``/``definitions`` pointer names."""
    ref = ref.strip()
    for prefix in DEFINITION_POINTER_PREFIXES:
        if ref.startswith(prefix):
            return ref[len(prefix) :].split("/")[0]
    return ""


def definition_order(definitions: Iterable[str], root_name: str = "") -> list[str]:
    """Return the root definition first, then every other name sorted."""
    names = sorted(definitions)
    if not names:
        return []

    root = root_name.strip()
    if not root:
        root = FALLBACK_ROOT_DEFINITION if FALLBACK_ROOT_DEFINITION in names else names[0]
    if root not in names:
        return names
    return [root, *(name for name in names if name != root)]


def required_property_order(required: Iterable[str], properties: Mapping[str, object]) -> list[str]:
    """Return declared required names present in *properties*, de-duplicated."""
    out: list[str] = []
    for name in required:
        if name in properties and name not in out:
            out.append(name)
    return out


def property_order(required: Iterable[str], properties: Mapping[str, object]) -> list[str]:
    """Return required properties in declared order, then the rest sorted."""
    ordered = required_property_order(required, properties)
    seen = set(ordered)
    return ordered + sorted(name for name in properties if name not in seen)
