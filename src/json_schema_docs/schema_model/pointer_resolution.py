"""Local JSON pointer resolution against the raw schema document."""

from __future__ import annotations

import logging

import jsonpointer

from .schema_values import JSONValue

_LOGGER = logging.getLogger(__name__)


def resolve_pointer(pointer: str, document: JSONValue) -> tuple[JSONValue, bool]:
    """Resolve a same-document ``#``-pointer.

    Returns ``(value, found)``. A missing key, an invalid or out of range
    index, a malformed escape or a token applied to a scalar yields
    ``(None, False)``.
    """
    pointer = pointer.strip()
    if pointer == "#":
        return document, True
    if not pointer.startswith("#/"):
        return None, False

    try:
        parsed = jsonpointer.JsonPointer(pointer[1:])
    except jsonpointer.JsonPointerException as exc:
        _LOGGER.debug("pointer %s: %s", pointer, exc)
        return None, False

    current = document
    for part in parsed.parts:
        if isinstance(current, (str, bytes)):
            _LOGGER.debug("pointer %s: token %r applied to scalar", pointer, part)
            return None, False
        try:
            current = parsed.walk(current, part)
        except jsonpointer.JsonPointerException as exc:
            _LOGGER.debug("pointer %s: %s", pointer, exc)
            return None, False
        if isinstance(current, jsonpointer.EndOfList):
            _LOGGER.debug("pointer %s: end-of-list token", pointer)
            return None, False
    return current, True
