"""Definition graph entities."""

from __future__ import annotations

from dataclasses import dataclass

MAX_PATH_DEPTH = 20


@dataclass(frozen=True, order=True)
class DefinitionEdge:
    """Reference from a path inside one definition to another definition."""

    target: str
    path: str


@dataclass(frozen=True)
class DefinitionPathState:
    """Breadth-first work item for access path enumeration."""

    definition: str
    prefix: str
    depth: int
