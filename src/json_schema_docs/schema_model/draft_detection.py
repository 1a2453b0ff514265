"""JSON Schema draft detection."""

from __future__ import annotations

import re

from .schema_values import DraftInfo

SUPPORTED_DRAFTS = (
    "2020-12",
    "2019-09",
    "draft-07",
    "draft-06",
    "draft-05",
    "draft-04",
)

_DATED_DRAFT = re.compile(r"(?:^|draft/)(\d{4}-\d{2})(?:/|#|$)")
_NUMBERED_DRAFT = re.compile(r"draft-0*(\d+)(?:/|#|$)")


def detect_draft(uri: str | None) -> DraftInfo:
    """Map a ``$schema`` URI (or bare label) to a canonical draft label."""
    raw = (uri or "").strip()
    if not raw:
        return DraftInfo(raw="", canonical="", supported=False)

    normalized = raw.lower().rstrip("#").rstrip("/")
    if normalized.endswith("/schema"):
        normalized = normalized[: -len("/schema")]

    canonical = ""
    dated = _DATED_DRAFT.search(normalized)
    if dated:
        canonical = dated.group(1)
    else:
        numbered = _NUMBERED_DRAFT.search(normalized)
        if numbered:
            canonical = f"draft-{int(numbered.group(1)):02d}"

    return DraftInfo(raw=raw, canonical=canonical, supported=canonical in SUPPORTED_DRAFTS)
