"""Active-reference multiset used to break reference cycles."""

from __future__ import annotations

from collections import Counter


class ReferenceActivationSet:
    """Counts ``$ref`` targets currently expanding on the call path."""

    def __init__(self) -> None:
        self._active: Counter[str] = Counter()

    def __contains__(self, ref: object) -> bool:
        return isinstance(ref, str) and self._active[ref] > 0

    def __len__(self) -> int:
        return sum(self._active.values())

    def enter(self, ref: str) -> bool:
        """Mark *ref* active. Returns False when it is already active."""
        ref = ref.strip()
        if not ref:
            return True
        if self._active[ref] > 0:
            return False
        self._active[ref] += 1
        return True

    def release(self, ref: str) -> None:
        ref = ref.strip()
        if not ref:
            return
        self._active[ref] -= 1
        if self._active[ref] <= 0:
            del self._active[ref]
