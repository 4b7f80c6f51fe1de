"""In-memory candidate store: an ordered set of unique strings."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

logger = logging.getLogger("handpick.store")


class CandidateStore:
    """Ordered set of user-curated completion candidates.

    store.add("x")        -- insert, no-op when present
    store.remove("x")     -- delete, no-op when absent
    store.query("pre")    -- case-sensitive prefix match, store order
    store.snapshot()      -- all members, for serialization

    Values are kept exactly as given: no trimming, no case folding.
    """

    def __init__(self, values: Iterable[str] = ()) -> None:
        # dict keys give O(1) membership with insertion order
        self._items: dict[str, None] = dict.fromkeys(values)

    def add(self, candidate: str) -> None:
        """Insert a candidate if it is not already present."""
        if candidate in self._items:
            return
        self._items[candidate] = None
        logger.debug("added %r", candidate)

    def remove(self, candidate: str) -> None:
        """Remove a candidate. Absent candidates are ignored."""
        if candidate in self._items:
            del self._items[candidate]
            logger.debug("removed %r", candidate)

    def clear(self) -> None:
        """Drop every candidate."""
        self._items.clear()
        logger.debug("cleared")

    def query(self, prefix: str) -> list[str]:
        """Every candidate starting with prefix, in store order."""
        return [c for c in self._items if c.startswith(prefix)]

    def snapshot(self) -> list[str]:
        """All candidates in store order."""
        return list(self._items)

    def restore(self, values: Iterable[str]) -> None:
        """Replace contents with values, deduplicated, first occurrence wins."""
        self._items = dict.fromkeys(values)
        logger.debug("restored %d candidates", len(self._items))

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CandidateStore({len(self._items)} candidates)"
