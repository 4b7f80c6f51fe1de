"""Candidate tab completer: prefix before the cursor, queried against the store."""

from __future__ import annotations

import re
from collections.abc import Iterator
from functools import lru_cache

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from handpick.store import CandidateStore


@lru_cache(maxsize=16)
def _symbol_tail(symbol_chars: str) -> re.Pattern[str]:
    return re.compile(rf"[\w{re.escape(symbol_chars)}]+\Z")


def extract_prefix(text_before_cursor: str, symbol_chars: str = "_-") -> str:
    """Trailing run of symbol characters immediately before the cursor."""
    m = _symbol_tail(symbol_chars).search(text_before_cursor)
    return m.group(0) if m else ""


class CandidateCompleter(Completer):
    """Offer curated candidates matching the symbol before the cursor.

    With nothing typed, candidates only appear on an explicit Tab.
    """

    def __init__(self, store: CandidateStore, symbol_chars: str = "_-") -> None:
        self.store = store
        self.symbol_chars = symbol_chars

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterator[Completion]:
        prefix = extract_prefix(document.text_before_cursor, self.symbol_chars)
        if not prefix and not complete_event.completion_requested:
            return
        for match in self.store.query(prefix):
            yield Completion(match, start_position=-len(prefix))
