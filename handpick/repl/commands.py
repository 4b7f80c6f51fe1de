"""User commands over the candidate store, and the host capabilities they use.

The commands never talk to prompt_toolkit directly. A host supplies:

- SelectionSource: what text is currently highlighted
- PopupProbe: whether a completion popup is showing
- Picker: an async chooser for pick-by-name deletes

BufferSelection, CompletionMenuProbe and dialog_picker are the
prompt_toolkit implementations used by the shell.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable, Protocol, runtime_checkable

from prompt_toolkit.buffer import Buffer
from prompt_toolkit.shortcuts import radiolist_dialog

from handpick.repl.complete import extract_prefix
from handpick.store import CandidateStore

if TYPE_CHECKING:
    from handpick.session import CandidateSession

logger = logging.getLogger("handpick.commands")

Picker = Callable[[str, list[str]], Awaitable[str | None]]


@runtime_checkable
class SelectionSource(Protocol):
    def selected_text(self) -> str | None: ...


@runtime_checkable
class PopupProbe(Protocol):
    def popup_visible(self) -> bool: ...


class BufferSelection:
    """Highlighted text of a prompt_toolkit buffer.

    With word_fallback, the symbol before the cursor stands in when
    nothing is selected.
    """

    def __init__(self, buffer: Buffer, symbol_chars: str = "_-", word_fallback: bool = True) -> None:
        self.buffer = buffer
        self.symbol_chars = symbol_chars
        self.word_fallback = word_fallback

    def selected_text(self) -> str | None:
        doc = self.buffer.document
        if doc.selection is not None:
            start, end = doc.selection_range()
            return doc.text[start:end]
        if self.word_fallback:
            return extract_prefix(doc.text_before_cursor, self.symbol_chars) or None
        return None


class CompletionMenuProbe:
    """Reports whether the buffer's completion menu has entries showing."""

    def __init__(self, buffer: Buffer) -> None:
        self.buffer = buffer

    def popup_visible(self) -> bool:
        state = self.buffer.complete_state
        return state is not None and len(state.completions) > 0


async def dialog_picker(title: str, choices: list[str]) -> str | None:
    """Radio-list dialog over choices. None when cancelled."""
    return await radiolist_dialog(
        title=title,
        text="Select a candidate:",
        values=[(c, c) for c in choices],
    ).run_async()


class CandidateCommands:
    """Add, delete, clear and save, as invoked from the host."""

    def __init__(
        self,
        store: CandidateStore,
        session: CandidateSession,
        picker: Picker | None = None,
    ) -> None:
        self.store = store
        self.session = session
        self.picker = picker or dialog_picker

    def add(self, text: str) -> str | None:
        """Add text as a candidate. Empty text is ignored."""
        if not text:
            return None
        self.store.add(text)
        logger.info("add %r", text)
        return text

    def add_selection(self, source: SelectionSource) -> str | None:
        """Add the host's current selection. None when nothing is selected."""
        return self.add(source.selected_text() or "")

    def delete(self, name: str) -> bool:
        """Delete a candidate by name. False when it was not present."""
        present = name in self.store
        self.store.remove(name)
        if present:
            logger.info("delete %r", name)
        return present

    async def delete_interactive(self) -> str | None:
        """Pick a candidate with the picker and delete it."""
        choices = self.store.snapshot()
        if not choices:
            return None
        name = await self.picker("Delete candidate", choices)
        if name is None:
            return None
        self.delete(name)
        return name

    def clear(self) -> int:
        """Remove every candidate. Returns how many there were."""
        n = len(self.store)
        self.store.clear()
        logger.info("clear (%d removed)", n)
        return n

    def save(self) -> bool:
        return self.session.save()

    def listing(self, prefix: str = "") -> list[str]:
        return self.store.query(prefix)
