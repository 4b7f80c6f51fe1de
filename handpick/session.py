"""CandidateSession: ties a store to its file across the process lifetime.

The host calls start() once at launch and shutdown() once before it exits.
Persistence failures are reported through on_error and never propagate, so
a bad file cannot take the editing session down with it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from handpick.config import HandpickConfig
from handpick.exceptions import LoadError, PersistenceError, SaveError
from handpick.persistence import PersistenceAdapter
from handpick.store import CandidateStore

logger = logging.getLogger("handpick.session")

ErrorReporter = Callable[[PersistenceError], None]


class CandidateSession:
    """Owns a CandidateStore and the adapter that persists it."""

    def __init__(
        self,
        config: HandpickConfig,
        store: CandidateStore | None = None,
        adapter: PersistenceAdapter | None = None,
        on_error: ErrorReporter | None = None,
    ) -> None:
        self.config = config
        self.store = store if store is not None else CandidateStore()
        self.adapter = adapter if adapter is not None else PersistenceAdapter()
        self.on_error = on_error
        self.load_error: LoadError | None = None
        self._shutdown_result: bool | None = None

    @property
    def path(self) -> Path:
        return self.config.persistence_file_path

    def _report(self, err: PersistenceError) -> None:
        logger.warning("%s", err, exc_info=err)
        if self.on_error is not None:
            self.on_error(err)

    def start(self) -> None:
        """Restore candidates from disk when restore_on_startup is set."""
        if not self.config.restore_on_startup:
            logger.debug("restore disabled, starting empty")
            return
        try:
            values = self.adapter.load(self.path)
        except LoadError as e:
            self.load_error = e
            self.store.clear()
            self._report(e)
            return
        self.store.restore(values)

    def save(self) -> bool:
        """Write the current candidates now. False when the write failed.

        After a failed load the unreadable file is first moved to <name>.bak,
        so its content is never overwritten.
        """
        try:
            if self.load_error is not None:
                self.adapter.backup(self.path)
                self.load_error = None
            self.adapter.save(self.store.snapshot(), self.path)
        except SaveError as e:
            self._report(e)
            return False
        return True

    def shutdown(self) -> bool:
        """Flush candidates before the host exits. Safe to call twice."""
        if self._shutdown_result is not None:
            return self._shutdown_result
        if self.config.restore_on_startup:
            self._shutdown_result = self.save()
        else:
            self._shutdown_result = True
        return self._shutdown_result

    def __enter__(self) -> CandidateSession:
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()
