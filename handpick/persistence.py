"""File persistence for the candidate list.

The file holds one JSON array, one candidate per line, so it diffs cleanly.
Saves go through a temporary sibling file and os.replace() so a crash
mid-write leaves either the old list or the new one, never a truncated file.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from handpick.exceptions import LoadError, SaveError

logger = logging.getLogger("handpick.persistence")

_CANDIDATES = TypeAdapter(list[str])


class PersistenceAdapter:
    """Reads and writes a candidate list at a given path."""

    def load(self, source: Path) -> list[str]:
        """Read the candidate list. Missing or blank files mean no prior state."""
        try:
            raw = source.read_bytes()
        except FileNotFoundError:
            logger.debug("no candidate file at %s", source)
            return []
        except OSError as e:
            raise LoadError(f"cannot read {source}: {e}", path=source, cause=e)

        if not raw.strip():
            return []

        try:
            values = _CANDIDATES.validate_json(raw, strict=True)
        except ValidationError as e:
            raise LoadError(
                f"malformed candidate file {source}: {e.error_count()} error(s)",
                path=source,
                cause=e,
            )
        logger.info("loaded %d candidates from %s", len(values), source)
        return values

    def dumps(self, values: Sequence[str]) -> bytes:
        """Serialized form of values: a JSON array with a trailing newline."""
        return _CANDIDATES.dump_json(list(values), indent=2) + b"\n"

    def save(self, values: Sequence[str], destination: Path) -> None:
        """Write values to destination, replacing prior content atomically."""
        data = self.dumps(values)
        tmp_name: str | None = None
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="wb",
                dir=destination.parent,
                prefix=f".{destination.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            if destination.exists():
                shutil.copymode(destination, tmp_name)
            os.replace(tmp_name, destination)
        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise SaveError(f"cannot write {destination}: {e}", path=destination, cause=e)
        logger.info("saved %d candidates to %s", len(values), destination)

    def backup(self, source: Path) -> Path | None:
        """Move source aside to <name>.bak. None when there is nothing to move."""
        bak = source.with_name(source.name + ".bak")
        try:
            os.replace(source, bak)
        except FileNotFoundError:
            return None
        except OSError as e:
            raise SaveError(f"cannot back up {source}: {e}", path=source, cause=e)
        logger.warning("moved unreadable candidate file %s to %s", source, bak)
        return bak
