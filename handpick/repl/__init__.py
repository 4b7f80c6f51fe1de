"""Interactive editor with curated-candidate completion."""

from __future__ import annotations

import asyncio

from handpick.config import HandpickConfig
from handpick.repl.shell import EditorShell


def launch(config: HandpickConfig) -> None:
    """Start the editor shell."""
    asyncio.run(EditorShell(config).run())


__all__ = ["EditorShell", "launch"]
