"""Labelled, color-coded output lines and the debug log switch."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

CHANNEL_DEFAULTS = {
    "handpick": {"color": "#87d7ff"},
    "text":     {"color": "#87ff87"},
    "error":    {"color": "#ff5f5f"},
}

_root_logger = logging.getLogger("handpick")


@dataclass
class Channel:
    """A labelled output stream with color-coded display."""

    name: str
    color: str

    @property
    def label(self) -> str:
        return f"[{self.name}]"

    def write(self, content: str) -> None:
        """Display content line by line behind the channel label."""
        for line in content.splitlines() or [""]:
            print_formatted_text(FormattedText([
                (f"{self.color} bold", self.label),
                ("", " "),
                ("", line),
            ]))


@dataclass
class ChannelRouter:
    """Registry of output channels. Writes also go to the handpick logger."""

    _channels: dict[str, Channel] = field(default_factory=dict, repr=False)

    @classmethod
    def with_defaults(cls) -> ChannelRouter:
        router = cls()
        for name, cfg in CHANNEL_DEFAULTS.items():
            router.register(name, cfg["color"])
        return router

    def register(self, name: str, color: str) -> Channel:
        ch = Channel(name=name, color=color)
        self._channels[name] = ch
        return ch

    def write(self, channel: str, content: str) -> None:
        """Write to a named channel. No-op for unknown channels."""
        ch = self._channels.get(channel)
        if ch:
            ch.write(content)
            _root_logger.debug("[%s] %s", channel, content)

    def __getitem__(self, name: str) -> Channel:
        return self._channels[name]

    @property
    def all(self) -> list[str]:
        return list(self._channels)


def enable_debug(log_dir: Path) -> logging.FileHandler:
    """Attach a FileHandler writing the handpick logger to log_dir/debug.log."""
    log_path = log_dir / "debug.log"
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(str(log_path))
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    ))
    _root_logger.addHandler(handler)
    _root_logger.setLevel(logging.DEBUG)
    return handler


def disable_debug(handler: logging.FileHandler) -> None:
    """Close and remove a handler installed by enable_debug()."""
    _root_logger.removeHandler(handler)
    handler.close()
    if not _root_logger.handlers:
        _root_logger.setLevel(logging.NOTSET)
