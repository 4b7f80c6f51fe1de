"""Tests for Channel/ChannelRouter output and debug logging."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from handpick.repl.channels import (
    CHANNEL_DEFAULTS,
    Channel,
    ChannelRouter,
    disable_debug,
    enable_debug,
)


@pytest.fixture
def router():
    return ChannelRouter.with_defaults()


@pytest.fixture
def printed():
    """Mock print_formatted_text; each call is one displayed line."""
    with patch("handpick.repl.channels.print_formatted_text") as mock_print:
        yield mock_print


def _lines(mock_print):
    return [list(c.args[0]) for c in mock_print.call_args_list]


def test_defaults_registered(router):
    assert router.all == list(CHANNEL_DEFAULTS)


def test_write_prints_one_line_per_line(printed):
    ch = Channel(name="error", color="#ff5f5f")
    ch.write("a\nb")
    lines = _lines(printed)
    assert len(lines) == 2
    assert lines[0] == [("#ff5f5f bold", "[error]"), ("", " "), ("", "a")]
    assert lines[1][2] == ("", "b")


def test_write_empty_content_prints_label(printed):
    Channel(name="text", color="#87ff87").write("")
    assert _lines(printed) == [[("#87ff87 bold", "[text]"), ("", " "), ("", "")]]


def test_router_unknown_channel_noop(router, printed):
    router.write("nope", "ignored")
    printed.assert_not_called()


def test_router_write_routes(router, printed):
    router.write("handpick", "hi")
    assert _lines(printed) == [[("#87d7ff bold", "[handpick]"), ("", " "), ("", "hi")]]


def test_channel_lookup(router):
    assert router["error"].label == "[error]"
    with pytest.raises(KeyError):
        router["missing"]


def test_enable_debug_writes_log_file(tmp_path, router, printed):
    handler = enable_debug(tmp_path)
    try:
        logging.getLogger("handpick.store").debug("something happened")
        router.write("error", "boom")
        handler.flush()
        text = (tmp_path / "debug.log").read_text()
    finally:
        disable_debug(handler)
    assert "[handpick.store] something happened" in text
    assert "[error] boom" in text
    assert handler not in logging.getLogger("handpick").handlers
