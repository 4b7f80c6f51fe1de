"""Tests for the handpick exception hierarchy."""

from pathlib import Path

from handpick.exceptions import (
    ConfigError,
    HandpickError,
    LoadError,
    PersistenceError,
    SaveError,
)


class TestHierarchy:
    """All errors derive from HandpickError."""

    def test_persistence_errors(self):
        assert issubclass(LoadError, PersistenceError)
        assert issubclass(SaveError, PersistenceError)
        assert issubclass(PersistenceError, HandpickError)

    def test_config_error(self):
        assert issubclass(ConfigError, HandpickError)


class TestCauseChaining:
    def test_cause_becomes_dunder_cause(self):
        cause = OSError("disk")
        err = SaveError("cannot write", path=Path("/x"), cause=cause)
        assert err.__cause__ is cause
        assert err.path == Path("/x")

    def test_no_cause(self):
        err = HandpickError("plain")
        assert err.__cause__ is None
        assert str(err) == "plain"

    def test_path_defaults_none(self):
        assert LoadError("x").path is None
