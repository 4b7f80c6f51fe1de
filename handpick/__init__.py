"""Handpick: user-curated completion candidates that persist across sessions."""

from handpick.config import HandpickConfig, load_config
from handpick.exceptions import ConfigError, HandpickError, LoadError, PersistenceError, SaveError
from handpick.persistence import PersistenceAdapter
from handpick.session import CandidateSession
from handpick.store import CandidateStore

__all__ = [
    # Core types
    "CandidateStore",
    "PersistenceAdapter",
    "CandidateSession",
    # Config
    "HandpickConfig",
    "load_config",
    # Exceptions
    "HandpickError",
    "PersistenceError",
    "LoadError",
    "SaveError",
    "ConfigError",
]
