"""Core types, state and errors for the Wise Guy dialog."""

from wiseguy.core.catalog import JokeCatalog, JokeRecord
from wiseguy.core.errors import (
    ApplicationIdError,
    ConfigError,
    IntentError,
    RequestError,
    StateError,
    WiseGuyError,
)
from wiseguy.core.response import Card, OutputSpeech, ResponseDescriptor
from wiseguy.core.state import SessionState, create_empty_state
from wiseguy.core.types import Intent, SpeechMode, Stage

__all__ = [
    "ApplicationIdError",
    "Card",
    "ConfigError",
    "Intent",
    "IntentError",
    "JokeCatalog",
    "JokeRecord",
    "OutputSpeech",
    "RequestError",
    "ResponseDescriptor",
    "SessionState",
    "SpeechMode",
    "Stage",
    "StateError",
    "WiseGuyError",
    "create_empty_state",
]
