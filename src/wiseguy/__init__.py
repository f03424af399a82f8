"""Wise Guy - a knock-knock joke voice skill.

A small turn-based dialog: the skill says "knock knock", waits for
"who's there", tells the setup, then delivers the punchline.

Quick start:
    from wiseguy import SessionState, WiseGuyApp

    app = WiseGuyApp.from_path("examples/doctor_guido/wiseguy.yaml")
    session = SessionState()
    app.handle("StartJoke", session)
"""

from wiseguy.__version__ import __version__
from wiseguy.config import ConfigLoader, WiseGuyConfig
from wiseguy.core.catalog import JokeCatalog, JokeRecord
from wiseguy.core.errors import (
    ApplicationIdError,
    ConfigError,
    IntentError,
    RequestError,
    StateError,
    WiseGuyError,
)
from wiseguy.core.response import ResponseDescriptor
from wiseguy.core.state import SessionState
from wiseguy.core.types import Intent, Stage
from wiseguy.dm.engine import DialogEngine
from wiseguy.framework import WiseGuyApp

__all__ = [
    "__version__",
    "WiseGuyApp",
    "ConfigLoader",
    "WiseGuyConfig",
    "DialogEngine",
    "JokeCatalog",
    "JokeRecord",
    "SessionState",
    "ResponseDescriptor",
    "Intent",
    "Stage",
    # Errors
    "WiseGuyError",
    "ConfigError",
    "IntentError",
    "StateError",
    "RequestError",
    "ApplicationIdError",
]
