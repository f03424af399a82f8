"""Wise Guy - Simple API.

Wires configuration, catalog, dialog engine and dispatcher together:

    from wiseguy import WiseGuyApp

    app = WiseGuyApp.from_path("examples/doctor_guido/wiseguy.yaml")
    envelope = app.dispatch(request_json)
"""

import logging
from pathlib import Path
from typing import Any

from wiseguy.config.loader import ConfigLoader
from wiseguy.config.models import WiseGuyConfig
from wiseguy.core.response import ResponseDescriptor
from wiseguy.core.state import SessionState
from wiseguy.core.types import Intent
from wiseguy.dm.engine import DialogEngine
from wiseguy.skill.dispatcher import SkillDispatcher
from wiseguy.skill.handlers import WiseGuySkill

logger = logging.getLogger(__name__)


class WiseGuyApp:
    """High-level API for the Wise Guy skill.

    Example:
        >>> app = WiseGuyApp.from_path("wiseguy.yaml")
        >>> session = SessionState()
        >>> app.handle("StartJoke", session).speech.text
        'Hello doctor Guido. Can you please help me getting better?!'
    """

    def __init__(self, config: WiseGuyConfig):
        """Build the skill from a loaded configuration.

        Raises:
            ConfigError: If the joke catalog is empty
        """
        self.config = config
        self.catalog = config.build_catalog()
        self.engine = DialogEngine(self.catalog, script=config.script, skill=config.skill)
        self.skill = WiseGuySkill(self.engine)
        self.dispatcher = SkillDispatcher(self.skill, app_id=config.skill.app_id)
        logger.info(f"Wise Guy ready with {self.catalog.count()} joke(s)")

    @classmethod
    def from_path(cls, path: str | Path) -> "WiseGuyApp":
        """Load configuration from YAML and build the skill."""
        return cls(ConfigLoader.load(path))

    def handle(self, intent: Intent | str, session: SessionState) -> ResponseDescriptor:
        """Run one intent against a session (see DialogEngine.handle)."""
        return self.engine.handle(intent, session)

    def dispatch(self, envelope: dict[str, Any]) -> dict[str, Any]:
        """Handle one platform request envelope (see SkillDispatcher.dispatch)."""
        return self.dispatcher.dispatch(envelope)
