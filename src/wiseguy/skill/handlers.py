"""Skill event and intent handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Protocol

from wiseguy.core.response import ResponseDescriptor
from wiseguy.core.state import SessionState
from wiseguy.core.types import Intent
from wiseguy.dm.engine import DialogEngine
from wiseguy.skill.models import IntentPayload, Session, SkillRequest

logger = logging.getLogger(__name__)

IntentHandler = Callable[[IntentPayload, SessionState], ResponseDescriptor]

# Platform intent names handled by the skill
PLATFORM_INTENTS: dict[str, Intent] = {
    "TellMeAJokeIntent": Intent.START_JOKE,
    "WhosThereIntent": Intent.WHOS_THERE,
    "SetupNameWhoIntent": Intent.DELIVER_PUNCHLINE,
    "AMAZON.HelpIntent": Intent.HELP,
    "AMAZON.StopIntent": Intent.STOP,
    "AMAZON.CancelIntent": Intent.CANCEL,
}


class SkillHandlers(Protocol):
    """What the dispatcher needs from a skill."""

    intent_handlers: Mapping[str, IntentHandler]

    def on_session_started(self, request: SkillRequest, session: Session) -> None: ...

    def on_launch(self, request: SkillRequest, state: SessionState) -> ResponseDescriptor: ...

    def on_session_ended(self, request: SkillRequest, session: Session) -> None: ...


class WiseGuySkill:
    """The knock-knock joke skill, backed by a DialogEngine."""

    def __init__(self, engine: DialogEngine):
        self.engine = engine
        self.intent_handlers: dict[str, IntentHandler] = {
            name: self._bind(intent) for name, intent in PLATFORM_INTENTS.items()
        }

    def _bind(self, intent: Intent) -> IntentHandler:
        def handler(payload: IntentPayload, state: SessionState) -> ResponseDescriptor:
            return self.engine.handle(intent, state)

        return handler

    def on_session_started(self, request: SkillRequest, session: Session) -> None:
        logger.info(
            f"onSessionStarted requestId: {request.request_id}, sessionId: {session.session_id}"
        )

    def on_launch(self, request: SkillRequest, state: SessionState) -> ResponseDescriptor:
        """Launching without an intent starts a joke."""
        logger.info(f"onLaunch requestId: {request.request_id}")
        return self.engine.handle(Intent.START_JOKE, state)

    def on_session_ended(self, request: SkillRequest, session: Session) -> None:
        logger.info(
            f"onSessionEnded requestId: {request.request_id}, sessionId: {session.session_id}"
            f"{f', reason: {request.reason}' if request.reason else ''}"
        )
