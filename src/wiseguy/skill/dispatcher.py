"""Skill request dispatcher.

Turns one platform request envelope into one skill call and renders the
result back into a response envelope. Session state travels inside the
envelopes; nothing is stored between requests.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from wiseguy.core.errors import ApplicationIdError, IntentError, RequestError
from wiseguy.core.state import state_from_attributes
from wiseguy.observability.logging import ContextLogger
from wiseguy.skill.handlers import SkillHandlers
from wiseguy.skill.models import (
    INTENT_REQUEST,
    LAUNCH_REQUEST,
    SESSION_ENDED_REQUEST,
    RequestEnvelope,
    ResponseEnvelope,
)
from wiseguy.skill.render import render_empty, render_response

logger = logging.getLogger(__name__)


class SkillDispatcher:
    """Routes platform requests to skill handlers."""

    def __init__(self, skill: SkillHandlers, app_id: str | None = None):
        """
        Initialize dispatcher.

        Args:
            skill: Skill handlers to dispatch to
            app_id: Expected application id; None accepts any
        """
        self.skill = skill
        self.app_id = app_id
        self._log = ContextLogger(__name__)

    def dispatch(self, envelope: RequestEnvelope | dict[str, Any]) -> dict[str, Any]:
        """
        Handle one request envelope.

        Args:
            envelope: Parsed envelope or raw JSON mapping

        Returns:
            Response envelope in wire format

        Raises:
            RequestError: If the envelope is malformed or of an unsupported type
            ApplicationIdError: If the application id does not match
            IntentError: If the intent is not handled by the skill
        """
        return self.dispatch_envelope(self.parse(envelope)).to_wire()

    @staticmethod
    def parse(envelope: RequestEnvelope | dict[str, Any]) -> RequestEnvelope:
        if isinstance(envelope, RequestEnvelope):
            return envelope
        try:
            return RequestEnvelope.model_validate(envelope)
        except PydanticValidationError as e:
            raise RequestError(f"Malformed request envelope: {e}") from e

    def dispatch_envelope(self, envelope: RequestEnvelope) -> ResponseEnvelope:
        request = envelope.request
        session = envelope.session
        log = self._log.with_context(
            request_id=request.request_id, session_id=session.session_id
        )

        self.verify_application(envelope)

        if session.new:
            self.skill.on_session_started(request, session)

        if request.type == SESSION_ENDED_REQUEST:
            self.skill.on_session_ended(request, session)
            return render_empty()

        state = state_from_attributes(session.attributes)

        if request.type == LAUNCH_REQUEST:
            descriptor = self.skill.on_launch(request, state)
        elif request.type == INTENT_REQUEST:
            if request.intent is None:
                raise RequestError("IntentRequest without an intent")
            handler = self.skill.intent_handlers.get(request.intent.name)
            if handler is None:
                raise IntentError(f"Unsupported intent: {request.intent.name}")
            log.debug(f"Dispatching intent {request.intent.name}")
            descriptor = handler(request.intent, state)
        else:
            raise RequestError(f"Unsupported request type: {request.type}")

        return render_response(descriptor, state)

    def verify_application(self, envelope: RequestEnvelope) -> None:
        """
        Reject requests addressed to another application.

        Raises:
            ApplicationIdError: If an app id is configured and does not match
        """
        if not self.app_id:
            return
        application = envelope.session.application
        received = application.application_id if application else None
        if received != self.app_id:
            logger.error(f"The applicationIds don't match: {received} and {self.app_id}")
            raise ApplicationIdError("Invalid applicationId")
