"""Session state and its platform attribute form."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from wiseguy.core.catalog import JokeRecord
from wiseguy.core.errors import StateError
from wiseguy.core.types import Stage

logger = logging.getLogger(__name__)

# Platform session attribute keys
STAGE_KEY = "stage"
SETUP_KEY = "setup"
SPEECH_PUNCHLINE_KEY = "speechPunchline"
CARD_PUNCHLINE_KEY = "cardPunchline"


@dataclass
class SessionState:
    """Per-conversation dialog state.

    ``stage`` is None while idle. The joke fields are present exactly when
    a stage is set.
    """

    stage: Stage | None = None
    setup: str | None = None
    speech_punchline: str | None = None
    card_punchline: str | None = None

    def start_joke(self, joke: JokeRecord) -> None:
        """Store a freshly picked joke and move to the first stage."""
        self.stage = Stage.AWAITING_WHOS_THERE
        self.setup = joke.setup
        self.speech_punchline = joke.speech_punchline
        self.card_punchline = joke.card_punchline

    def clear(self) -> None:
        """Return to idle, dropping any stored joke."""
        self.stage = None
        self.setup = None
        self.speech_punchline = None
        self.card_punchline = None

    def has_joke(self) -> bool:
        return None not in (self.setup, self.speech_punchline, self.card_punchline)

    def has_any_joke_field(self) -> bool:
        return any(f is not None for f in (self.setup, self.speech_punchline, self.card_punchline))

    def is_consistent(self) -> bool:
        """Whether the stage/joke invariant holds."""
        if self.stage is None:
            return not self.has_any_joke_field()
        return self.has_joke()

    def check_consistent(self) -> None:
        """
        Verify the stage/joke invariant.

        Raises:
            StateError: If stage and joke fields disagree
        """
        if not self.is_consistent():
            raise StateError(
                f"Inconsistent session: stage={self.stage!r}, joke fields present="
                f"{self.has_any_joke_field()}"
            )


def create_empty_state() -> SessionState:
    """Create an idle session state."""
    return SessionState()


def _parse_stage(raw: Any) -> Stage | None:
    if raw is None:
        return None
    # JSON numbers may arrive as floats
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    # bool is an int subclass; True must not read as stage 1
    if isinstance(raw, bool) or not isinstance(raw, int):
        logger.warning(f"Ignoring non-integer stage attribute: {raw!r}")
        return None
    try:
        return Stage(raw)
    except ValueError:
        logger.warning(f"Ignoring unknown stage attribute: {raw!r}")
        return None


def state_from_attributes(attributes: Mapping[str, Any] | None) -> SessionState:
    """
    Read session state from platform session attributes.

    Args:
        attributes: Flat attribute mapping as persisted by the platform

    Returns:
        SessionState (idle if attributes are missing)
    """
    if not attributes:
        return create_empty_state()

    def _text(key: str) -> str | None:
        value = attributes.get(key)
        return None if value is None else str(value)

    return SessionState(
        stage=_parse_stage(attributes.get(STAGE_KEY)),
        setup=_text(SETUP_KEY),
        speech_punchline=_text(SPEECH_PUNCHLINE_KEY),
        card_punchline=_text(CARD_PUNCHLINE_KEY),
    )


def state_to_attributes(state: SessionState) -> dict[str, Any]:
    """Serialize session state to platform session attributes."""
    attributes: dict[str, Any] = {}
    if state.stage is not None:
        attributes[STAGE_KEY] = int(state.stage)
    if state.setup is not None:
        attributes[SETUP_KEY] = state.setup
    if state.speech_punchline is not None:
        attributes[SPEECH_PUNCHLINE_KEY] = state.speech_punchline
    if state.card_punchline is not None:
        attributes[CARD_PUNCHLINE_KEY] = state.card_punchline
    return attributes
