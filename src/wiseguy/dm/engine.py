"""Dialog engine - the knock-knock state machine.

One call to ``handle`` processes one intent against one session. The engine
mutates the session in place and returns the response for the platform.

Stages:
    Idle (stage None) -> AwaitingWhosThere (1) -> AwaitingPunchlineTrigger (2)

Out-of-order intents never restart joke selection: they put the
conversation back to AwaitingWhosThere so the user can carry on with the
same joke. The who's-there and punchline corrections differ in
shape (SSML reprompt vs plain reprompt with a card).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from wiseguy.config.script import ScriptConfig
from wiseguy.config.settings import SkillConfig
from wiseguy.core.catalog import JokeCatalog
from wiseguy.core.errors import IntentError, StateError
from wiseguy.core.response import (
    OutputSpeech,
    ResponseDescriptor,
    ask,
    ask_with_card,
    tell,
    tell_with_card,
)
from wiseguy.core.state import SessionState
from wiseguy.core.types import Intent, Stage

logger = logging.getLogger(__name__)

STAGE_NAMES: dict[Stage | None, str] = {
    None: "Idle",
    Stage.AWAITING_WHOS_THERE: "AwaitingWhosThere",
    Stage.AWAITING_PUNCHLINE: "AwaitingPunchlineTrigger",
}

IntentHandler = Callable[[SessionState], ResponseDescriptor]


def stage_name(stage: Stage | None) -> str:
    return STAGE_NAMES.get(stage, f"Unknown({stage!r})")


def resolve_intent(intent: Intent | str) -> Intent:
    """
    Convert an intent name to an Intent.

    Raises:
        IntentError: If the name is not a dialog intent
    """
    if isinstance(intent, Intent):
        return intent
    try:
        return Intent(intent)
    except ValueError as e:
        raise IntentError(f"Unknown intent: {intent!r}") from e


class DialogEngine:
    """Maps (stage, intent) to (next stage, response)."""

    def __init__(
        self,
        catalog: JokeCatalog,
        script: ScriptConfig | None = None,
        skill: SkillConfig | None = None,
    ):
        """
        Initialize the engine.

        Args:
            catalog: Jokes to pick from
            script: Dialogue lines (defaults to the built-in script)
            skill: Skill settings, used for card titles
        """
        self.catalog = catalog
        self.script = script or ScriptConfig()
        self.skill = skill or SkillConfig()
        self._handlers: dict[Intent, IntentHandler] = {
            Intent.START_JOKE: self._start_joke,
            Intent.WHOS_THERE: self._whos_there,
            Intent.DELIVER_PUNCHLINE: self._deliver_punchline,
            Intent.HELP: self._help,
            Intent.STOP: self._stop,
            Intent.CANCEL: self._cancel,
        }

    def handle(self, intent: Intent | str, session: SessionState) -> ResponseDescriptor:
        """
        Process one intent against the session.

        Args:
            intent: Intent or its name
            session: Session state, updated in place

        Returns:
            Response for this turn

        Raises:
            IntentError: If the intent is unknown
        """
        resolved = resolve_intent(intent)
        before = session.stage

        # Help only reads the stage, so it answers inconsistent sessions as-is
        if resolved is not Intent.HELP:
            try:
                session.check_consistent()
            except StateError as e:
                logger.warning(f"{e}; handling {resolved.value} from Idle")
                session.clear()

        response = self._handlers[resolved](session)

        logger.debug(
            f"{resolved.value}: {stage_name(before)} -> {stage_name(session.stage)}"
            f"{' (terminal)' if response.terminal else ''}"
        )
        return response

    def _start_joke(self, session: SessionState) -> ResponseDescriptor:
        lines = self.script.start_joke

        if session.stage is None:
            joke = self.catalog.pick()
            session.start_joke(joke)
            text = lines.greeting
        elif session.stage == Stage.AWAITING_WHOS_THERE:
            text = lines.already_started
        else:
            # The user jumped back after the setup was told
            session.stage = Stage.AWAITING_WHOS_THERE
            text = lines.out_of_order

        return ask_with_card(
            OutputSpeech.plain(text),
            OutputSpeech.plain(lines.reprompt),
            self.skill.card_title,
            text,
        )

    def _whos_there(self, session: SessionState) -> ResponseDescriptor:
        lines = self.script.whos_there

        if session.stage is None:
            text = lines.no_joke
            reprompt = lines.no_joke_reprompt
        elif session.stage == Stage.AWAITING_WHOS_THERE:
            text = session.setup or ""
            session.stage = Stage.AWAITING_PUNCHLINE
            reprompt = lines.reprompt_template.format(text=text)
        else:
            session.stage = Stage.AWAITING_WHOS_THERE
            text = lines.out_of_order
            reprompt = lines.reprompt_template.format(text=text)

        return ask(OutputSpeech.ssml(text), OutputSpeech.ssml(reprompt))

    def _deliver_punchline(self, session: SessionState) -> ResponseDescriptor:
        lines = self.script.punchline

        if session.stage == Stage.AWAITING_PUNCHLINE:
            return tell_with_card(
                OutputSpeech.ssml(session.speech_punchline or ""),
                self.skill.punchline_card_title,
                session.card_punchline or "",
            )

        if session.stage is None:
            return ask_with_card(
                OutputSpeech.plain(lines.no_joke),
                OutputSpeech.plain(lines.no_joke_reprompt),
                self.skill.card_title,
                lines.no_joke,
            )

        session.stage = Stage.AWAITING_WHOS_THERE
        return ask_with_card(
            OutputSpeech.ssml(lines.out_of_order),
            OutputSpeech.plain(lines.out_of_order_reprompt),
            self.skill.card_title,
            lines.out_of_order,
        )

    def _help(self, session: SessionState) -> ResponseDescriptor:
        text = self.help_text(session)
        # The reprompt repeats the help
        return ask(OutputSpeech.plain(text), OutputSpeech.plain(text))

    def help_text(self, session: SessionState) -> str:
        """Help line for the session's current stage."""
        lines = self.script.help
        if not session.is_consistent():
            return lines.default
        by_stage = {
            None: lines.idle,
            Stage.AWAITING_WHOS_THERE: lines.awaiting_whos_there,
            Stage.AWAITING_PUNCHLINE: lines.awaiting_punchline,
        }
        return by_stage.get(session.stage, lines.default)

    def _stop(self, session: SessionState) -> ResponseDescriptor:
        return tell(OutputSpeech.plain(self.script.farewell.stop))

    def _cancel(self, session: SessionState) -> ResponseDescriptor:
        return tell(OutputSpeech.plain(self.script.farewell.cancel))
