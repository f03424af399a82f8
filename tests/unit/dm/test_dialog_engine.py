"""Tests for the dialog engine transition table."""

from unittest.mock import MagicMock

import pytest

from wiseguy.config.script import ScriptConfig
from wiseguy.core.catalog import JokeCatalog
from wiseguy.core.errors import IntentError
from wiseguy.core.state import SessionState
from wiseguy.core.types import Intent, SpeechMode, Stage
from wiseguy.dm.engine import DialogEngine, resolve_intent, stage_name

SCRIPT = ScriptConfig()


@pytest.fixture
def at_whos_there(engine) -> SessionState:
    """Session waiting for 'who's there'."""
    session = SessionState()
    engine.handle(Intent.START_JOKE, session)
    return session


@pytest.fixture
def at_punchline(engine, at_whos_there) -> SessionState:
    """Session waiting for the punchline trigger."""
    engine.handle(Intent.WHOS_THERE, at_whos_there)
    return at_whos_there


class TestResolveIntent:
    def test_accepts_names(self):
        assert resolve_intent("WhosThere") is Intent.WHOS_THERE

    def test_accepts_enum(self):
        assert resolve_intent(Intent.HELP) is Intent.HELP

    def test_unknown_name_raises(self):
        with pytest.raises(IntentError, match="Unknown intent"):
            resolve_intent("TellMeAStory")

    def test_engine_rejects_unknown_intent(self, engine, session):
        with pytest.raises(IntentError):
            engine.handle("NotAnIntent", session)
        assert session == SessionState()


class TestStartJoke:
    """StartJoke in every stage."""

    def test_idle_picks_joke(self, engine, session):
        response = engine.handle(Intent.START_JOKE, session)

        assert session.stage == Stage.AWAITING_WHOS_THERE
        assert (session.setup, session.speech_punchline, session.card_punchline) == (
            "angry",
            "X",
            "Small box.",
        )
        assert response.speech.text == SCRIPT.start_joke.greeting
        assert response.speech.text.startswith("Hello doctor Guido")
        assert response.speech.mode == SpeechMode.PLAIN_TEXT
        assert not response.terminal
        assert response.card is not None
        assert response.card.title == "Wise Guy"
        assert response.card.content == response.speech.text
        assert response.reprompt.text == SCRIPT.start_joke.reprompt

    def test_idle_picks_exactly_one_joke(self, seeded_catalog, three_jokes, session):
        engine = DialogEngine(seeded_catalog)
        engine.handle(Intent.START_JOKE, session)
        picked = [j for j in three_jokes if j.setup == session.setup]
        assert len(picked) == 1
        assert picked[0].speech_punchline == session.speech_punchline
        assert picked[0].card_punchline == session.card_punchline

    def test_awaiting_whos_there_is_noop(self, engine, at_whos_there):
        before = SessionState(**vars(at_whos_there))
        response = engine.handle(Intent.START_JOKE, at_whos_there)

        assert at_whos_there == before
        assert response.speech.text == SCRIPT.start_joke.already_started
        assert response.speech.mode == SpeechMode.PLAIN_TEXT
        assert not response.terminal

    def test_awaiting_punchline_resets_to_whos_there(self, engine, at_punchline):
        response = engine.handle(Intent.START_JOKE, at_punchline)

        assert at_punchline.stage == Stage.AWAITING_WHOS_THERE
        assert at_punchline.setup == "angry"
        assert response.speech.text == SCRIPT.start_joke.out_of_order
        assert response.speech.mode == SpeechMode.PLAIN_TEXT
        assert not response.terminal

    def test_corrective_reset_is_idempotent(self, engine, at_whos_there):
        """Repeated StartJoke after the setup always gives the same correction."""
        texts = set()
        for _ in range(5):
            at_whos_there.stage = Stage.AWAITING_PUNCHLINE
            response = engine.handle(Intent.START_JOKE, at_whos_there)
            texts.add(response.speech.text)
            assert at_whos_there.stage == Stage.AWAITING_WHOS_THERE
        assert texts == {SCRIPT.start_joke.out_of_order}

    def test_corrections_never_redraw(self, three_jokes, session):
        """Only Idle -> AwaitingWhosThere consumes randomness."""
        catalog = MagicMock(spec=JokeCatalog)
        catalog.pick.return_value = three_jokes[2]
        engine = DialogEngine(catalog)

        engine.handle(Intent.START_JOKE, session)
        engine.handle(Intent.WHOS_THERE, session)
        engine.handle(Intent.START_JOKE, session)
        engine.handle(Intent.DELIVER_PUNCHLINE, session)
        engine.handle(Intent.START_JOKE, session)

        catalog.pick.assert_called_once()
        assert session.setup == "setup 2"


class TestWhosThere:
    """WhosThere in every stage."""

    def test_tells_setup_as_ssml(self, engine, at_whos_there):
        response = engine.handle(Intent.WHOS_THERE, at_whos_there)

        assert at_whos_there.stage == Stage.AWAITING_PUNCHLINE
        assert response.speech.text == "<speak>angry</speak>"
        assert response.speech.mode == SpeechMode.SSML
        assert response.reprompt.text == "<speak>You can ask me why I am feeling, angry</speak>"
        assert response.reprompt.mode == SpeechMode.SSML
        assert response.card is None
        assert not response.terminal

    def test_awaiting_punchline_resets(self, engine, at_punchline):
        response = engine.handle(Intent.WHOS_THERE, at_punchline)

        assert at_punchline.stage == Stage.AWAITING_WHOS_THERE
        assert response.speech.text == f"<speak>{SCRIPT.whos_there.out_of_order}</speak>"
        assert response.speech.mode == SpeechMode.SSML
        # Both outputs are SSML and there is no card
        assert response.reprompt.mode == SpeechMode.SSML
        assert response.card is None
        assert not response.terminal

    def test_idle_is_confused_and_stays_idle(self, engine, session):
        response = engine.handle(Intent.WHOS_THERE, session)

        assert session == SessionState()
        assert response.speech.text == f"<speak>{SCRIPT.whos_there.no_joke}</speak>"
        assert response.speech.mode == SpeechMode.SSML
        assert response.reprompt.text == f"<speak>{SCRIPT.whos_there.no_joke_reprompt}</speak>"
        assert not response.terminal


class TestDeliverPunchline:
    """DeliverPunchline in every stage."""

    def test_delivers_and_ends_session(self, engine, at_punchline):
        response = engine.handle(Intent.DELIVER_PUNCHLINE, at_punchline)

        assert response.terminal
        assert response.speech.text == "<speak>X</speak>"
        assert response.speech.mode == SpeechMode.SSML
        assert response.card.title == "Doctor Guido"
        assert response.card.content == "Small box."
        assert response.reprompt is None

    def test_too_early_resets_with_reprompt(self, engine, at_whos_there):
        response = engine.handle(Intent.DELIVER_PUNCHLINE, at_whos_there)

        assert at_whos_there.stage == Stage.AWAITING_WHOS_THERE
        assert not response.terminal
        assert response.speech.text == f"<speak>{SCRIPT.punchline.out_of_order}</speak>"
        assert response.speech.mode == SpeechMode.SSML
        # Unlike the who's-there correction: plain reprompt plus a card
        assert response.reprompt.text == SCRIPT.punchline.out_of_order_reprompt
        assert response.reprompt.mode == SpeechMode.PLAIN_TEXT
        assert response.card.title == "Wise Guy"
        assert response.card.content == SCRIPT.punchline.out_of_order

    def test_idle_cannot_retrieve_joke(self, engine, session):
        response = engine.handle(Intent.DELIVER_PUNCHLINE, session)

        assert session == SessionState()
        assert not response.terminal
        assert response.speech.text == SCRIPT.punchline.no_joke
        assert response.speech.mode == SpeechMode.PLAIN_TEXT
        assert response.reprompt.text == SCRIPT.punchline.no_joke_reprompt
        assert response.card.content == SCRIPT.punchline.no_joke

    def test_only_the_punchline_is_terminal_with_card(self, engine):
        """Across every stage and intent, only the delivered punchline ends with a card."""
        terminal_with_card = []
        for stage in (None, Stage.AWAITING_WHOS_THERE, Stage.AWAITING_PUNCHLINE):
            for intent in Intent:
                session = SessionState()
                if stage is not None:
                    engine.handle(Intent.START_JOKE, session)
                    session.stage = stage
                response = engine.handle(intent, session)
                if response.terminal and response.card is not None:
                    terminal_with_card.append((stage, intent))
        assert terminal_with_card == [(Stage.AWAITING_PUNCHLINE, Intent.DELIVER_PUNCHLINE)]


class TestHelp:
    """Help is keyed off the stage and never changes it."""

    def test_idle(self, engine, session):
        response = engine.handle(Intent.HELP, session)
        assert response.speech.text == SCRIPT.help.idle
        assert session == SessionState()

    def test_awaiting_whos_there(self, engine, at_whos_there):
        response = engine.handle(Intent.HELP, at_whos_there)
        assert response.speech.text == SCRIPT.help.awaiting_whos_there
        assert at_whos_there.stage == Stage.AWAITING_WHOS_THERE

    def test_awaiting_punchline(self, engine, at_punchline):
        response = engine.handle(Intent.HELP, at_punchline)
        assert response.speech.text == SCRIPT.help.awaiting_punchline
        assert at_punchline.stage == Stage.AWAITING_PUNCHLINE

    def test_unrecognised_stage_uses_default(self, engine):
        session = SessionState(setup="angry", speech_punchline="X", card_punchline="Y")
        response = engine.handle(Intent.HELP, session)
        assert response.speech.text == SCRIPT.help.default
        # Help leaves even an inconsistent session alone
        assert session.setup == "angry"

    def test_reprompt_repeats_speech(self, engine, session):
        response = engine.handle(Intent.HELP, session)
        assert response.reprompt == response.speech
        assert response.speech.mode == SpeechMode.PLAIN_TEXT
        assert not response.terminal

    def test_four_distinct_slots(self):
        """There are exactly four configurable help lines."""
        assert set(ScriptConfig().help.model_dump()) == {
            "idle",
            "awaiting_whos_there",
            "awaiting_punchline",
            "default",
        }


class TestFarewell:
    @pytest.mark.parametrize(
        "intent,expected",
        [(Intent.STOP, SCRIPT.farewell.stop), (Intent.CANCEL, SCRIPT.farewell.cancel)],
    )
    def test_ends_session_in_any_stage(self, engine, at_punchline, intent, expected):
        response = engine.handle(intent, at_punchline)
        assert response.terminal
        assert response.speech.text == expected
        assert response.speech.mode == SpeechMode.PLAIN_TEXT
        assert response.card is None
        assert response.reprompt is None


class TestInconsistentSession:
    """Sessions that break the stage/joke invariant fall back to Idle."""

    def test_stage_without_joke_whos_there(self, engine):
        session = SessionState(stage=Stage.AWAITING_WHOS_THERE)
        response = engine.handle(Intent.WHOS_THERE, session)
        assert session == SessionState()
        assert response.speech.text == f"<speak>{SCRIPT.whos_there.no_joke}</speak>"

    def test_stage_without_joke_punchline(self, engine):
        session = SessionState(stage=Stage.AWAITING_PUNCHLINE)
        response = engine.handle(Intent.DELIVER_PUNCHLINE, session)
        assert not response.terminal
        assert response.speech.text == SCRIPT.punchline.no_joke

    def test_stage_without_joke_start_picks_fresh(self, engine):
        session = SessionState(stage=Stage.AWAITING_PUNCHLINE)
        response = engine.handle(Intent.START_JOKE, session)
        assert session.stage == Stage.AWAITING_WHOS_THERE
        assert session.setup == "angry"
        assert response.speech.text == SCRIPT.start_joke.greeting


class TestCustomScript:
    def test_engine_uses_configured_lines(self, catalog, session):
        script = ScriptConfig.model_validate({"start_joke": {"greeting": "Knock knock."}})
        engine = DialogEngine(catalog, script=script)
        assert engine.handle(Intent.START_JOKE, session).speech.text == "Knock knock."


def test_stage_names():
    assert stage_name(None) == "Idle"
    assert stage_name(Stage.AWAITING_WHOS_THERE) == "AwaitingWhosThere"
    assert stage_name(Stage.AWAITING_PUNCHLINE) == "AwaitingPunchlineTrigger"
