"""Shared fixtures for Wise Guy tests.

Catalogs are built with seeded or single-joke inputs so every test is
deterministic.
"""

import random

import pytest

from wiseguy.config.models import WiseGuyConfig
from wiseguy.core.catalog import JokeCatalog, JokeRecord
from wiseguy.core.state import SessionState
from wiseguy.dm.engine import DialogEngine
from wiseguy.framework import WiseGuyApp

TEST_APP_ID = "amzn1.ask.skill.test-0000"


@pytest.fixture
def angry_joke() -> JokeRecord:
    """The single joke used by the end-to-end scenarios."""
    return JokeRecord(setup="angry", speech_punchline="X", card_punchline="Small box.")


@pytest.fixture
def catalog(angry_joke) -> JokeCatalog:
    """One-joke catalog: picks are deterministic."""
    return JokeCatalog([angry_joke])


@pytest.fixture
def engine(catalog) -> DialogEngine:
    return DialogEngine(catalog)


@pytest.fixture
def session() -> SessionState:
    """Idle session."""
    return SessionState()


@pytest.fixture
def three_jokes() -> list[JokeRecord]:
    return [
        JokeRecord(setup=f"setup {i}", speech_punchline=f"speech {i}", card_punchline=f"card {i}")
        for i in range(3)
    ]


@pytest.fixture
def seeded_catalog(three_jokes) -> JokeCatalog:
    return JokeCatalog(three_jokes, rng=random.Random(1234))


@pytest.fixture
def config_data() -> dict:
    """Raw configuration mapping as it would come from YAML."""
    return {
        "version": "1.0",
        "skill": {"app_id": TEST_APP_ID},
        "jokes": [{"setup": "angry", "speechPunchline": "X", "cardPunchline": "Small box."}],
    }


@pytest.fixture
def wiseguy_config(config_data) -> WiseGuyConfig:
    return WiseGuyConfig.model_validate(config_data)


@pytest.fixture
def skill_app(wiseguy_config) -> WiseGuyApp:
    return WiseGuyApp(wiseguy_config)


@pytest.fixture
def make_envelope():
    """
    Factory fixture for platform request envelopes.

    Usage:
        def test_something(make_envelope):
            envelope = make_envelope("IntentRequest", intent="WhosThereIntent")
    """

    def _create(
        request_type: str = "IntentRequest",
        intent: str | None = None,
        attributes: dict | None = None,
        new: bool = False,
        app_id: str = TEST_APP_ID,
        session_id: str = "session-1",
    ) -> dict:
        request: dict = {"type": request_type, "requestId": "request-1", "locale": "en-US"}
        if intent is not None:
            request["intent"] = {"name": intent, "slots": {}}
        return {
            "version": "1.0",
            "session": {
                "new": new,
                "sessionId": session_id,
                "application": {"applicationId": app_id},
                "attributes": attributes or {},
                "user": {"userId": "user-1"},
            },
            "request": request,
        }

    return _create
