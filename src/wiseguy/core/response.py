"""Response descriptors returned by the dialog engine.

The builders mirror the four response shapes a voice skill can produce:
``tell`` ends the session, ``ask`` keeps it open for the next intent, and
the ``*_with_card`` variants add a visual companion card.
"""

from __future__ import annotations

from dataclasses import dataclass

from wiseguy.core.types import SpeechMode


@dataclass(frozen=True)
class OutputSpeech:
    """A single utterance and how to render it."""

    text: str
    mode: SpeechMode = SpeechMode.PLAIN_TEXT

    @classmethod
    def plain(cls, text: str) -> OutputSpeech:
        return cls(text=text, mode=SpeechMode.PLAIN_TEXT)

    @classmethod
    def ssml(cls, text: str) -> OutputSpeech:
        """Wrap text in <speak> tags as SSML output."""
        return cls(text=wrap_ssml(text), mode=SpeechMode.SSML)


@dataclass(frozen=True)
class Card:
    """Visual companion to the spoken response."""

    title: str
    content: str


@dataclass(frozen=True)
class ResponseDescriptor:
    """Structured result of one dialog turn."""

    speech: OutputSpeech
    reprompt: OutputSpeech | None = None
    card: Card | None = None
    terminal: bool = False


def wrap_ssml(text: str) -> str:
    """Wrap text in a <speak> element."""
    return f"<speak>{text}</speak>"


def tell(speech: OutputSpeech) -> ResponseDescriptor:
    return ResponseDescriptor(speech=speech, terminal=True)


def tell_with_card(speech: OutputSpeech, title: str, content: str) -> ResponseDescriptor:
    return ResponseDescriptor(speech=speech, card=Card(title, content), terminal=True)


def ask(speech: OutputSpeech, reprompt: OutputSpeech) -> ResponseDescriptor:
    return ResponseDescriptor(speech=speech, reprompt=reprompt, terminal=False)


def ask_with_card(
    speech: OutputSpeech, reprompt: OutputSpeech, title: str, content: str
) -> ResponseDescriptor:
    return ResponseDescriptor(
        speech=speech, reprompt=reprompt, card=Card(title, content), terminal=False
    )
