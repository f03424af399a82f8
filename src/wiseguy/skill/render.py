"""Render response descriptors into platform response envelopes."""

from wiseguy.core.response import OutputSpeech, ResponseDescriptor
from wiseguy.core.state import SessionState, state_to_attributes
from wiseguy.core.types import SpeechMode
from wiseguy.skill.models import (
    CardPayload,
    OutputSpeechPayload,
    RepromptPayload,
    ResponseBody,
    ResponseEnvelope,
)


def render_speech(speech: OutputSpeech) -> OutputSpeechPayload:
    if speech.mode == SpeechMode.SSML:
        return OutputSpeechPayload(type="SSML", ssml=speech.text)
    return OutputSpeechPayload(type="PlainText", text=speech.text)


def render_response(descriptor: ResponseDescriptor, state: SessionState) -> ResponseEnvelope:
    """
    Build the response envelope for one turn.

    Terminal responses carry no session attributes: the platform discards
    the session anyway.
    """
    body = ResponseBody(
        output_speech=render_speech(descriptor.speech),
        should_end_session=descriptor.terminal,
    )
    if descriptor.card is not None:
        body.card = CardPayload(title=descriptor.card.title, content=descriptor.card.content)
    if descriptor.reprompt is not None:
        body.reprompt = RepromptPayload(output_speech=render_speech(descriptor.reprompt))

    attributes = None if descriptor.terminal else state_to_attributes(state)
    return ResponseEnvelope(session_attributes=attributes, response=body)


def render_empty() -> ResponseEnvelope:
    """Response for requests that expect no speech (session ended)."""
    return ResponseEnvelope()
