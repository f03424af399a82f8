"""Platform envelope models.

Request envelopes arrive with camelCase keys; fields are snake_case here.
Unknown keys are ignored so newer platform versions still parse.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

LAUNCH_REQUEST = "LaunchRequest"
INTENT_REQUEST = "IntentRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"


class EnvelopeModel(BaseModel):
    """Base for envelope models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class Application(EnvelopeModel):
    application_id: str


class User(EnvelopeModel):
    user_id: str | None = None


class Session(EnvelopeModel):
    """Platform session, carrying the persisted attributes."""

    new: bool = False
    session_id: str
    application: Application | None = None
    attributes: dict[str, Any] | None = None
    user: User | None = None


class IntentPayload(EnvelopeModel):
    """Intent recognised by the platform."""

    name: str
    slots: dict[str, Any] = Field(default_factory=dict)


class SkillRequest(EnvelopeModel):
    """The request part of the envelope."""

    type: str
    request_id: str
    timestamp: str | None = None
    locale: str | None = None
    intent: IntentPayload | None = None
    reason: str | None = None


class RequestEnvelope(EnvelopeModel):
    """Inbound platform request."""

    version: str = "1.0"
    session: Session
    request: SkillRequest


class OutputSpeechPayload(BaseModel):
    """Rendered speech object."""

    type: Literal["PlainText", "SSML"]
    text: str | None = None
    ssml: str | None = None


class CardPayload(BaseModel):
    type: Literal["Simple"] = "Simple"
    title: str
    content: str


class RepromptPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    output_speech: OutputSpeechPayload = Field(alias="outputSpeech")


class ResponseBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    output_speech: OutputSpeechPayload | None = Field(default=None, alias="outputSpeech")
    card: CardPayload | None = None
    reprompt: RepromptPayload | None = None
    should_end_session: bool | None = Field(default=None, alias="shouldEndSession")


class ResponseEnvelope(BaseModel):
    """Outbound platform response."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = "1.0"
    session_attributes: dict[str, Any] | None = Field(default=None, alias="sessionAttributes")
    response: ResponseBody = Field(default_factory=ResponseBody)

    def to_wire(self) -> dict[str, Any]:
        """Serialize with platform key names, dropping unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
