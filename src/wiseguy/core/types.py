"""Core constants and enums."""

from enum import Enum, IntEnum


class Stage(IntEnum):
    """Position within the current joke's scripted dialog.

    Idle is not a member: it is the absence of a stage.
    """

    AWAITING_WHOS_THERE = 1
    AWAITING_PUNCHLINE = 2


class Intent(str, Enum):
    """Named user actions handed to the dialog engine."""

    START_JOKE = "StartJoke"
    WHOS_THERE = "WhosThere"
    DELIVER_PUNCHLINE = "DeliverPunchline"
    HELP = "Help"
    STOP = "Stop"
    CANCEL = "Cancel"


class SpeechMode(str, Enum):
    """Rendering mode of an utterance."""

    PLAIN_TEXT = "PlainText"
    SSML = "SSML"
