"""Script configuration models.

Every line the skill can say outside of the jokes themselves. Defaults
reproduce the Doctor Guido script.
"""

from pydantic import BaseModel, Field


class StartJokeScript(BaseModel):
    """Lines for the start-joke handler."""

    greeting: str = Field(
        default="Hello doctor Guido. Can you please help me getting better?!",
        description="Spoken when a new joke is picked",
    )
    already_started: str = Field(
        default=(
            "Hello Doctor Guido. I have this problem. Can you please ask me how I am feeling?"
        ),
        description="Spoken when a joke is already waiting for 'who's there'",
    )
    out_of_order: str = Field(
        default=(
            "No doctor Guido. I'm not here to listen to your strange answers. I pay you. "
            "Please ask me how I'm feeling."
        ),
        description="Spoken when the user restarts after the setup was told",
    )
    reprompt: str = Field(
        default=(
            "Hello doctor Guido, I'm your digital patient. "
            "To start my therapy, please ask me to sit down."
        )
    )


class WhosThereScript(BaseModel):
    """Lines for the who's-there handler. All lines are SSML bodies."""

    reprompt_template: str = Field(
        default="You can ask me why I am feeling, {text}",
        description="Reprompt built from the spoken text",
    )
    out_of_order: str = Field(
        default='That\'s not how digital therapy works! <break time="0.5s" /> please be serious!'
    )
    no_joke: str = Field(
        default=(
            "Sorry, I am confused. I'm here with a problem. You can ask me what my problem is"
        )
    )
    no_joke_reprompt: str = Field(
        default=(
            "I am getting desperate. Doctors are crooks. They ask you things that do not help. "
            "Ask me about my issues please!"
        )
    )


class PunchlineScript(BaseModel):
    """Lines for the punchline handler."""

    out_of_order: str = Field(
        default="Doctor Guido, I am really starting to lose my patience with you!",
        description="SSML body spoken when the punchline is asked for too early",
    )
    out_of_order_reprompt: str = Field(default="Please, please help me! Ask me why!")
    no_joke: str = Field(
        default="Sorry, I couldn't correctly retrieve the joke. You can say, tell me a joke"
    )
    no_joke_reprompt: str = Field(default="You can say, tell me a joke")


class HelpScript(BaseModel):
    """Stage-keyed help lines."""

    idle: str = Field(
        default=(
            "Hello doctor Guido, I'm your digital patient. "
            "To start my therapy, please ask me to sit down."
        )
    )
    awaiting_whos_there: str = Field(
        default="Thank you for seeing me doctor Guido. Please ask me how I feel."
    )
    awaiting_punchline: str = Field(default="Please ask me why I am feeling the way I do.")
    default: str = Field(
        default=(
            "Hello doctor Guido, I'm your digital patient. "
            "To start my therapy, please ask me to sit down."
        ),
        description="Used when the session stage is not recognised",
    )


class FarewellScript(BaseModel):
    """Lines that end the session."""

    stop: str = Field(default="Goodbye doctor Guido, thank you for trying to help me")
    cancel: str = Field(default="Goodbye")


class ScriptConfig(BaseModel):
    """All scripted dialogue lines."""

    start_joke: StartJokeScript = Field(default_factory=StartJokeScript)
    whos_there: WhosThereScript = Field(default_factory=WhosThereScript)
    punchline: PunchlineScript = Field(default_factory=PunchlineScript)
    help: HelpScript = Field(default_factory=HelpScript)
    farewell: FarewellScript = Field(default_factory=FarewellScript)
