"""Settings configuration models.

Global settings for the skill identity and runtime behaviour.
"""

from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class SkillConfig(BaseModel):
    """Skill identity and card titles."""

    app_id: str | None = Field(
        default=None,
        description="Expected application id; requests for other ids are rejected. "
        "Unset disables the check.",
    )
    card_title: str = Field(default="Wise Guy", description="Card title during the joke")
    punchline_card_title: str = Field(
        default="Doctor Guido", description="Card title for the punchline"
    )


class SettingsConfig(BaseModel):
    """Global runtime settings."""

    log_level: LogLevel = Field(default="INFO")
    json_log_file: str | None = Field(
        default=None, description="Write JSON formatted logs to this rotating file"
    )
    random_seed: int | None = Field(
        default=None, description="Seed for joke selection (reproducible picks)"
    )
