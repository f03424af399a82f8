"""Top-level configuration model."""

from pydantic import BaseModel, Field

from wiseguy.config.script import ScriptConfig
from wiseguy.config.settings import SettingsConfig, SkillConfig
from wiseguy.core.catalog import JokeCatalog, JokeRecord


class WiseGuyConfig(BaseModel):
    """Root configuration, as loaded from wiseguy.yaml."""

    version: str = "1.0"
    skill: SkillConfig = Field(default_factory=SkillConfig)
    jokes: list[JokeRecord] = Field(min_length=1)
    script: ScriptConfig = Field(default_factory=ScriptConfig)
    settings: SettingsConfig = Field(default_factory=SettingsConfig)

    def build_catalog(self) -> JokeCatalog:
        """Build the joke catalog, seeded from settings."""
        return JokeCatalog.from_seed(self.jokes, self.settings.random_seed)
