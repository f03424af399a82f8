"""Configuration module for Wise Guy."""

from wiseguy.config.loader import ConfigLoader
from wiseguy.config.models import WiseGuyConfig
from wiseguy.config.script import ScriptConfig
from wiseguy.config.settings import SettingsConfig, SkillConfig

__all__ = ["ConfigLoader", "WiseGuyConfig", "ScriptConfig", "SettingsConfig", "SkillConfig"]
