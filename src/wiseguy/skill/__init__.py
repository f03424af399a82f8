"""Skill plumbing: envelopes, handlers and dispatch."""

from wiseguy.skill.dispatcher import SkillDispatcher
from wiseguy.skill.handlers import PLATFORM_INTENTS, SkillHandlers, WiseGuySkill

__all__ = ["PLATFORM_INTENTS", "SkillDispatcher", "SkillHandlers", "WiseGuySkill"]
