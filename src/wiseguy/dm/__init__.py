"""Dialog management."""

from wiseguy.dm.engine import DialogEngine, resolve_intent, stage_name

__all__ = ["DialogEngine", "resolve_intent", "stage_name"]
