"""Observability module for Wise Guy."""

from wiseguy.observability.logging import ContextLogger, setup_logging

__all__ = ["ContextLogger", "setup_logging"]
