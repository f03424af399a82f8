"""API Models - Pydantic models for FastAPI endpoints.

The skill endpoint itself speaks the platform envelope format
(see wiseguy.skill.models); these are the operational endpoints.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "starting"]
    version: str
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())
    jokes: int | None = Field(default=None, description="Catalog size once configured")


class ReadinessResponse(BaseModel):
    """Readiness probe response."""

    ready: bool
    message: str
    checks: dict[str, bool] | None = None


class VersionResponse(BaseModel):
    """Response model for version endpoint."""

    version: str = Field(description="Full version string")
    major: int = Field(description="Major version number")
    minor: int = Field(description="Minor version number")
    patch: str = Field(description="Patch version (may include suffix)")
