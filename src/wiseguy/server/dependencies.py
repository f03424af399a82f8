"""FastAPI dependencies for server endpoints.

Uses dependency injection instead of global state for better
testability and multi-worker safety.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from wiseguy.framework import WiseGuyApp


def get_skill_app(request: Request) -> WiseGuyApp:
    """Dependency to get the configured skill.

    Raises:
        HTTPException: 503 if no configuration was loaded
    """
    skill_app = getattr(request.app.state, "skill_app", None)

    if skill_app is None:
        raise HTTPException(
            status_code=503,
            detail={
                "error": "Service not configured",
                "message": "Skill configuration not loaded. Set WISEGUY_CONFIG_PATH.",
            },
        )

    return skill_app


# Type alias for cleaner endpoint signatures
SkillAppDep = Annotated[WiseGuyApp, Depends(get_skill_app)]
