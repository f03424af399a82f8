"""Wise Guy FastAPI Application.

Exposes the skill as an HTTPS endpoint for the voice platform, plus
health, readiness and version probes.
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

from fastapi import Body, FastAPI, Request

from wiseguy import __version__
from wiseguy.__version__ import get_version_info
from wiseguy.core.errors import WiseGuyError
from wiseguy.framework import WiseGuyApp
from wiseguy.observability.logging import setup_logging
from wiseguy.server.dependencies import SkillAppDep
from wiseguy.server.errors import create_error_response, global_exception_handler
from wiseguy.server.models import HealthResponse, ReadinessResponse, VersionResponse

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WISEGUY_CONFIG_PATH"
DEFAULT_CONFIG_PATH = "wiseguy.yaml"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - load the skill on startup.

    A missing config starts the app unconfigured; an invalid one
    (including an empty joke catalog) aborts startup.
    """
    from dotenv import load_dotenv

    load_dotenv()

    config_path = os.environ.get(CONFIG_ENV_VAR)
    if not config_path and os.path.exists(DEFAULT_CONFIG_PATH):
        config_path = DEFAULT_CONFIG_PATH

    if getattr(app.state, "skill_app", None) is not None:
        logger.info("Skill already configured; skipping config load")
        yield
        return

    if not config_path:
        logger.warning(
            f"{CONFIG_ENV_VAR} not set and {DEFAULT_CONFIG_PATH} not found. "
            "App will start unconfigured."
        )
        yield
        return

    logger.info(f"Loading config from {config_path}")
    try:
        skill_app = WiseGuyApp.from_path(config_path)
    except FileNotFoundError as e:
        logger.warning(f"Config not found ({e}). App will start unconfigured.")
        yield
        return

    settings = skill_app.config.settings
    setup_logging(settings.log_level, settings.json_log_file)

    app.state.skill_app = skill_app
    logger.info("Skill ready.")
    yield
    logger.info("Shutting down.")
    app.state.skill_app = None


app = FastAPI(
    title="Wise Guy Skill",
    description="Knock-knock joke voice skill",
    version=__version__,
    lifespan=lifespan,
)

app.add_exception_handler(Exception, global_exception_handler)


@app.post("/skill")
async def handle_skill_request(
    skill_app: SkillAppDep, envelope: dict[str, Any] = Body(...)
) -> dict[str, Any]:
    """Handle one platform request envelope.

    The raw body goes to the dispatcher so a malformed envelope is
    reported as a sanitized 400 like any other RequestError.
    """
    try:
        return skill_app.dispatcher.dispatch(envelope)
    except WiseGuyError as e:
        session = envelope.get("session")
        session_id = session.get("sessionId") if isinstance(session, dict) else None
        raise create_error_response(e, session_id=session_id, endpoint="/skill") from e


@app.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe."""
    skill_app = getattr(request.app.state, "skill_app", None)

    return HealthResponse(
        status="healthy" if skill_app else "starting",
        version=__version__,
        timestamp=datetime.now().isoformat(),
        jokes=skill_app.catalog.count() if skill_app else None,
    )


@app.get("/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request) -> ReadinessResponse:
    """Readiness probe."""
    skill_app = getattr(request.app.state, "skill_app", None)

    if not skill_app:
        return ReadinessResponse(
            ready=False, message="Skill not configured", checks={"skill": False}
        )

    return ReadinessResponse(ready=True, message="Service is ready", checks={"skill": True})


@app.get("/version", response_model=VersionResponse)
def get_version() -> VersionResponse:
    """Get detailed version information."""
    info = get_version_info()
    return VersionResponse(
        version=str(info["full"]),
        major=int(info["major"]),
        minor=int(info["minor"]),
        patch=str(info["patch"]),
    )


def create_app(skill_app: WiseGuyApp | None = None) -> FastAPI:
    """Factory function."""
    if skill_app:
        app.state.skill_app = skill_app
    return app
