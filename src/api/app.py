"""FastAPI surface for the trip plan synthesis engine."""
from __future__ import annotations

# Load environment variables from .env file
from dotenv import load_dotenv

# Load .env file before reading any planner settings
load_dotenv()


from typing import Any, Dict
from urllib.parse import quote

import logging
import sentry_sdk
from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware

from src.api.dependencies import get_planner_service, lifespan
from src.api.response_builder import _result_to_response
from src.api.schemas import (
    PlanningResponse,
    PlanRequest,
    SaveResponse,
    ShareResponse,
    ValidationResponse,
)
from src.core.config import PlannerSettings
from src.core.errors import (
    InvalidTransitionError,
    MissingFieldsError,
    SessionNotFoundError,
    SynthesisError,
)
from src.core.export import EXPORT_MEDIA_TYPE
from src.core.navigation import Screen
from src.core.validator import missing_fields

logger = logging.getLogger(__name__)

settings = PlannerSettings.from_env()

if settings.sentry_dsn:  # pragma: no cover - runtime configuration
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        enable_logs=True,
        send_default_pii=False,
        traces_sample_rate=1.0,
    )

app = FastAPI(title="Trip Planner API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _session_error(exc: Exception) -> HTTPException:
    """Map planner errors onto HTTP status codes."""
    if isinstance(exc, MissingFieldsError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, SessionNotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, InvalidTransitionError):
        return HTTPException(status_code=409, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))


@app.post("/plan/validate", response_model=ValidationResponse)
async def validate_plan_request(payload: PlanRequest) -> ValidationResponse:
    """Report which required fields of a form submission are missing.

    Nothing is synthesized. Date ordering, day-count bounds and tier names are
    not checked.
    """
    missing = missing_fields(payload)
    return ValidationResponse(valid=not missing, missing_fields=missing)


@app.post("/plan/synthesize", response_model=PlanningResponse)
async def synthesize_plan(payload: PlanRequest) -> PlanningResponse:
    """Synthesize a complete plan for one request, without a session.

    Args:
        payload: Planner form values (destination, dayCount, budgetTier,
                travelerCount and the optional fields).

    Returns:
        PlanningResponse with status "complete" and the synthesized plan.

    Raises:
        HTTPException: 400 when required fields are missing, 500 when
                synthesis fails

    Example JSON payload:
        ```json
        {
            "destination": "Paris",
            "dayCount": "3",
            "budgetTier": "moderate",
            "travelerCount": "2",
            "interests": "museums, food"
        }
        ```
    """
    logger.info("One-shot synthesis request for %s", payload.destination)
    service = get_planner_service()
    try:
        plan = service.synthesize(payload)
    except MissingFieldsError as exc:
        logger.error(f"Validation error during synthesis: {str(exc)}")
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except SynthesisError as exc:
        logger.error(f"Synthesis error: {str(exc)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return _result_to_response(None, Screen.REVIEWING, plan)


@app.post("/sessions", response_model=PlanningResponse)
async def start_session() -> PlanningResponse:
    """Open a planner session on the request form."""
    service = get_planner_service()
    session_id = service.start_session()
    screen, plan = service.get_session(session_id)
    return _result_to_response(session_id, screen, plan)


@app.get("/sessions/{session_id}", response_model=PlanningResponse)
async def get_session(session_id: str) -> PlanningResponse:
    """Return the session's current screen and plan, if any."""
    service = get_planner_service()
    try:
        screen, plan = service.get_session(session_id)
    except SessionNotFoundError as exc:
        raise _session_error(exc) from exc
    return _result_to_response(session_id, screen, plan)


@app.post("/sessions/{session_id}/submit", response_model=PlanningResponse)
async def submit_request(session_id: str, payload: PlanRequest) -> PlanningResponse:
    """Submit the form for a session and move it to the itinerary view."""
    logger.info("Form submitted for session %s: %s", session_id, payload.destination)
    service = get_planner_service()
    try:
        plan = service.submit(session_id, payload)
    except (MissingFieldsError, SessionNotFoundError, InvalidTransitionError) as exc:
        logger.error(f"Submit rejected for {session_id}: {str(exc)}")
        raise _session_error(exc) from exc
    except Exception as exc:
        logger.error(f"Unexpected error during submit: {str(exc)}", exc_info=True)
        raise _session_error(exc) from exc

    return _result_to_response(session_id, Screen.REVIEWING, plan)


@app.post("/sessions/{session_id}/back", response_model=PlanningResponse)
async def go_back(session_id: str) -> PlanningResponse:
    """Navigate one screen back; leaving the itinerary view discards the plan."""
    service = get_planner_service()
    try:
        screen = service.back(session_id)
    except (SessionNotFoundError, InvalidTransitionError) as exc:
        raise _session_error(exc) from exc
    return _result_to_response(session_id, screen, None)


@app.get("/sessions/{session_id}/export")
async def export_session_plan(session_id: str) -> Response:
    """Download the session's plan as a pretty-printed JSON file."""
    service = get_planner_service()
    try:
        filename, content = service.export(session_id)
    except (SessionNotFoundError, InvalidTransitionError) as exc:
        raise _session_error(exc) from exc

    return Response(
        content=content.encode("utf-8"),
        media_type=EXPORT_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )


@app.post("/sessions/{session_id}/save", response_model=SaveResponse)
async def save_session_plan(session_id: str) -> SaveResponse:
    """Write the session's plan into the configured export directory."""
    service = get_planner_service()
    try:
        path = service.save(session_id)
    except (SessionNotFoundError, InvalidTransitionError) as exc:
        raise _session_error(exc) from exc
    except ValueError as exc:
        logger.error(f"Rejected export path for {session_id}: {str(exc)}")
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except OSError as exc:
        logger.error(f"Could not write export for {session_id}: {str(exc)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return SaveResponse(session_id=session_id, filename=path.name, path=str(path))


@app.get("/sessions/{session_id}/share", response_model=ShareResponse)
async def share_session_plan(session_id: str, native: bool = False) -> ShareResponse:
    """Return the share content for the session's plan.

    ``native`` tells whether the client has a native share capability; without
    it the result carries the clipboard notice to show after copying the link.
    """
    service = get_planner_service()
    try:
        result = service.share(session_id, native_available=native)
    except (SessionNotFoundError, InvalidTransitionError) as exc:
        raise _session_error(exc) from exc
    return ShareResponse(session_id=session_id, result=result)


@app.post("/sessions/cleanup", response_model=int)
async def cleanup_sessions() -> int:
    """Drop sessions idle for longer than the configured TTL."""
    logger.info("Cleanup sessions request received")
    service = get_planner_service()
    return service.cleanup_old_sessions()


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health endpoint used for readiness probes."""

    return {"status": "healthy", "service": "trip-planner-api"}


@app.get("/planner/info")
async def get_planner_info() -> Dict[str, Any]:
    """Get information about the running planner service."""
    service = get_planner_service()

    return {
        'planner_info': {
            'seeded': service.settings.random_seed is not None,
            'active_sessions': service.active_sessions,
            'session_ttl_minutes': service.settings.session_ttl_minutes,
        }
    }
