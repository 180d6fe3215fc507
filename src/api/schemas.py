from typing import Literal, Optional
from pydantic import BaseModel, Field
from src.core.schemas import TripRequest, TripPlan, ShareResult


class PlanRequest(TripRequest):
    """Request payload carrying one planner form submission."""


class ValidationResponse(BaseModel):
    """Result of a presence check on a form submission."""

    valid: bool = Field(..., description="True when every required field is filled in")
    missing_fields: list[str] = Field(
        default_factory=list, description="Required fields that were empty or absent"
    )


class PlanningResponse(BaseModel):
    """Unified response returned by the synthesis and session endpoints."""

    status: Literal["collecting", "complete", "home"] = Field(
        ..., description="Current planner state"
    )
    session_id: Optional[str] = Field(
        default=None, description="Session identifier for follow-up calls"
    )
    screen: Optional[Literal["home", "collecting", "reviewing"]] = Field(
        default=None, description="Screen the session is currently on"
    )
    plan: Optional[TripPlan] = Field(
        default=None, description="Synthesized plan when status is 'complete'"
    )


class ShareResponse(BaseModel):
    """How the shell should share the session's current plan."""

    session_id: str
    result: ShareResult


class SaveResponse(BaseModel):
    """Location of a plan written to the export directory."""

    session_id: str
    filename: str
    path: str
