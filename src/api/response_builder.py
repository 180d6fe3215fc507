from typing import Literal, Optional
from src.api.schemas import PlanningResponse
from src.core.navigation import Screen
from src.core.schemas import TripPlan


def _determine_status(screen: Optional[Screen], plan: Optional[TripPlan]) -> Literal["collecting", "complete", "home"]:
    if plan is not None:
        return "complete"
    if screen is Screen.HOME:
        return "home"
    return "collecting"


def _result_to_response(
    session_id: Optional[str],
    screen: Optional[Screen],
    plan: Optional[TripPlan],
) -> PlanningResponse:
    return PlanningResponse(
        status=_determine_status(screen, plan),
        session_id=session_id,
        screen=screen.value if screen is not None else None,
        plan=plan,
    )
