"""In-memory planner sessions backing the HTTP shell."""
from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, Optional, Tuple
from uuid import uuid4

from src.core.config import PlannerSettings
from src.core.errors import (
    InvalidTransitionError,
    SessionNotFoundError,
    TripPlannerError,
)
from src.core.export import export_filename, export_plan, write_plan
from src.core.navigation import NavEvent, Screen, ScreenMachine
from src.core.schemas import SharePayload, ShareResult, TripPlan, TripRequest
from src.core.sharing import share_plan
from src.core.synthesis import synthesize

logger = logging.getLogger(__name__)


def _hand_off_share_sheet(payload: SharePayload) -> None:
    logger.debug("Client opens share sheet for %s", payload.url)


def _hand_off_clipboard(url: str) -> None:
    logger.debug("Client copies %s to clipboard", url)


class PlannerService:
    """Container for planner sessions and the shared random source.

    Each session walks the Home -> Collecting -> Reviewing screen flow. A plan
    is kept only while its session is on the Reviewing screen and is dropped
    when the user navigates back.

    Attributes:
        settings: Runtime configuration
        rng: Random source for walking-distance estimates, seeded from
            ``settings.random_seed`` when set
        _machines: Screen state per session
        _plans: Current plan per session (Reviewing screen only)
        _timestamps: Last activity per session, used for cleanup
    """

    def __init__(self, settings: PlannerSettings) -> None:
        self.settings = settings
        self.rng = random.Random(settings.random_seed)

        self._machines: Dict[str, ScreenMachine] = {}
        self._plans: Dict[str, TripPlan] = {}
        self._timestamps: Dict[str, datetime] = {}

    def __repr__(self) -> str:
        return (
            f"PlannerService(\n"
            f"  seeded={self.settings.random_seed is not None},\n"
            f"  active_sessions={len(self._machines)},\n"
            f"  plans_in_review={len(self._plans)}\n"
            f")"
        )

    @property
    def active_sessions(self) -> int:
        return len(self._machines)

    def _machine(self, session_id: str) -> ScreenMachine:
        machine = self._machines.get(session_id)
        if machine is None:
            raise SessionNotFoundError(session_id)
        self._timestamps[session_id] = datetime.now()
        return machine

    def synthesize(self, request: TripRequest) -> TripPlan:
        """One-shot synthesis outside of any session."""
        return synthesize(request, rng=self.rng)

    def start_session(self) -> str:
        """Open a session and move it from Home to the request form."""
        session_id = f"trip_{uuid4()}"
        machine = ScreenMachine()
        machine.dispatch(NavEvent.START)
        self._machines[session_id] = machine
        self._timestamps[session_id] = datetime.now()
        logger.info("Started planner session %s", session_id)
        return session_id

    def get_session(self, session_id: str) -> Tuple[Screen, Optional[TripPlan]]:
        machine = self._machine(session_id)
        return machine.state, self._plans.get(session_id)

    def submit(self, session_id: str, request: TripRequest) -> TripPlan:
        """Synthesize a plan for the session's form submission.

        Raises:
            InvalidTransitionError: The session is not on the request form.
            MissingFieldsError / SynthesisError: Synthesis failed; the session
                stays on the form.
        """
        machine = self._machine(session_id)
        if not machine.can(NavEvent.SUBMIT_SUCCESS):
            raise InvalidTransitionError(machine.state.value, NavEvent.SUBMIT_SUCCESS.value)

        try:
            plan = synthesize(request, rng=self.rng)
        except TripPlannerError:
            machine.dispatch(NavEvent.SUBMIT_FAILURE)
            raise

        self._plans[session_id] = plan
        machine.dispatch(NavEvent.SUBMIT_SUCCESS)
        return plan

    def back(self, session_id: str) -> Screen:
        machine = self._machine(session_id)
        leaving_review = machine.state is Screen.REVIEWING
        screen = machine.dispatch(NavEvent.BACK)
        if leaving_review:
            self._plans.pop(session_id, None)
            logger.info("Discarded plan for session %s", session_id)
        return screen

    def current_plan(self, session_id: str, action: str) -> TripPlan:
        machine = self._machine(session_id)
        plan = self._plans.get(session_id)
        if plan is None:
            raise InvalidTransitionError(machine.state.value, action)
        return plan

    def export(self, session_id: str) -> Tuple[str, str]:
        """Return the export filename and JSON text for the session's plan."""
        plan = self.current_plan(session_id, "export")
        return export_filename(plan), export_plan(plan)

    def save(self, session_id: str) -> Path:
        """Write the session's plan into the configured export directory."""
        plan = self.current_plan(session_id, "save")
        return write_plan(plan, self.settings.export_dir)

    def share_url(self, session_id: str) -> str:
        base = self.settings.share_base_url.rstrip("/")
        return f"{base}/sessions/{session_id}"

    def share(self, session_id: str, *, native_available: bool = False) -> ShareResult:
        """Share the session's plan through the client.

        The client opens its share sheet when ``native_available`` is set;
        otherwise it copies the link and shows the returned notice.
        """
        plan = self.current_plan(session_id, "share")
        return share_plan(
            plan,
            self.share_url(session_id),
            native_share=_hand_off_share_sheet if native_available else None,
            copy_to_clipboard=_hand_off_clipboard,
        )

    def cleanup_session(self, session_id: str) -> None:
        self._machines.pop(session_id, None)
        self._plans.pop(session_id, None)
        self._timestamps.pop(session_id, None)

    def cleanup_old_sessions(self, max_age_minutes: Optional[int] = None) -> int:
        """Remove sessions idle for longer than ``max_age_minutes``.

        Returns:
            Number of sessions removed
        """
        if max_age_minutes is None:
            max_age_minutes = self.settings.session_ttl_minutes
        cutoff = datetime.now() - timedelta(minutes=max_age_minutes)
        old_sessions = [sid for sid, ts in self._timestamps.items() if ts < cutoff]

        for session_id in old_sessions:
            self.cleanup_session(session_id)

        logger.info("Cleaned up %s planner sessions", len(old_sessions))
        return len(old_sessions)
