"""Configuration helpers for the planner service."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:3001"]


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass(slots=True)
class PlannerSettings:
    """Centralised container for the planner runtime settings."""

    random_seed: Optional[int] = None
    share_base_url: str = "http://localhost:3000"
    export_dir: str = "exports"
    session_ttl_minutes: int = 60
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    sentry_dsn: Optional[str] = None

    @classmethod
    def from_env(cls) -> "PlannerSettings":
        """Load settings from environment variables."""

        origins = os.getenv("PLANNER_CORS_ORIGINS")
        return cls(
            random_seed=_optional_int("PLANNER_RANDOM_SEED"),
            share_base_url=os.getenv("PLANNER_SHARE_BASE_URL", "http://localhost:3000"),
            export_dir=os.getenv("PLANNER_EXPORT_DIR", "exports"),
            session_ttl_minutes=_optional_int("PLANNER_SESSION_TTL_MINUTES") or 60,
            cors_origins=(
                [origin.strip() for origin in origins.split(",") if origin.strip()]
                if origins
                else list(DEFAULT_CORS_ORIGINS)
            ),
            sentry_dsn=os.getenv("SENTRY_DSN") or None,
        )
