import logging
from src.api.session_service import PlannerService
from src.core.config import PlannerSettings
from fastapi import FastAPI
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from functools import lru_cache

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_planner_service() -> PlannerService:
    settings = PlannerSettings.from_env()
    return PlannerService(settings)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    try:
        yield
    finally:
        service = get_planner_service()
        removed = service.cleanup_old_sessions(max_age_minutes=0)
        logger.info(f"Planner shutdown, dropped {removed} sessions")
