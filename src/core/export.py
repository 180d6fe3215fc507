"""JSON export of a synthesized plan.

The exported document is the plan's own model dump, pretty-printed, so
``load_plan(export_plan(plan)) == plan``.
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Union

from src.core.schemas import TripPlan

logger = logging.getLogger(__name__)

EXPORT_SUFFIX = "-trip-plan.json"
EXPORT_MEDIA_TYPE = "application/json"
FALLBACK_STEM = "trip"

_UNSAFE_PATH_CHARS = re.compile(r"[\\/\x00]")


def export_filename(plan: TripPlan) -> str:
    return f"{plan.destination}{EXPORT_SUFFIX}"


def safe_export_filename(plan: TripPlan) -> str:
    """Filename for writing ``plan`` to disk.

    Path separators become ``-`` and leading dots are dropped, so the name
    always stays a single component inside the export directory.
    """
    stem = _UNSAFE_PATH_CHARS.sub("-", plan.destination).strip().lstrip(".").strip()
    return Path(f"{stem or FALLBACK_STEM}{EXPORT_SUFFIX}").name


def export_plan(plan: TripPlan) -> str:
    """Serialise ``plan`` as indented JSON, keeping non-ASCII text as-is."""
    return json.dumps(plan.model_dump(mode="json"), indent=2, ensure_ascii=False)


def load_plan(text: Union[str, bytes]) -> TripPlan:
    """Parse an exported plan back into a ``TripPlan``."""
    return TripPlan.model_validate_json(text)


def write_plan(plan: TripPlan, directory: Union[str, Path]) -> Path:
    """Write the export file into ``directory`` and return its path.

    Raises:
        ValueError: The resolved file path falls outside ``directory``.
    """
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / safe_export_filename(plan)
    if path.resolve().parent != target_dir.resolve():
        raise ValueError(f"Export path {path} escapes {target_dir}")
    path.write_text(export_plan(plan), encoding="utf-8")
    logger.info("Exported plan for %s to %s", plan.destination, path)
    return path
