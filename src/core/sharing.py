"""Sharing a plan through a native share sheet or the clipboard."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from src.core.schemas import SharePayload, ShareResult, TripPlan

logger = logging.getLogger(__name__)

CLIPBOARD_NOTICE = "Link copied to clipboard!"

NativeShare = Callable[[SharePayload], None]
CopyToClipboard = Callable[[str], None]


def build_share_payload(plan: TripPlan, url: str) -> SharePayload:
    return SharePayload(
        title=f"My Trip to {plan.destination}",
        text=f"Check out my {plan.duration} trip to {plan.destination}!",
        url=url,
    )


def share_plan(
    plan: TripPlan,
    url: str,
    *,
    copy_to_clipboard: CopyToClipboard,
    native_share: Optional[NativeShare] = None,
) -> ShareResult:
    """Share via ``native_share`` when available, else copy ``url``.

    Errors raised by either callable propagate to the caller.
    """
    payload = build_share_payload(plan, url)
    if native_share is not None:
        native_share(payload)
        logger.info("Shared plan for %s natively", plan.destination)
        return ShareResult(method="native", payload=payload)

    copy_to_clipboard(url)
    logger.info("Native share unavailable; copied %s to clipboard", url)
    return ShareResult(method="clipboard", payload=payload, notice=CLIPBOARD_NOTICE)
