"""Celery tasks for the hold lifecycle."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from shared.application.message_bus import message_bus

from .application.command_handlers import SweepExpiredHoldsCommand

logger = logging.getLogger(__name__)


# ============================================================================
# PERIODIC TASKS (run by Celery Beat, see CELERY_BEAT_SCHEDULE)
# ============================================================================

@shared_task(name="holds.sweep_expired_holds")
def sweep_expired_holds() -> dict[str, int]:
    """
    Delete every hold whose expires_at has passed.

    Runs every BED_HOLD_SWEEP_INTERVAL_SECONDS so availability never lags
    reality by more than one interval.

    Returns:
        dict: {"deleted_count": number of holds removed}
    """
    deleted_count = message_bus.handle_command(SweepExpiredHoldsCommand())

    if deleted_count > 0:
        logger.info(f"Swept {deleted_count} expired holds")

    return {"deleted_count": deleted_count}
