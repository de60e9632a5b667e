"""Read services for holds."""

from __future__ import annotations

from datetime import datetime

from django.utils import timezone  # type: ignore

from .models import Hold


def get_active_hold(owner_id: int, now: datetime | None = None) -> Hold | None:
    """The owner's non-expired hold, if any."""

    now = now or timezone.now()
    return (
        Hold.objects.for_owner(owner_id)
        .active(now)
        .select_related("site")
        .order_by("-expires_at")
        .first()
    )
