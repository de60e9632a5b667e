"""Read services for reservations."""

from __future__ import annotations

from django.db.models import QuerySet  # type: ignore

from .models import Reservation


def reservations_for_site(site_id: int | None = None) -> QuerySet[Reservation]:
    """Reservations newest first, with the owner joined for display names."""

    queryset = Reservation.objects.select_related("site", "owner").order_by("-created_at", "-id")
    if site_id is not None:
        queryset = queryset.filter(site_id=site_id)
    return queryset
