"""Services for shelter sites."""

from __future__ import annotations

from django.db.models import QuerySet  # type: ignore

from shared.domain.errors import NotFound
from shared.infrastructure.locking import lock_queryset_if_possible

from .models import Site


def lock_site(site_id: int) -> Site:
    """Load and row-lock a site.

    Every admission check at a site runs behind this lock, so two
    commands competing for the last bed of any type take turns.
    """

    site = lock_queryset_if_possible(Site.objects.filter(pk=site_id)).first()
    if site is None:
        raise NotFound("Site not found")
    return site


def get_site(site_id: int) -> Site:
    try:
        return Site.objects.get(pk=site_id)
    except Site.DoesNotExist:
        raise NotFound("Site not found")


def list_sites() -> QuerySet[Site]:
    return Site.objects.order_by("name", "pk")
