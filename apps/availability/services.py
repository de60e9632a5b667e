"""Read services for bed availability.

Every read loads holds and reservations inside one ``transaction.atomic()``
block, at REPEATABLE READ on PostgreSQL, so the counts come from one
consistent snapshot.
"""

from __future__ import annotations

from datetime import datetime

from django.db import connections, router, transaction  # type: ignore
from django.utils import timezone  # type: ignore

from apps.holds.models import Hold
from apps.reservations.models import Reservation
from apps.sites.models import BedType, Site
from shared.domain.errors import NotFound

from .domain.calculator import AvailabilitySnapshot, CategoryInventory, available_units


def snapshot_isolation_statement(conn) -> str | None:
    """Statement that pins a fresh transaction to one snapshot, if needed.

    PostgreSQL defaults to READ COMMITTED, where each query sees its own
    snapshot. The level can only be set as the first statement of an
    outermost transaction, so nested blocks keep the caller's level.
    SQLite transactions are already serializable.
    """

    if conn.vendor == "postgresql" and not conn.in_atomic_block:
        return "SET TRANSACTION ISOLATION LEVEL REPEATABLE READ"
    return None


def load_snapshot(*, site_id: int | None = None, now: datetime | None = None) -> AvailabilitySnapshot:
    """Read sites, live holds and reservations in a single transaction."""

    now = now or timezone.now()
    conn = connections[router.db_for_read(Hold)]
    statement = snapshot_isolation_statement(conn)
    with transaction.atomic(using=conn.alias):
        if statement:
            with conn.cursor() as cursor:
                cursor.execute(statement)
        sites = Site.objects.using(conn.alias).all()
        holds = Hold.objects.using(conn.alias).active(now).only("id", "site_id", "bed_type", "expires_at")
        reservations = Reservation.objects.using(conn.alias).only("id", "site_id", "bed_type")
        if site_id is not None:
            sites = sites.filter(pk=site_id)
            holds = holds.filter(site_id=site_id)
            reservations = reservations.filter(site_id=site_id)
        return AvailabilitySnapshot(list(sites), list(holds), list(reservations), now)


def get_availability(now: datetime | None = None) -> dict[str, int]:
    """Available beds per bed type summed over every site."""

    snapshot = load_snapshot(now=now)
    return {bed_type.value: count for bed_type, count in snapshot.totals().items()}


def get_availability_by_bed_type(bed_type: BedType | str, now: datetime | None = None) -> list[tuple[Site, int]]:
    """Sites offering ``bed_type`` with their current available count."""

    bed_type = BedType.parse(bed_type)
    snapshot = load_snapshot(now=now)
    return snapshot.by_bed_type(bed_type)


def get_site_inventory(site_id: int, now: datetime | None = None) -> dict[str, dict[str, int]]:
    """Total, available, on-hold and reserved counts per bed type for one site."""

    snapshot = load_snapshot(site_id=site_id, now=now)
    if not snapshot.sites:
        raise NotFound("Site not found")
    site = snapshot.sites[0]
    return {bed_type.value: inventory.to_dict() for bed_type, inventory in snapshot.site_inventory(site).items()}


def committed_inventory(site: Site, bed_type: BedType, *, now: datetime, exclude_hold_id: int | None = None) -> CategoryInventory:
    """Count live holds and reservations for one (site, bed type).

    Callers run this inside their own unit of work, after locking the
    site row, so the count cannot change before they write.
    """

    holds = Hold.objects.filter(site=site, bed_type=bed_type).active(now)
    if exclude_hold_id is not None:
        holds = holds.exclude(pk=exclude_hold_id)
    reserved = Reservation.objects.filter(site=site, bed_type=bed_type).count()
    return CategoryInventory(total=site.capacity_for(bed_type), on_hold=holds.count(), reserved=reserved)


def available_beds(site: Site, bed_type: BedType, *, now: datetime, exclude_hold_id: int | None = None) -> int:
    inventory = committed_inventory(site, bed_type, now=now, exclude_hold_id=exclude_hold_id)
    return available_units(inventory.total, inventory.on_hold, inventory.reserved)
