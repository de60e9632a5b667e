"""
Hold Command Handlers

These are the use cases of the hold lifecycle.
They orchestrate admission checks within transactions.

Commands:
- PlaceHoldCommand: Claim one bed for a case worker
- RefreshHoldCommand: Push a hold's expiry forward
- ReleaseHoldCommand: Give a held bed back
- SweepExpiredHoldsCommand: Delete every lapsed hold (timer driven)

Locks are always taken owner first, then site, so concurrent
commands cannot deadlock on each other.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
import logging

from django.conf import settings
from django.utils import timezone

from shared.application.uow import DjangoUnitOfWork
from shared.domain.errors import Conflict, HoldExpired, NotFound
from shared.infrastructure.locking import lock_queryset_if_possible
from apps.availability.services import available_beds
from apps.holds.domain.events import HoldPlaced, HoldRefreshed, HoldReleased, HoldsExpired
from apps.holds.models import Hold
from apps.sites.models import BedType
from apps.sites.services import lock_site
from apps.users.services import lock_case_worker

logger = logging.getLogger(__name__)


def hold_duration() -> timedelta:
    return timedelta(milliseconds=settings.BED_HOLD_DURATION_MS)


def grace_period() -> timedelta:
    return timedelta(milliseconds=settings.BED_HOLD_GRACE_MS)


# ===== Commands =====

@dataclass
class PlaceHoldCommand:
    owner_id: int
    site_id: int
    bed_type: str


@dataclass
class RefreshHoldCommand:
    owner_id: int


@dataclass
class ReleaseHoldCommand:
    owner_id: int


@dataclass
class SweepExpiredHoldsCommand:
    """now defaults to the wall clock at handling time"""
    now: datetime | None = None


# ===== Command Handlers =====

class PlaceHoldHandler:
    """
    Handler for PlaceHold command

    Steps, all inside one transaction:
    1. Lock the owner row; reject if they already hold an active bed
    2. Lock the site row; reject if the site does not exist
    3. Count capacity - active holds - reservations; reject if none left
    4. Insert the hold with expires_at = now + hold duration

    Locking the site row serialises every placement at that site, so two
    callers racing for the last bed cannot both pass step 3.
    """

    def handle(self, command: PlaceHoldCommand) -> int:
        bed_type = BedType.parse(command.bed_type)
        now = timezone.now()

        with DjangoUnitOfWork() as uow:
            owner = lock_case_worker(command.owner_id)

            if Hold.objects.for_owner(owner.pk).active(now).exists():
                raise Conflict("You already have an active hold")

            site = lock_site(command.site_id)

            if available_beds(site, bed_type, now=now) <= 0:
                raise Conflict("No beds available")

            hold = Hold.objects.create(
                site=site,
                bed_type=bed_type,
                owner=owner,
                created_at=now,
                expires_at=now + hold_duration(),
            )

            uow.add_event(HoldPlaced(
                aggregate_id=hold.pk,
                hold_id=hold.pk,
                owner_id=owner.pk,
                site_id=site.pk,
                bed_type=bed_type.value,
                expires_at=hold.expires_at,
            ))

        logger.info(
            f"Hold {hold.pk} placed: owner {owner.pk}, site {site.pk}, "
            f"bed type {bed_type.value}, expires {hold.expires_at.isoformat()}"
        )
        return hold.pk


class RefreshHoldHandler:
    """
    Handler for RefreshHold command

    Picks the owner's most recently expiring hold. A hold that lapsed
    less than the grace period ago can still be revived, but only if its
    bed was not taken by someone else in the meantime.
    """

    def handle(self, command: RefreshHoldCommand) -> None:
        now = timezone.now()

        with DjangoUnitOfWork() as uow:
            owner = lock_case_worker(command.owner_id)

            hold = (
                lock_queryset_if_possible(Hold.objects.for_owner(owner.pk))
                .order_by("-expires_at")
                .first()
            )
            if hold is None:
                raise NotFound("No hold found")

            active = hold.is_active(now)
            if not active and now - hold.expires_at >= grace_period():
                raise HoldExpired("Hold has expired and cannot be refreshed")

            if not active:
                site = lock_site(hold.site_id)
                if available_beds(site, BedType(hold.bed_type), now=now, exclude_hold_id=hold.pk) <= 0:
                    raise Conflict("No beds available")

            hold.expires_at = now + hold_duration()
            hold.save(update_fields=["expires_at"])

            uow.add_event(HoldRefreshed(
                aggregate_id=hold.pk,
                hold_id=hold.pk,
                owner_id=owner.pk,
                expires_at=hold.expires_at,
                revived=not active,
            ))

        logger.info(f"Hold {hold.pk} refreshed until {hold.expires_at.isoformat()} (revived={not active})")


class ReleaseHoldHandler:
    """Handler for ReleaseHold command"""

    def handle(self, command: ReleaseHoldCommand) -> None:
        now = timezone.now()

        with DjangoUnitOfWork() as uow:
            owner = lock_case_worker(command.owner_id)

            hold = lock_queryset_if_possible(Hold.objects.for_owner(owner.pk).active(now)).first()
            if hold is None:
                raise NotFound("No active hold found")

            hold_id = hold.pk
            hold.delete()

            uow.add_event(HoldReleased(
                aggregate_id=hold_id,
                hold_id=hold_id,
                owner_id=owner.pk,
                site_id=hold.site_id,
                bed_type=hold.bed_type,
            ))

        logger.info(f"Hold {hold_id} released by owner {owner.pk}")


class SweepExpiredHoldsHandler:
    """
    Handler for SweepExpiredHolds command

    Plain queryset delete: a hold already removed by a concurrent
    release or conversion simply is not matched, so racing with
    foreground commands is safe.
    """

    def handle(self, command: SweepExpiredHoldsCommand) -> int:
        now = command.now or timezone.now()

        with DjangoUnitOfWork() as uow:
            _, per_model = Hold.objects.stale(now).delete()
            deleted_count = per_model.get(Hold._meta.label, 0)
            if deleted_count:
                uow.add_event(HoldsExpired(deleted_count=deleted_count))

        return deleted_count


def register(bus) -> None:
    """Wire the hold commands and events into the message bus"""
    from shared.application.message_bus import log_domain_event

    bus.register_command_handler(PlaceHoldCommand, PlaceHoldHandler().handle)
    bus.register_command_handler(RefreshHoldCommand, RefreshHoldHandler().handle)
    bus.register_command_handler(ReleaseHoldCommand, ReleaseHoldHandler().handle)
    bus.register_command_handler(SweepExpiredHoldsCommand, SweepExpiredHoldsHandler().handle)

    for event_type in (HoldPlaced, HoldRefreshed, HoldReleased, HoldsExpired):
        bus.register_event_handler(event_type, log_domain_event)
