"""
Reservation Command Handlers

Commands:
- CreateReservationCommand: Turn a hold (or a free bed) into a reservation
- ReleaseReservationCommand: Give a reserved bed back to the site
"""

from dataclasses import dataclass
import logging

from django.utils import timezone

from shared.application.uow import DjangoUnitOfWork
from shared.domain.errors import Conflict, NotFound, ValidationFailed
from shared.infrastructure.locking import lock_queryset_if_possible
from apps.availability.services import available_beds
from apps.holds.models import Hold
from apps.reservations.domain.events import ReservationCreated, ReservationReleased
from apps.reservations.models import Reservation
from apps.sites.models import BedType
from apps.sites.services import lock_site
from apps.users.services import lock_case_worker

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class CreateReservationCommand:
    owner_id: int
    site_id: int
    bed_type: str
    client_name: str
    notes: str | None = None


@dataclass
class ReleaseReservationCommand:
    reservation_id: int


# ===== Command Handlers =====

class CreateReservationHandler:
    """
    Handler for CreateReservation command

    Two admission paths, chosen inside the transaction:
    - hold-backed: the owner has an active hold on exactly this
      (site, bed type); the hold is deleted and its bed becomes the
      reservation, so availability does not move
    - direct: no such hold; the bed is admitted only if the same
      capacity check as hold placement passes

    Locks follow the hold commands: owner, then site.
    """

    def handle(self, command: CreateReservationCommand) -> int:
        bed_type = BedType.parse(command.bed_type)
        client_name = (command.client_name or "").strip()
        if not client_name:
            raise ValidationFailed("Client name is required")
        notes = (command.notes or "").strip()
        now = timezone.now()

        with DjangoUnitOfWork() as uow:
            owner = lock_case_worker(command.owner_id)
            site = lock_site(command.site_id)

            hold = lock_queryset_if_possible(
                Hold.objects.for_owner(owner.pk).active(now).filter(site=site, bed_type=bed_type)
            ).first()

            if hold is None and available_beds(site, bed_type, now=now) <= 0:
                raise Conflict("No beds available")

            reservation = Reservation.objects.create(
                site=site,
                bed_type=bed_type,
                owner=owner,
                client_name=client_name,
                notes=notes,
                created_at=now,
            )

            consumed_hold_id = None
            if hold is not None:
                consumed_hold_id = hold.pk
                hold.delete()

            uow.add_event(ReservationCreated(
                aggregate_id=reservation.pk,
                reservation_id=reservation.pk,
                site_id=site.pk,
                bed_type=bed_type.value,
                owner_id=owner.pk,
                consumed_hold_id=consumed_hold_id,
            ))

        if consumed_hold_id is not None:
            logger.info(f"Reservation {reservation.pk} created from hold {consumed_hold_id}")
        else:
            logger.info(f"Reservation {reservation.pk} created directly at site {site.pk} ({bed_type.value})")
        return reservation.pk


class ReleaseReservationHandler:
    """Handler for ReleaseReservation command"""

    def handle(self, command: ReleaseReservationCommand) -> None:
        with DjangoUnitOfWork() as uow:
            reservation = lock_queryset_if_possible(
                Reservation.objects.filter(pk=command.reservation_id)
            ).first()
            if reservation is None:
                raise NotFound("Reservation not found")

            reservation_id = reservation.pk
            reservation.delete()

            uow.add_event(ReservationReleased(
                aggregate_id=reservation_id,
                reservation_id=reservation_id,
                site_id=reservation.site_id,
                bed_type=reservation.bed_type,
            ))

        logger.info(f"Reservation {reservation_id} released")


def register(bus) -> None:
    """Wire the reservation commands and events into the message bus"""
    from shared.application.message_bus import log_domain_event

    bus.register_command_handler(CreateReservationCommand, CreateReservationHandler().handle)
    bus.register_command_handler(ReleaseReservationCommand, ReleaseReservationHandler().handle)

    for event_type in (ReservationCreated, ReservationReleased):
        bus.register_event_handler(event_type, log_domain_event)
