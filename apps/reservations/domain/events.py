"""
Reservation Domain Events

Published after the reservation transaction commits.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class ReservationCreated(DomainEvent):
    """
    Event: A bed was reserved for a client

    consumed_hold_id is set when the reservation was converted from
    the owner's hold, None for a direct reservation.
    """
    reservation_id: int
    site_id: int
    bed_type: str
    owner_id: int
    consumed_hold_id: int | None = None


@dataclass(kw_only=True)
class ReservationReleased(DomainEvent):
    """Event: An administrator released a reservation"""
    reservation_id: int
    site_id: int
    bed_type: str
