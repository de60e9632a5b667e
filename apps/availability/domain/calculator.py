"""
Availability Calculator

This is the single place where bed availability is counted.
Every read path and every admission check goes through it.

    available = capacity - active holds - reservations

A hold is active while ``expires_at > now``. There is no stored
"active" flag: staleness is always judged against the ``now`` the
snapshot was taken at, so two snapshots taken milliseconds apart may
disagree near an expiry boundary.

The calculator is pure. It works on any objects exposing the
attributes below, which lets the service layer feed it ORM rows and
lets tests feed it plain dataclasses:

- site:        id, bed_counts (mapping bed type -> int)
- hold:        id, site_id, bed_type, expires_at
- reservation: site_id, bed_type
"""

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Tuple

from apps.sites.models import BedType
from shared.domain.base import ValueObject


@dataclass(frozen=True)
class CategoryInventory(ValueObject):
    """
    Inventory of one bed type at one site (or across all sites)

    Key invariant: available = total - on_hold - reserved
    """
    total: int = 0
    on_hold: int = 0
    reserved: int = 0

    @property
    def committed(self) -> int:
        """Units consumed by holds and reservations"""
        return self.on_hold + self.reserved

    @property
    def available(self) -> int:
        return self.total - self.committed

    def __add__(self, other: 'CategoryInventory') -> 'CategoryInventory':
        return CategoryInventory(
            total=self.total + other.total,
            on_hold=self.on_hold + other.on_hold,
            reserved=self.reserved + other.reserved,
        )

    def to_dict(self) -> dict:
        return {
            'total': self.total,
            'available': self.available,
            'on_hold': self.on_hold,
            'reserved': self.reserved,
        }


def _capacity(site, bed_type: BedType) -> int:
    return int(site.bed_counts.get(bed_type.value, 0))


class AvailabilitySnapshot:
    """
    Point-in-time view of capacity, holds and reservations

    Build it from rows read in one transaction; every figure it returns
    is then consistent with every other.
    """

    def __init__(self, sites: Iterable, holds: Iterable, reservations: Iterable, now: datetime):
        self.now = now
        self.sites = list(sites)
        self._on_hold: Counter = Counter()
        self._reserved: Counter = Counter()

        for hold in holds:
            if hold.expires_at > now:
                self._on_hold[(hold.site_id, BedType(hold.bed_type))] += 1

        for reservation in reservations:
            self._reserved[(reservation.site_id, BedType(reservation.bed_type))] += 1

    def inventory(self, site, bed_type: BedType) -> CategoryInventory:
        """Inventory for one (site, bed type)"""
        key = (site.id, bed_type)
        return CategoryInventory(
            total=_capacity(site, bed_type),
            on_hold=self._on_hold[key],
            reserved=self._reserved[key],
        )

    def site_inventory(self, site) -> dict:
        """Per bed type breakdown for a single site"""
        return {bed_type: self.inventory(site, bed_type) for bed_type in BedType}

    def totals(self) -> dict:
        """Aggregate available units per bed type across all sites"""
        totals = {}
        for bed_type in BedType:
            aggregate = CategoryInventory()
            for site in self.sites:
                aggregate = aggregate + self.inventory(site, bed_type)
            totals[bed_type] = aggregate.available
        return totals

    def by_bed_type(self, bed_type: BedType) -> List[Tuple[object, int]]:
        """
        Per-site availability for one bed type

        Sites with no configured capacity for the bed type are left out.
        """
        return [
            (site, self.inventory(site, bed_type).available)
            for site in self.sites
            if _capacity(site, bed_type) > 0
        ]


def available_units(capacity: int, active_holds: int, reservations: int) -> int:
    """Admission counting rule used by placement, refresh and direct reservation"""
    return CategoryInventory(total=capacity, on_hold=active_holds, reserved=reservations).available
