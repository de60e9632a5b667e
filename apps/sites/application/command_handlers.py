"""
Site Command Handlers

Administrative use cases on the capacity ledger.

Commands:
- UpdateBedCountsCommand: Replace all four bed counts of a site
- UpdateSiteInfoCommand: Edit name, address and phone
"""

from dataclasses import dataclass
from typing import Any, Mapping
import logging

from django.utils import timezone

from shared.application.uow import DjangoUnitOfWork
from shared.domain.errors import ValidationFailed
from apps.availability.services import committed_inventory
from apps.sites.domain.events import BedCountsUpdated, SiteInfoUpdated
from apps.sites.models import BedType
from apps.sites.services import lock_site

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class UpdateBedCountsCommand:
    site_id: int
    bed_counts: Mapping[str, Any]


@dataclass
class UpdateSiteInfoCommand:
    site_id: int
    name: str
    address: str = ""
    phone: str = ""


def clean_bed_counts(raw: Mapping[str, Any]) -> dict[str, int]:
    """
    Validate a submitted capacity map

    Every bed type must be present with a non-negative integer.
    Integral floats such as 4.0 are accepted; booleans are not.
    """
    if not isinstance(raw, Mapping):
        raise ValidationFailed("Bed counts must be an object keyed by bed type")

    unknown = sorted(set(raw) - set(BedType.values))
    if unknown:
        raise ValidationFailed(f"Unknown bed type: {unknown[0]!r}")

    cleaned: dict[str, int] = {}
    for bed_type in BedType:
        value = raw.get(bed_type.value)
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValidationFailed(f"Bed count for {bed_type.value} must be a non-negative integer")
        cleaned[bed_type.value] = value
    return cleaned


# ===== Command Handlers =====

class UpdateBedCountsHandler:
    """
    Handler for UpdateBedCounts command

    A count may not drop below what is already committed at the site
    (live holds plus reservations) for that bed type. The site row is
    locked first so no hold can slip in between the check and the write.
    """

    def handle(self, command: UpdateBedCountsCommand) -> None:
        bed_counts = clean_bed_counts(command.bed_counts)
        now = timezone.now()

        with DjangoUnitOfWork() as uow:
            site = lock_site(command.site_id)

            for bed_type in BedType:
                requested = bed_counts[bed_type.value]
                inventory = committed_inventory(site, bed_type, now=now)
                if requested < inventory.committed:
                    raise ValidationFailed(
                        f"Cannot set {bed_type.value} bed count to {requested}. "
                        f"Minimum required is {inventory.committed} "
                        f"({inventory.on_hold} holds + {inventory.reserved} reservations)"
                    )

            previous = site.capacity_map()
            site.bed_counts = bed_counts
            site.save(update_fields=["bed_counts", "updated_at"])

            uow.add_event(BedCountsUpdated(
                aggregate_id=site.pk,
                site_id=site.pk,
                previous_counts=previous,
                bed_counts=bed_counts,
            ))

        logger.info(f"Bed counts for site {site.pk} set to {bed_counts}")


class UpdateSiteInfoHandler:
    """Handler for UpdateSiteInfo command"""

    def handle(self, command: UpdateSiteInfoCommand) -> None:
        name = (command.name or "").strip()
        if not name:
            raise ValidationFailed("Site name is required")

        with DjangoUnitOfWork() as uow:
            site = lock_site(command.site_id)
            site.name = name
            site.address = (command.address or "").strip()
            site.phone = (command.phone or "").strip()
            site.save(update_fields=["name", "address", "phone", "updated_at"])

            uow.add_event(SiteInfoUpdated(aggregate_id=site.pk, site_id=site.pk, name=name))

        logger.info(f"Site {site.pk} details updated")


def register(bus) -> None:
    """Wire the site commands and events into the message bus"""
    from shared.application.message_bus import log_domain_event

    bus.register_command_handler(UpdateBedCountsCommand, UpdateBedCountsHandler().handle)
    bus.register_command_handler(UpdateSiteInfoCommand, UpdateSiteInfoHandler().handle)

    for event_type in (BedCountsUpdated, SiteInfoUpdated):
        bus.register_event_handler(event_type, log_domain_event)
