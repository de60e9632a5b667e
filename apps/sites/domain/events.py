"""
Site Domain Events

Published after the capacity ledger or site details change.
"""

from dataclasses import dataclass, field

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class BedCountsUpdated(DomainEvent):
    """Event: A site admin replaced the bed counts of a site"""
    site_id: int
    previous_counts: dict[str, int] = field(default_factory=dict)
    bed_counts: dict[str, int] = field(default_factory=dict)


@dataclass(kw_only=True)
class SiteInfoUpdated(DomainEvent):
    """Event: Name, address or phone of a site changed"""
    site_id: int
    name: str
