"""
Hold Domain Events

Published after the hold transaction commits.
"""

from dataclasses import dataclass
from datetime import datetime

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class HoldPlaced(DomainEvent):
    """Event: A case worker placed a hold on one bed"""
    hold_id: int
    owner_id: int
    site_id: int
    bed_type: str
    expires_at: datetime


@dataclass(kw_only=True)
class HoldRefreshed(DomainEvent):
    """
    Event: A hold's expiry was pushed forward

    revived is True when the hold had already lapsed and was brought
    back inside the grace window.
    """
    hold_id: int
    owner_id: int
    expires_at: datetime
    revived: bool = False


@dataclass(kw_only=True)
class HoldReleased(DomainEvent):
    """Event: A case worker gave up their hold"""
    hold_id: int
    owner_id: int
    site_id: int
    bed_type: str


@dataclass(kw_only=True)
class HoldsExpired(DomainEvent):
    """Event: The sweeper deleted stale holds"""
    deleted_count: int
