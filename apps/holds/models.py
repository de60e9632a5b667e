"""Hold store.

A hold is a short-lived exclusive claim on one bed of a given type at a
site. Only ``expires_at`` is ever updated; a hold disappears through
release, conversion into a reservation or the expiry sweep.
"""

from __future__ import annotations

from datetime import datetime

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.sites.models import BedType


class HoldQuerySet(models.QuerySet):
    def active(self, now: datetime | None = None):
        return self.filter(expires_at__gt=now or timezone.now())

    def stale(self, now: datetime | None = None):
        return self.filter(expires_at__lte=now or timezone.now())

    def for_owner(self, owner_id):
        return self.filter(owner_id=owner_id)


class Hold(models.Model):
    """Time-boxed claim on one bed, precursor to a reservation."""

    site = models.ForeignKey(
        "sites.Site",
        on_delete=models.CASCADE,
        related_name="holds",
    )
    bed_type = models.CharField(max_length=16, choices=BedType.choices)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="holds",
    )
    created_at = models.DateTimeField(default=timezone.now)
    expires_at = models.DateTimeField(
        db_index=True,
        help_text=_("The hold stops counting against capacity at this instant."),
    )

    objects = HoldQuerySet.as_manager()

    class Meta:
        verbose_name = _("Hold")
        verbose_name_plural = _("Holds")
        ordering = ["-expires_at"]
        indexes = [
            models.Index(fields=["site", "bed_type"], name="hold_site_bed_type_idx"),
            models.Index(fields=["owner", "expires_at"], name="hold_owner_expiry_idx"),
        ]

    def __str__(self) -> str:
        return f"Hold #{self.pk} {self.bed_type} @ {self.site_id} by {self.owner_id}"

    def is_active(self, now: datetime | None = None) -> bool:
        return self.expires_at > (now or timezone.now())

    def seconds_remaining(self, now: datetime | None = None) -> int:
        remaining = (self.expires_at - (now or timezone.now())).total_seconds()
        return max(0, int(remaining))
