"""Reservation store.

A reservation permanently consumes one bed until an administrator
releases it. Reservations never expire.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.sites.models import BedType


class Reservation(models.Model):
    site = models.ForeignKey(
        "sites.Site",
        on_delete=models.PROTECT,
        related_name="reservations",
    )
    bed_type = models.CharField(max_length=16, choices=BedType.choices)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reservations",
        help_text=_("Case worker who made the reservation."),
    )
    client_name = models.CharField(max_length=255)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Reservation")
        verbose_name_plural = _("Reservations")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["site", "bed_type"], name="reservation_site_bed_idx"),
        ]

    def __str__(self) -> str:
        return f"Reservation #{self.pk} {self.bed_type} @ {self.site_id} for {self.client_name}"

    @property
    def case_worker_name(self) -> str:
        if self.owner is None:
            return "Unknown"
        return self.owner.display_name
