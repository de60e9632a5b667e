"""Site and bed capacity models.

A site is a shelter location. Its ``bed_counts`` is the capacity ledger:
the configured number of beds per bed type. Availability is never stored
here, it is always derived from holds and reservations at read time.
"""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.errors import ValidationFailed


class BedType(models.TextChoices):
    """Closed set of bed categories. Every hold and reservation carries one."""

    APPLE = "apple", _("Apple")
    ORANGE = "orange", _("Orange")
    LEMON = "lemon", _("Lemon")
    GRAPE = "grape", _("Grape")

    @classmethod
    def parse(cls, value) -> "BedType":
        try:
            return cls(value)
        except ValueError:
            raise ValidationFailed(f"Unknown bed type: {value!r}")


def empty_bed_counts() -> dict[str, int]:
    return {bed_type.value: 0 for bed_type in BedType}


class Site(models.Model):
    """A shelter location offering beds of one or more types."""

    name = models.CharField(max_length=200)
    address = models.CharField(max_length=255, blank=True)
    phone = models.CharField(max_length=32, blank=True)
    bed_counts = models.JSONField(
        default=empty_bed_counts,
        help_text=_("Configured capacity per bed type."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Site")
        verbose_name_plural = _("Sites")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    def capacity_for(self, bed_type: BedType | str) -> int:
        return int(self.bed_counts.get(BedType(bed_type).value, 0))

    def capacity_map(self) -> dict[str, int]:
        return {bed_type.value: self.capacity_for(bed_type) for bed_type in BedType}
