"""FilterSet definitions for reservation listing."""

from __future__ import annotations

import django_filters  # type: ignore

from apps.sites.models import BedType
from shared.infrastructure.http import MAX_DB_ID

from .models import Reservation


class ReservationFilterSet(django_filters.FilterSet):
    site = django_filters.NumberFilter(field_name="site_id", lookup_expr="exact", max_value=MAX_DB_ID)
    bed_type = django_filters.ChoiceFilter(field_name="bed_type", choices=BedType.choices)

    class Meta:
        model = Reservation
        fields = ["site", "bed_type"]
