"""URL declarations for availability reads."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import AvailabilityByBedTypeView, AvailabilityView

urlpatterns = [
    path("", AvailabilityView.as_view(), name="availability"),
    path("<str:bed_type>/", AvailabilityByBedTypeView.as_view(), name="availability-by-bed-type"),
]
