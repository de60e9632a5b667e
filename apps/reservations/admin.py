"""Admin registrations for reservations."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ("id", "site", "bed_type", "client_name", "owner", "created_at")
    list_filter = ("bed_type", "site")
    search_fields = ("client_name", "notes")
    raw_id_fields = ("owner",)
