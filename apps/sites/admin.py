"""Admin registrations for sites."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Site


@admin.register(Site)
class SiteAdmin(admin.ModelAdmin):
    list_display = ("name", "address", "phone", "bed_counts", "updated_at")
    search_fields = ("name", "address")
    readonly_fields = ("created_at", "updated_at")
