"""Admin registration for holds."""

from __future__ import annotations

from django.contrib import admin

from .models import Hold


@admin.register(Hold)
class HoldAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "site",
        "bed_type",
        "owner",
        "created_at",
        "expires_at",
    )
    list_filter = ("bed_type", "site")
    search_fields = ("owner__email", "site__name")
    readonly_fields = ("created_at",)
