"""Serializers for reservation endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.sites.models import BedType
from shared.infrastructure.http import MAX_DB_ID

from .models import Reservation


class CreateReservationSerializer(serializers.Serializer):
    """Client name blank-checking is left to the command so it trims first."""

    owner = serializers.IntegerField(min_value=1, max_value=MAX_DB_ID)
    site = serializers.IntegerField(min_value=1, max_value=MAX_DB_ID)
    bed_type = serializers.ChoiceField(choices=BedType.choices)
    client_name = serializers.CharField(allow_blank=True, trim_whitespace=False, max_length=255)
    notes = serializers.CharField(allow_blank=True, allow_null=True, required=False, trim_whitespace=False)


class ReservationSerializer(serializers.ModelSerializer):
    site_id = serializers.ReadOnlyField()
    site_name = serializers.ReadOnlyField(source="site.name")
    owner_id = serializers.ReadOnlyField()
    case_worker_name = serializers.ReadOnlyField()

    class Meta:
        model = Reservation
        fields = [
            "id",
            "site_id",
            "site_name",
            "bed_type",
            "owner_id",
            "case_worker_name",
            "client_name",
            "notes",
            "created_at",
        ]
        read_only_fields = fields
