"""Serializers for the hold endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.sites.models import BedType
from shared.infrastructure.http import MAX_DB_ID

from .models import Hold


class OwnerSerializer(serializers.Serializer):
    """Body of refresh/release and query of the active-hold lookup."""

    owner = serializers.IntegerField(min_value=1, max_value=MAX_DB_ID)


class PlaceHoldSerializer(OwnerSerializer):
    site = serializers.IntegerField(min_value=1, max_value=MAX_DB_ID)
    bed_type = serializers.ChoiceField(choices=BedType.choices)


class HoldSerializer(serializers.ModelSerializer):
    site_id = serializers.ReadOnlyField()
    site_name = serializers.ReadOnlyField(source="site.name")
    owner_id = serializers.ReadOnlyField()
    seconds_remaining = serializers.SerializerMethodField()

    class Meta:
        model = Hold
        fields = [
            "id",
            "site_id",
            "site_name",
            "bed_type",
            "owner_id",
            "created_at",
            "expires_at",
            "seconds_remaining",
        ]
        read_only_fields = fields

    def get_seconds_remaining(self, obj: Hold) -> int:
        return obj.seconds_remaining()
