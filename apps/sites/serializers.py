"""Serializers for shelter sites."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Site


class SiteSerializer(serializers.ModelSerializer):
    bed_counts = serializers.SerializerMethodField()

    class Meta:
        model = Site
        fields = [
            "id",
            "name",
            "address",
            "phone",
            "bed_counts",
            "updated_at",
        ]
        read_only_fields = fields

    def get_bed_counts(self, obj: Site) -> dict[str, int]:
        return obj.capacity_map()


class BedCountsSerializer(serializers.Serializer):
    """Only the shape is checked here; count rules live in the command."""

    bed_counts = serializers.DictField()


class SiteInfoSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True, max_length=200)
    address = serializers.CharField(allow_blank=True, required=False, default="", max_length=255)
    phone = serializers.CharField(allow_blank=True, required=False, default="", max_length=32)


class SiteAvailabilitySerializer(serializers.Serializer):
    """A site paired with its available count for one bed type."""

    site = SiteSerializer()
    available_count = serializers.IntegerField()
