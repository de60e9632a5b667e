"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Identity of a case worker or site admin."""

    name = serializers.ReadOnlyField(source="display_name")
    site_id = serializers.ReadOnlyField()

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "name",
            "role",
            "site_id",
        ]
        read_only_fields = fields
