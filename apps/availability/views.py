"""Read-only availability endpoints."""

from __future__ import annotations

from rest_framework.views import APIView  # type: ignore

from apps.sites.serializers import SiteAvailabilitySerializer
from shared.application.results import Result, capture
from shared.infrastructure.http import result_response

from .services import get_availability, get_availability_by_bed_type


class AvailabilityView(APIView):
    """Available beds per bed type, summed over all sites."""

    def get(self, request):  # type: ignore
        return result_response(Result.ok(get_availability()))


class AvailabilityByBedTypeView(APIView):
    """Sites offering one bed type and how many of those beds are free."""

    def get(self, request, bed_type: str):  # type: ignore
        result = capture(get_availability_by_bed_type, bed_type)
        if result.success:
            rows = [{"site": site, "available_count": count} for site, count in result.data]
            result = Result.ok(SiteAvailabilitySerializer(rows, many=True).data)
        return result_response(result)
