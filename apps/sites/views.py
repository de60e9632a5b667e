"""API views for sites and their capacity ledger."""

from __future__ import annotations

from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from apps.availability.services import get_site_inventory
from shared.application.message_bus import dispatch
from shared.application.results import Result, capture
from shared.infrastructure.http import invalid_input_response, not_found_response, path_id, result_response

from .application.command_handlers import UpdateBedCountsCommand, UpdateSiteInfoCommand
from .serializers import BedCountsSerializer, SiteInfoSerializer, SiteSerializer
from .services import get_site, list_sites


class SiteViewSet(viewsets.ViewSet):
    """Browse sites, read their inventory and let admins edit them."""

    lookup_value_regex = r"\d+"

    def list(self, request):  # type: ignore
        return result_response(Result.ok(SiteSerializer(list_sites(), many=True).data))

    def retrieve(self, request, pk=None):  # type: ignore
        site_id = path_id(pk)
        if site_id is None:
            return not_found_response("Site not found")
        result = capture(get_site, site_id)
        if result.success:
            result = Result.ok(SiteSerializer(result.data).data)
        return result_response(result)

    @action(detail=True, methods=["get"])
    def inventory(self, request, pk=None):  # type: ignore
        site_id = path_id(pk)
        if site_id is None:
            return not_found_response("Site not found")
        return result_response(capture(get_site_inventory, site_id))

    @action(detail=True, methods=["post"], url_path="bed-counts")
    def bed_counts(self, request, pk=None):  # type: ignore
        site_id = path_id(pk)
        if site_id is None:
            return not_found_response("Site not found")
        serializer = BedCountsSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        command = UpdateBedCountsCommand(site_id=site_id, bed_counts=serializer.validated_data["bed_counts"])
        return result_response(dispatch(command))

    @action(detail=True, methods=["post"])
    def info(self, request, pk=None):  # type: ignore
        site_id = path_id(pk)
        if site_id is None:
            return not_found_response("Site not found")
        serializer = SiteInfoSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        return result_response(dispatch(UpdateSiteInfoCommand(site_id=site_id, **serializer.validated_data)))
