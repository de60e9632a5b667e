"""API views for the hold lifecycle."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from shared.application.message_bus import dispatch
from shared.application.results import Result
from shared.infrastructure.http import invalid_input_response, result_response

from .application.command_handlers import PlaceHoldCommand, RefreshHoldCommand, ReleaseHoldCommand
from .serializers import HoldSerializer, OwnerSerializer, PlaceHoldSerializer
from .services import get_active_hold


class HoldViewSet(viewsets.ViewSet):
    """Place, refresh, release and look up a case worker's hold."""

    def create(self, request):  # type: ignore
        serializer = PlaceHoldSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        data = serializer.validated_data
        result = dispatch(PlaceHoldCommand(owner_id=data["owner"], site_id=data["site"], bed_type=data["bed_type"]))
        return result_response(result, success_status=status.HTTP_201_CREATED)

    @action(detail=False, methods=["post"])
    def refresh(self, request):  # type: ignore
        serializer = OwnerSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        return result_response(dispatch(RefreshHoldCommand(owner_id=serializer.validated_data["owner"])))

    @action(detail=False, methods=["post"])
    def release(self, request):  # type: ignore
        serializer = OwnerSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        return result_response(dispatch(ReleaseHoldCommand(owner_id=serializer.validated_data["owner"])))

    @action(detail=False, methods=["get"])
    def active(self, request):  # type: ignore
        serializer = OwnerSerializer(data=request.query_params)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        hold = get_active_hold(serializer.validated_data["owner"])
        data = HoldSerializer(hold).data if hold is not None else None
        return result_response(Result.ok(data))
