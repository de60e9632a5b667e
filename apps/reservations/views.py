"""API views for reservations."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from shared.application.message_bus import dispatch
from shared.application.results import Result
from shared.infrastructure.http import invalid_input_response, not_found_response, path_id, result_response

from .application.command_handlers import CreateReservationCommand, ReleaseReservationCommand
from .filters import ReservationFilterSet
from .serializers import CreateReservationSerializer, ReservationSerializer
from .services import reservations_for_site


class ReservationViewSet(viewsets.GenericViewSet):
    """Create, list and release reservations."""

    serializer_class = ReservationSerializer
    filterset_class = ReservationFilterSet
    lookup_value_regex = r"\d+"

    def get_queryset(self):  # type: ignore
        return reservations_for_site()

    def list(self, request):  # type: ignore
        filterset = self.filterset_class(request.query_params, queryset=self.get_queryset(), request=request)
        if not filterset.is_valid():
            return invalid_input_response(filterset.errors)
        serializer = self.get_serializer(filterset.qs, many=True)
        return result_response(Result.ok(serializer.data))

    def create(self, request):  # type: ignore
        serializer = CreateReservationSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        data = serializer.validated_data
        command = CreateReservationCommand(
            owner_id=data["owner"],
            site_id=data["site"],
            bed_type=data["bed_type"],
            client_name=data["client_name"],
            notes=data.get("notes"),
        )
        return result_response(dispatch(command), success_status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"])
    def release(self, request, pk=None):  # type: ignore
        reservation_id = path_id(pk)
        if reservation_id is None:
            return not_found_response("Reservation not found")
        return result_response(dispatch(ReleaseReservationCommand(reservation_id=reservation_id)))
