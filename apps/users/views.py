"""Views for the users app."""

from __future__ import annotations

from rest_framework.views import APIView  # type: ignore

from shared.application.results import Result
from shared.infrastructure.http import result_response

from .models import CustomUser
from .serializers import UserSerializer
from .services import first_user_with_role


class RoleUserView(APIView):
    """Return the first user holding ``role``, or null when there is none."""

    role: str = CustomUser.RoleChoices.CASE_WORKER

    def get(self, request):  # type: ignore
        user = first_user_with_role(self.role)
        data = UserSerializer(user).data if user is not None else None
        return result_response(Result.ok(data))


class CurrentCaseWorkerView(RoleUserView):
    role = CustomUser.RoleChoices.CASE_WORKER


class CurrentSiteAdminView(RoleUserView):
    role = CustomUser.RoleChoices.SITE_ADMIN
