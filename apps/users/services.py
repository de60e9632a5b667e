"""Services for the users domain."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore

from shared.domain.errors import NotFound
from shared.infrastructure.locking import lock_queryset_if_possible

User = get_user_model()


def lock_case_worker(user_id: int):
    """Load and row-lock the acting user.

    Locking the owner serialises every hold command issued for the same
    case worker, which keeps the one-active-hold-per-owner rule intact
    under concurrency.
    """

    user = lock_queryset_if_possible(User.objects.filter(pk=user_id)).first()
    if user is None:
        raise NotFound("Case worker not found")
    return user


def first_user_with_role(role: str):
    """Stand-in for the signed-in user until the edge supplies a session."""

    return User.objects.filter(role=role).order_by("pk").first()
