"""Delete every hold, reservation, user and site."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from django.core.management.base import BaseCommand  # type: ignore
from django.db import transaction  # type: ignore

from apps.holds.models import Hold
from apps.reservations.models import Reservation
from apps.sites.models import Site

User = get_user_model()


class Command(BaseCommand):
    help = "Removes all bed coordination data. Superusers are kept unless --all is given"

    def add_arguments(self, parser):  # type: ignore
        parser.add_argument("--all", action="store_true", help="Also delete superusers")

    @transaction.atomic
    def handle(self, *args, **options):  # type: ignore
        users = User.objects.all()
        if not options["all"]:
            users = users.filter(is_superuser=False)

        deleted = {}
        for label, queryset in (
            ("holds", Hold.objects.all()),
            ("reservations", Reservation.objects.all()),
            ("users", users),
            ("sites", Site.objects.all()),
        ):
            _, per_model = queryset.delete()
            deleted[label] = per_model.get(queryset.model._meta.label, 0)
        summary = ", ".join(f"{count} {label}" for label, count in deleted.items())
        self.stdout.write(self.style.SUCCESS(f"Database cleared: {summary}"))
