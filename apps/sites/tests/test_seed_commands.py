"""Tests for the seed_beds and clear_beds management commands."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.holds.models import Hold
from apps.reservations.models import Reservation
from apps.sites.models import Site
from apps.users.models import CustomUser


@pytest.mark.django_db
def test_seed_creates_sites_case_workers_and_admins():
    call_command("seed_beds", stdout=StringIO())

    assert Site.objects.count() == 4
    assert CustomUser.objects.filter(role=CustomUser.RoleChoices.CASE_WORKER).count() == 4
    admins = CustomUser.objects.filter(role=CustomUser.RoleChoices.SITE_ADMIN)
    assert admins.count() == 4
    assert all(admin.site is not None for admin in admins)
    hope_haven = Site.objects.get(name="Hope Haven Shelter")
    assert hope_haven.capacity_map() == {"apple": 20, "orange": 0, "lemon": 0, "grape": 0}


@pytest.mark.django_db
def test_seed_refuses_to_run_twice():
    call_command("seed_beds", stdout=StringIO())

    with pytest.raises(CommandError):
        call_command("seed_beds", stdout=StringIO())

    assert Site.objects.count() == 4


@pytest.mark.django_db
def test_clear_removes_everything_but_superusers():
    call_command("seed_beds", stdout=StringIO())
    CustomUser.objects.create_superuser(email="root@example.com", password="pass1234")
    site = Site.objects.get(name="Riverside Refuge")
    worker = CustomUser.objects.filter(role=CustomUser.RoleChoices.CASE_WORKER).first()
    Reservation.objects.create(site=site, bed_type="apple", owner=worker, client_name="John Doe")

    out = StringIO()
    call_command("clear_beds", stdout=out)

    assert not Site.objects.exists()
    assert not Reservation.objects.exists()
    assert not Hold.objects.exists()
    assert list(CustomUser.objects.values_list("email", flat=True)) == ["root@example.com"]
    assert "4 sites" in out.getvalue()
    assert "8 users" in out.getvalue()
    assert "1 reservations" in out.getvalue()
