"""Seed sample sites, case workers and site admins."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from django.core.management.base import BaseCommand, CommandError  # type: ignore
from django.db import transaction  # type: ignore

from apps.sites.models import Site

User = get_user_model()

SITES = [
    {
        "name": "Hope Haven Shelter",
        "address": "123 Market Street, San Francisco, CA 94102",
        "phone": "(415) 555-0100",
        "bed_counts": {"apple": 20, "orange": 0, "lemon": 0, "grape": 0},
        "admin": ("admin.hopehaven@example.com", "Jennifer Martinez"),
    },
    {
        "name": "Safe Harbor Center",
        "address": "456 Mission Street, San Francisco, CA 94103",
        "phone": "(415) 555-0200",
        "bed_counts": {"apple": 0, "orange": 15, "lemon": 12, "grape": 0},
        "admin": ("admin.safeharbor@example.com", "Robert Thompson"),
    },
    {
        "name": "Community Care House",
        "address": "789 Valencia Street, San Francisco, CA 94110",
        "phone": "(415) 555-0300",
        "bed_counts": {"apple": 6, "orange": 12, "lemon": 10, "grape": 8},
        "admin": ("admin.communitycare@example.com", "Lisa Anderson"),
    },
    {
        "name": "Riverside Refuge",
        "address": "321 Embarcadero, San Francisco, CA 94111",
        "phone": "(415) 555-0400",
        "bed_counts": {"apple": 8, "orange": 6, "lemon": 15, "grape": 10},
        "admin": ("admin.riverside@example.com", "James Wilson"),
    },
]

CASE_WORKERS = [
    ("sarah.johnson@example.com", "Sarah Johnson"),
    ("michael.chen@example.com", "Michael Chen"),
    ("emily.rodriguez@example.com", "Emily Rodriguez"),
    ("david.williams@example.com", "David Williams"),
]


class Command(BaseCommand):
    help = "Creates four sample sites, four case workers and one admin per site"

    @transaction.atomic
    def handle(self, *args, **options):  # type: ignore
        if Site.objects.exists():
            raise CommandError("Database already contains sites. Run clear_beds before seeding.")

        for entry in SITES:
            email, name = entry["admin"]
            site = Site.objects.create(
                name=entry["name"],
                address=entry["address"],
                phone=entry["phone"],
                bed_counts=dict(entry["bed_counts"]),
            )
            User.objects.create_user(email=email, name=name, role=User.RoleChoices.SITE_ADMIN, site=site)
            self.stdout.write(f"Site {site.pk}: {site.name} (admin {email})")

        for email, name in CASE_WORKERS:
            user = User.objects.create_user(email=email, name=name, role=User.RoleChoices.CASE_WORKER)
            self.stdout.write(f"Case worker {user.pk}: {name}")

        self.stdout.write(self.style.SUCCESS("Database seeded successfully"))
