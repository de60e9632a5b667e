"""Integration tests for site endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.holds.models import Hold
from apps.reservations.models import Reservation
from apps.sites.models import Site
from apps.users.models import CustomUser


class SiteAPITests(APITestCase):
    """Covers listing, inventory, bed counts and site details."""

    def setUp(self) -> None:
        self.site = Site.objects.create(
            name="Safe Harbor Center",
            address="456 Mission Street",
            phone="(415) 555-0200",
            bed_counts={"apple": 0, "orange": 15, "lemon": 12, "grape": 0},
        )
        self.other = Site.objects.create(name="Community Care House", bed_counts={"apple": 6, "orange": 12, "lemon": 10, "grape": 8})
        self.worker = CustomUser.objects.create_user(email="worker@example.com")

    def test_list_orders_sites_by_name(self) -> None:
        response = self.client.get(reverse("site-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row["name"] for row in response.data["data"]], ["Community Care House", "Safe Harbor Center"])

    def test_retrieve_and_missing_site(self) -> None:
        found = self.client.get(reverse("site-detail", args=[self.site.pk]))
        missing = self.client.get(reverse("site-detail", args=[99999]))

        self.assertEqual(found.data["data"]["phone"], "(415) 555-0200")
        self.assertEqual(found.data["data"]["bed_counts"]["orange"], 15)
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(missing.data["code"], "not_found")

    def test_inventory_breaks_down_each_bed_type(self) -> None:
        now = timezone.now()
        Hold.objects.create(site=self.site, bed_type="orange", owner=self.worker, created_at=now, expires_at=now + timedelta(seconds=30))
        Reservation.objects.create(site=self.site, bed_type="orange", client_name="A")
        Reservation.objects.create(site=self.site, bed_type="lemon", client_name="B")

        response = self.client.get(reverse("site-inventory", args=[self.site.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data["data"],
            {
                "apple": {"total": 0, "available": 0, "on_hold": 0, "reserved": 0},
                "orange": {"total": 15, "available": 13, "on_hold": 1, "reserved": 1},
                "lemon": {"total": 12, "available": 11, "on_hold": 0, "reserved": 1},
                "grape": {"total": 0, "available": 0, "on_hold": 0, "reserved": 0},
            },
        )

    def test_inventory_of_missing_site_is_not_found(self) -> None:
        response = self.client.get(reverse("site-inventory", args=[99999]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Site not found")

    def test_update_bed_counts(self) -> None:
        url = reverse("site-bed-counts", args=[self.site.pk])

        response = self.client.post(url, {"bed_counts": {"apple": 2, "orange": 15, "lemon": 12, "grape": 1}}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.site.refresh_from_db()
        self.assertEqual(self.site.capacity_for("apple"), 2)

    def test_update_bed_counts_below_reservations_is_rejected(self) -> None:
        Reservation.objects.create(site=self.site, bed_type="lemon", client_name="B")
        url = reverse("site-bed-counts", args=[self.site.pk])

        response = self.client.post(url, {"bed_counts": {"apple": 0, "orange": 15, "lemon": 0, "grape": 0}}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["error"],
            "Cannot set lemon bed count to 0. Minimum required is 1 (0 holds + 1 reservations)",
        )

    def test_update_bed_counts_requires_the_mapping(self) -> None:
        response = self.client.post(reverse("site-bed-counts", args=[self.site.pk]), {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "validation_error")

    def test_update_site_info_trims_fields(self) -> None:
        url = reverse("site-info", args=[self.site.pk])

        response = self.client.post(url, {"name": "  Safe Harbor  ", "address": " 1 Pier ", "phone": ""}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.site.refresh_from_db()
        self.assertEqual((self.site.name, self.site.address, self.site.phone), ("Safe Harbor", "1 Pier", ""))

    def test_update_site_info_requires_name(self) -> None:
        response = self.client.post(reverse("site-info", args=[self.site.pk]), {"name": "   "}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Site name is required")

    def test_ids_beyond_the_database_range_are_not_found(self) -> None:
        huge = 10**20
        urls = [
            reverse("site-detail", args=[huge]),
            reverse("site-inventory", args=[huge]),
        ]

        for url in urls:
            response = self.client.get(url)
            self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, url)
            self.assertEqual(response.data, {"success": False, "error": "Site not found", "code": "not_found"})

        counts = {"apple": 1, "orange": 1, "lemon": 1, "grape": 1}
        response = self.client.post(reverse("site-bed-counts", args=[huge]), {"bed_counts": counts}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
