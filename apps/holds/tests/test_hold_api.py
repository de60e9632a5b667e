"""Integration tests for the hold endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.holds.models import Hold
from apps.sites.models import Site
from apps.users.models import CustomUser


class HoldAPITests(APITestCase):
    """Covers placement, refresh, release and the active-hold lookup over HTTP."""

    def setUp(self) -> None:
        self.worker = CustomUser.objects.create_user(email="sarah@example.com", name="Sarah Johnson")
        self.site = Site.objects.create(
            name="Community Care House",
            bed_counts={"apple": 1, "orange": 12, "lemon": 10, "grape": 8},
        )
        self.place_url = reverse("hold-list")
        self.refresh_url = reverse("hold-refresh")
        self.release_url = reverse("hold-release")
        self.active_url = reverse("hold-active")

    def _place(self, bed_type: str = "apple", owner: int | None = None):
        payload = {"owner": owner or self.worker.pk, "site": self.site.pk, "bed_type": bed_type}
        return self.client.post(self.place_url, payload, format="json")

    def test_place_hold_returns_created_with_hold_id(self) -> None:
        response = self._place()

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertTrue(response.data["success"])
        self.assertEqual(response.data["data"], Hold.objects.get().pk)

    def test_second_hold_returns_conflict_envelope(self) -> None:
        self._place()

        response = self._place(bed_type="grape")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(
            response.data,
            {"success": False, "error": "You already have an active hold", "code": "conflict"},
        )

    def test_unknown_bed_type_is_rejected_at_the_boundary(self) -> None:
        response = self._place(bed_type="banana")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "validation_error")
        self.assertIn("bed_type", response.data["error"])

    def test_missing_owner_is_validation_error(self) -> None:
        response = self.client.post(self.place_url, {"site": self.site.pk, "bed_type": "apple"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data["success"])

    def test_unknown_site_is_not_found(self) -> None:
        response = self.client.post(
            self.place_url,
            {"owner": self.worker.pk, "site": 424242, "bed_type": "apple"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["code"], "not_found")

    def test_refresh_after_grace_window_is_gone(self) -> None:
        self._place()
        Hold.objects.update(expires_at=timezone.now() - timedelta(seconds=30))

        response = self.client.post(self.refresh_url, {"owner": self.worker.pk}, format="json")

        self.assertEqual(response.status_code, status.HTTP_410_GONE)
        self.assertEqual(response.data["code"], "expired")

    def test_refresh_returns_null_data(self) -> None:
        self._place()

        response = self.client.post(self.refresh_url, {"owner": self.worker.pk}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data, {"success": True, "data": None})

    def test_release_then_lookup_returns_null(self) -> None:
        self._place()

        release = self.client.post(self.release_url, {"owner": self.worker.pk}, format="json")
        active = self.client.get(self.active_url, {"owner": self.worker.pk})

        self.assertEqual(release.status_code, status.HTTP_200_OK)
        self.assertEqual(active.status_code, status.HTTP_200_OK)
        self.assertIsNone(active.data["data"])

    def test_release_without_hold_is_not_found(self) -> None:
        response = self.client.post(self.release_url, {"owner": self.worker.pk}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "No active hold found")

    def test_active_hold_lookup_describes_the_hold(self) -> None:
        hold_id = self._place(bed_type="orange").data["data"]

        response = self.client.get(self.active_url, {"owner": self.worker.pk})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data["data"]
        self.assertEqual(data["id"], hold_id)
        self.assertEqual(data["site_id"], self.site.pk)
        self.assertEqual(data["site_name"], "Community Care House")
        self.assertEqual(data["bed_type"], "orange")
        self.assertEqual(data["owner_id"], self.worker.pk)
        self.assertGreater(data["seconds_remaining"], 0)

    def test_out_of_range_ids_are_rejected_as_invalid_input(self) -> None:
        lookup = self.client.get(self.active_url, {"owner": 10**20})
        placement = self.client.post(
            self.place_url,
            {"owner": self.worker.pk, "site": 10**20, "bed_type": "apple"},
            format="json",
        )
        refresh = self.client.post(self.refresh_url, {"owner": 10**20}, format="json")

        for response in (lookup, placement, refresh):
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data["code"], "validation_error")
        self.assertFalse(Hold.objects.exists())
