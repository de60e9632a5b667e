"""Tests for the acting-user lookup endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.sites.models import Site
from apps.users.models import CustomUser


class UserLookupAPITests(APITestCase):
    def test_returns_null_when_no_user_has_the_role(self) -> None:
        response = self.client.get(reverse("user-case-worker"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"success": True, "data": None})

    def test_returns_first_case_worker(self) -> None:
        first = CustomUser.objects.create_user(email="sarah@example.com", name="Sarah Johnson")
        CustomUser.objects.create_user(email="michael@example.com", name="Michael Chen")

        response = self.client.get(reverse("user-case-worker"))

        self.assertEqual(response.data["data"]["id"], first.pk)
        self.assertEqual(response.data["data"]["name"], "Sarah Johnson")
        self.assertEqual(response.data["data"]["role"], "case_worker")

    def test_returns_site_admin_with_site(self) -> None:
        site = Site.objects.create(name="Hope Haven Shelter")
        CustomUser.objects.create_user(email="cw@example.com")
        admin = CustomUser.objects.create_user(
            email="admin@example.com",
            role=CustomUser.RoleChoices.SITE_ADMIN,
            site=site,
        )

        response = self.client.get(reverse("user-site-admin"))

        self.assertEqual(response.data["data"]["id"], admin.pk)
        self.assertEqual(response.data["data"]["site_id"], site.pk)
        self.assertEqual(response.data["data"]["name"], "admin@example.com")


class CustomUserManagerTests(APITestCase):
    def test_create_user_defaults_to_case_worker_without_password(self) -> None:
        user = CustomUser.objects.create_user(email="Someone@EXAMPLE.com")

        self.assertEqual(user.role, CustomUser.RoleChoices.CASE_WORKER)
        self.assertFalse(user.has_usable_password())
        self.assertEqual(user.email, "Someone@example.com")

    def test_create_superuser_is_site_admin(self) -> None:
        user = CustomUser.objects.create_superuser(email="root@example.com", password="pass1234")

        self.assertEqual(user.role, CustomUser.RoleChoices.SITE_ADMIN)
        self.assertTrue(user.is_staff)
