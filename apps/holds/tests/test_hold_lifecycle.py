"""Service-level tests for placing, refreshing and releasing holds."""

from __future__ import annotations

from datetime import timedelta

from django.test import TestCase, override_settings
from django.utils import timezone

from apps.availability.services import get_availability, get_site_inventory
from apps.holds.application.command_handlers import (
    PlaceHoldCommand,
    RefreshHoldCommand,
    ReleaseHoldCommand,
)
from apps.holds.models import Hold
from apps.holds.services import get_active_hold
from apps.sites.models import Site
from apps.users.models import CustomUser
from shared.application.message_bus import dispatch
from shared.domain.errors import ErrorCode


@override_settings(BED_HOLD_DURATION_MS=30_000, BED_HOLD_GRACE_MS=10_000)
class HoldLifecycleTests(TestCase):
    def setUp(self) -> None:
        self.worker = CustomUser.objects.create_user(email="worker@example.com", name="Sarah Johnson")
        self.other_worker = CustomUser.objects.create_user(email="other@example.com", name="Michael Chen")
        self.site = Site.objects.create(
            name="Hope Haven Shelter",
            bed_counts={"apple": 3, "orange": 1, "lemon": 0, "grape": 2},
        )
        self.second_site = Site.objects.create(
            name="Riverside Refuge",
            bed_counts={"apple": 2, "orange": 2, "lemon": 2, "grape": 2},
        )

    def _place(self, owner=None, site=None, bed_type: str = "apple"):
        owner = owner or self.worker
        site = site or self.site
        return dispatch(PlaceHoldCommand(owner_id=owner.pk, site_id=site.pk, bed_type=bed_type))

    def _shift_expiry(self, hold_id: int, delta: timedelta) -> None:
        Hold.objects.filter(pk=hold_id).update(expires_at=timezone.now() + delta)

    def test_place_hold_reduces_site_and_aggregate_availability_by_one(self) -> None:
        before_total = get_availability()["apple"]
        before_site = get_site_inventory(self.site.pk)["apple"]["available"]

        result = self._place()

        self.assertTrue(result.success, result)
        self.assertEqual(get_availability()["apple"], before_total - 1)
        inventory = get_site_inventory(self.site.pk)["apple"]
        self.assertEqual(inventory["available"], before_site - 1)
        self.assertEqual(inventory["on_hold"], 1)

    def test_new_hold_expires_after_hold_duration(self) -> None:
        before = timezone.now()
        result = self._place()

        hold = Hold.objects.get(pk=result.data)
        self.assertEqual(hold.owner, self.worker)
        self.assertEqual(hold.expires_at - hold.created_at, timedelta(seconds=30))
        self.assertGreaterEqual(hold.created_at, before)

    def test_second_hold_by_same_owner_conflicts_on_any_site_or_bed_type(self) -> None:
        self.assertTrue(self._place().success)

        same = self._place()
        elsewhere = self._place(site=self.second_site, bed_type="grape")

        self.assertEqual(same.code, ErrorCode.CONFLICT)
        self.assertEqual(same.error, "You already have an active hold")
        self.assertEqual(elsewhere.code, ErrorCode.CONFLICT)
        self.assertEqual(Hold.objects.count(), 1)

    def test_lapsed_hold_does_not_block_a_new_one(self) -> None:
        first = self._place()
        self._shift_expiry(first.data, timedelta(seconds=-1))

        self.assertTrue(self._place(bed_type="grape").success)

    def test_place_on_unknown_site_is_not_found(self) -> None:
        result = dispatch(PlaceHoldCommand(owner_id=self.worker.pk, site_id=999_999, bed_type="apple"))

        self.assertFalse(result.success)
        self.assertEqual(result.code, ErrorCode.NOT_FOUND)
        self.assertEqual(result.error, "Site not found")

    def test_place_for_unknown_owner_is_not_found(self) -> None:
        result = dispatch(PlaceHoldCommand(owner_id=999_999, site_id=self.site.pk, bed_type="apple"))

        self.assertEqual(result.code, ErrorCode.NOT_FOUND)

    def test_place_with_unknown_bed_type_is_validation_error(self) -> None:
        result = self._place(bed_type="banana")

        self.assertEqual(result.code, ErrorCode.VALIDATION_ERROR)
        self.assertFalse(Hold.objects.exists())

    def test_place_on_zero_capacity_bed_type_conflicts(self) -> None:
        result = self._place(bed_type="lemon")

        self.assertEqual(result.code, ErrorCode.CONFLICT)
        self.assertEqual(result.error, "No beds available")

    def test_last_unit_goes_to_first_caller_only(self) -> None:
        first = self._place(bed_type="orange")
        second = self._place(owner=self.other_worker, bed_type="orange")

        self.assertTrue(first.success)
        self.assertEqual(second.code, ErrorCode.CONFLICT)
        self.assertEqual(get_site_inventory(self.site.pk)["orange"]["available"], 0)

    def test_refresh_active_hold_extends_expiry_and_keeps_id(self) -> None:
        hold_id = self._place().data
        self._shift_expiry(hold_id, timedelta(seconds=5))

        result = dispatch(RefreshHoldCommand(owner_id=self.worker.pk))

        self.assertTrue(result.success, result)
        hold = Hold.objects.get()
        self.assertEqual(hold.pk, hold_id)
        self.assertGreater(hold.expires_at, timezone.now() + timedelta(seconds=25))

    def test_refresh_within_grace_window_revives_hold(self) -> None:
        hold_id = self._place().data
        self._shift_expiry(hold_id, timedelta(seconds=-5))

        result = dispatch(RefreshHoldCommand(owner_id=self.worker.pk))

        self.assertTrue(result.success, result)
        self.assertEqual(get_active_hold(self.worker.pk).pk, hold_id)

    def test_refresh_beyond_grace_window_is_expired(self) -> None:
        hold_id = self._place().data
        self._shift_expiry(hold_id, timedelta(seconds=-11))

        result = dispatch(RefreshHoldCommand(owner_id=self.worker.pk))

        self.assertEqual(result.code, ErrorCode.EXPIRED)
        self.assertEqual(result.error, "Hold has expired and cannot be refreshed")

    def test_refresh_in_grace_conflicts_when_bed_was_taken(self) -> None:
        hold_id = self._place(bed_type="orange").data
        self._shift_expiry(hold_id, timedelta(seconds=-3))
        self.assertTrue(self._place(owner=self.other_worker, bed_type="orange").success)

        result = dispatch(RefreshHoldCommand(owner_id=self.worker.pk))

        self.assertEqual(result.code, ErrorCode.CONFLICT)
        self.assertLess(Hold.objects.get(pk=hold_id).expires_at, timezone.now())

    def test_refresh_without_any_hold_is_not_found(self) -> None:
        result = dispatch(RefreshHoldCommand(owner_id=self.worker.pk))

        self.assertEqual(result.code, ErrorCode.NOT_FOUND)
        self.assertEqual(result.error, "No hold found")

    def test_release_twice_gives_one_success_and_one_not_found(self) -> None:
        self._place()

        first = dispatch(ReleaseHoldCommand(owner_id=self.worker.pk))
        second = dispatch(ReleaseHoldCommand(owner_id=self.worker.pk))

        self.assertTrue(first.success)
        self.assertEqual(second.code, ErrorCode.NOT_FOUND)
        self.assertEqual(second.error, "No active hold found")
        self.assertEqual(get_site_inventory(self.site.pk)["apple"]["available"], 3)

    def test_release_ignores_lapsed_hold(self) -> None:
        hold_id = self._place().data
        self._shift_expiry(hold_id, timedelta(seconds=-1))

        result = dispatch(ReleaseHoldCommand(owner_id=self.worker.pk))

        self.assertEqual(result.code, ErrorCode.NOT_FOUND)

    def test_get_active_hold_returns_none_once_lapsed(self) -> None:
        hold_id = self._place().data
        self.assertEqual(get_active_hold(self.worker.pk).pk, hold_id)

        self._shift_expiry(hold_id, timedelta(seconds=-1))

        self.assertIsNone(get_active_hold(self.worker.pk))
        self.assertEqual(get_site_inventory(self.site.pk)["apple"]["available"], 3)
