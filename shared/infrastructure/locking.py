"""Row locking helpers for admission checks."""

from __future__ import annotations

from django.db import connections, router, transaction  # type: ignore


def lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic().

    Backends without SELECT ... FOR UPDATE (SQLite) serialise writers
    on their own, so the queryset is returned unchanged there.
    """

    alias = router.db_for_write(queryset.model)
    if not transaction.get_connection(alias).in_atomic_block:
        return queryset
    if not connections[alias].features.has_select_for_update:
        return queryset
    return queryset.select_for_update()
