"""URL declarations for the users app."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import CurrentCaseWorkerView, CurrentSiteAdminView

urlpatterns = [
    path('case-worker/', CurrentCaseWorkerView.as_view(), name='user-case-worker'),
    path('site-admin/', CurrentSiteAdminView.as_view(), name='user-site-admin'),
]
