"""URL routing for shelter sites."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import SiteViewSet

router = DefaultRouter()
router.register(r"", SiteViewSet, basename="site")

urlpatterns = [
    path("", include(router.urls)),
]
