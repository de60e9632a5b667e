"""URL configuration for the bedboard project.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the OpenAPI schema and each app's API routes.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    # Application URLs
    path('api/v1/availability/', include('apps.availability.urls')),
    path('api/v1/sites/', include('apps.sites.urls')),
    path('api/v1/holds/', include('apps.holds.urls')),
    path('api/v1/reservations/', include('apps.reservations.urls')),
    path('api/v1/users/', include('apps.users.urls')),
    # API schema and docs
    path('api/v1/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/v1/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='docs'),
]
