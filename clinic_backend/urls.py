"""Clinic backend URL configuration.

API routes:
    /api/auth/      - Authentication (core)
    /api/health/    - Health check (core)
    /api/patients/  - Patient records (patients)
"""

from django.contrib import admin
from django.http import HttpResponse
from django.urls import include, path


def root(request):
    """Plain-text liveness response for non-API clients."""
    return HttpResponse("Clinic backend is running.")


urlpatterns = [
    path("", root, name="root"),
    path("admin/", admin.site.urls),

    path("api/", include("clinic_backend.core.urls")),
    path("api/", include("clinic_backend.patients.urls")),
]
