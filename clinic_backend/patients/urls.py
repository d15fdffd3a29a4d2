"""Patients App URLs.

Prefix: /api/
Routes:
    GET/POST          /api/patients/       - List/Create patients
    GET/PATCH/PUT     /api/patients/<pk>/  - Retrieve/Update patient
    DELETE            /api/patients/<pk>/  - 405, patients cannot be deleted via the API
"""

from django.urls import re_path

from clinic_backend.patients.views import (
    PatientListCreateView,
    PatientRetrieveUpdateView,
)

app_name = 'patients'

urlpatterns = [
    re_path(r'^patients/?$', PatientListCreateView.as_view(), name='list'),
    re_path(r'^patients/(?P<pk>\d+)/?$', PatientRetrieveUpdateView.as_view(), name='detail'),
]
