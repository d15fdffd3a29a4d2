"""
Exceptions for the patient creation workflow.

MedicationLookupError is raised by the lookup client only when the caller
asks for strict behaviour; the view layer translates it to
MedicationLookupUnavailable (HTTP 503).
"""

from __future__ import annotations

from typing import Any

from rest_framework import status
from rest_framework.exceptions import APIException


class MedicationLookupError(Exception):
    """The external medication list service failed or timed out."""

    def __init__(self, url: str, reason: str, status_code: int | None = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Medication lookup at {url} failed: {reason}")

    def to_dict(self) -> dict[str, Any]:
        result = {
            'url': self.url,
            'reason': self.reason,
        }
        if self.status_code is not None:
            result['status_code'] = self.status_code
        return result


class MedicationLookupUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'The medication list service is unavailable. Please try again later.'
    default_code = 'medication_lookup_unavailable'
