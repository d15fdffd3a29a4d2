"""
Patient creation workflow.

validated payload -> medication lookup -> insert -> queue account email.

The lookup runs before the transaction opens so no DB connection is held
across external I/O. Which text ends up in medication_list is controlled by
MEDICATION_LIST_SOURCE: "request_body" keeps the raw inbound request body
(the established behaviour, even though it ignores the lookup response),
"lookup" stores the lookup response content.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import transaction

from clinic_backend.patients.notifications import notify_account_created
from clinic_backend.patients.services.medication_lookup import (
    MedicationLookupResult,
    fetch_medication_list,
)

logger = logging.getLogger(__name__)

MEDICATION_LIST_SOURCES = ('request_body', 'lookup')


def resolve_medication_list(lookup: MedicationLookupResult, raw_body: str) -> str:
    source = settings.MEDICATION_LIST_SOURCE
    if source == 'request_body':
        return raw_body
    if source == 'lookup':
        return lookup.content
    raise ImproperlyConfigured(
        f"MEDICATION_LIST_SOURCE must be one of {MEDICATION_LIST_SOURCES}, got {source!r}"
    )


def register_patient(serializer, *, raw_body: str = ''):
    """Persist a validated PatientWriteSerializer and notify the patient.

    Raises MedicationLookupError when MEDICATION_LOOKUP_REQUIRED is set and
    the lookup fails; nothing is written in that case.
    """
    lookup = fetch_medication_list(strict=settings.MEDICATION_LOOKUP_REQUIRED)
    medication_list = resolve_medication_list(lookup, raw_body)

    with transaction.atomic():
        patient = serializer.save(medication_list=medication_list)
        notify_account_created(patient)

    logger.info(
        'Patient %s created (medication lookup %s)',
        patient.pk,
        'skipped' if lookup.skipped else ('ok' if lookup.ok else 'failed'),
    )
    return patient
