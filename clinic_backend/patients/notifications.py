"""
Patient notifications.

Dispatch is fire-and-forget: notify_account_created() queues the Celery task
once the surrounding transaction commits and returns immediately. Broker
errors are logged by Django's robust on_commit handling and never reach the
HTTP response.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.mail import EmailMessage
from django.db import transaction
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)


class PatientAccountCreated:
    """Email telling a patient that their account exists."""

    subject = 'Your patient account has been created'
    template_name = 'patients/email/account_created.txt'

    def __init__(self, patient):
        self.patient = patient

    @property
    def recipient(self) -> str | None:
        return self.patient.email

    def to_email(self) -> EmailMessage:
        body = render_to_string(self.template_name, {'patient': self.patient})
        return EmailMessage(
            subject=self.subject,
            body=body,
            from_email=settings.PATIENT_NOTIFICATION_FROM_EMAIL,
            to=[self.recipient],
        )

    def send(self) -> int:
        return self.to_email().send(fail_silently=False)


def notify_account_created(patient) -> bool:
    """Queue one PatientAccountCreated email for ``patient``.

    Returns False when the patient has no address and nothing was queued.
    """
    if not patient.email:
        logger.info('Patient %s has no email address, account notification skipped', patient.pk)
        return False

    from clinic_backend.patients.tasks import send_patient_account_created

    patient_id = patient.pk
    transaction.on_commit(
        lambda: send_patient_account_created.delay(patient_id),
        robust=True,
    )
    logger.info('Account notification queued for patient %s', patient_id)
    return True
