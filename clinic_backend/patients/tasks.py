import logging

from celery import shared_task

from clinic_backend.patients.models import Patient
from clinic_backend.patients.notifications import PatientAccountCreated

logger = logging.getLogger(__name__)


@shared_task(ignore_result=True)
def send_patient_account_created(patient_id):
    """Deliver the account-created email to the patient's current address."""
    patient = Patient.objects.filter(pk=patient_id).first()
    if patient is None:
        logger.warning('Patient %s no longer exists, account notification dropped', patient_id)
        return False

    notification = PatientAccountCreated(patient)
    if not notification.recipient:
        logger.info('Patient %s has no email address, account notification dropped', patient_id)
        return False

    try:
        notification.send()
    except Exception:
        logger.exception('Sending account notification to patient %s failed', patient_id)
        raise

    logger.info('Account notification sent to patient %s', patient_id)
    return True
