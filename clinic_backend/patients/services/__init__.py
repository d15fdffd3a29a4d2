"""
Patients Services Module.

- medication_lookup: client for the external medication list service
- registration: the patient creation workflow
"""

from clinic_backend.patients.services.medication_lookup import (
    MedicationLookupResult,
    fetch_medication_list,
)
from clinic_backend.patients.services.registration import (
    register_patient,
    resolve_medication_list,
)

__all__ = [
    'MedicationLookupResult',
    'fetch_medication_list',
    'register_patient',
    'resolve_medication_list',
]
