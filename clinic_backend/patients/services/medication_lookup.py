"""
Client for the external medication list service.

One GET per patient creation, no retry. MEDICATION_LOOKUP_TIMEOUT bounds the
whole call: the body is streamed and reading stops once the deadline passes
or the body grows past MAX_CONTENT_BYTES. Failures come back as a failed
MedicationLookupResult unless strict=True, in which case MedicationLookupError
is raised.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import requests
from django.conf import settings

from clinic_backend.patients.exceptions import MedicationLookupError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024
MAX_CONTENT_BYTES = 1024 * 1024


class ResponseTooLarge(requests.RequestException):
    """The medication service sent more than MAX_CONTENT_BYTES."""


@dataclass
class MedicationLookupResult:
    url: str
    content: str = ''
    status_code: int | None = None
    error: str | None = None
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


def _read_content(response, deadline: float) -> str:
    chunks = []
    size = 0
    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
        if time.monotonic() > deadline:
            raise requests.Timeout('medication lookup exceeded its total time budget')
        size += len(chunk)
        if size > MAX_CONTENT_BYTES:
            raise ResponseTooLarge(f'response larger than {MAX_CONTENT_BYTES} bytes')
        chunks.append(chunk)

    body = b''.join(chunks)
    try:
        return body.decode(response.encoding or 'utf-8', errors='replace')
    except LookupError:
        return body.decode('utf-8', errors='replace')


def fetch_medication_list(
    url: str | None = None,
    *,
    timeout: float | None = None,
    strict: bool = False,
) -> MedicationLookupResult:
    """Fetch the medication list from the external service.

    url and timeout default to MEDICATION_LOOKUP_URL and
    MEDICATION_LOOKUP_TIMEOUT. An empty URL skips the call.
    """
    if url is None:
        url = settings.MEDICATION_LOOKUP_URL
    if timeout is None:
        timeout = settings.MEDICATION_LOOKUP_TIMEOUT

    if not url:
        logger.debug('Medication lookup disabled (no URL configured)')
        return MedicationLookupResult(url='', skipped=True)

    deadline = time.monotonic() + timeout
    status_code = None
    try:
        with requests.get(
            url,
            timeout=timeout,
            headers={'Accept': 'application/json'},
            stream=True,
        ) as response:
            status_code = response.status_code
            response.raise_for_status()
            content = _read_content(response, deadline)
    except requests.Timeout:
        reason = f'timed out after {timeout}s'
    except requests.HTTPError:
        reason = f'HTTP {status_code}'
    except requests.RequestException as exc:
        reason = exc.__class__.__name__
    else:
        return MedicationLookupResult(url=url, content=content, status_code=status_code)

    logger.warning('Medication lookup at %s failed: %s', url, reason)
    if strict:
        raise MedicationLookupError(url, reason, status_code=status_code)
    return MedicationLookupResult(url=url, status_code=status_code, error=reason)
