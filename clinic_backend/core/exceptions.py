"""API-wide exception handling.

Registered as REST_FRAMEWORK['EXCEPTION_HANDLER']. Validation failures are
reported as 422 with the violated fields under "errors"; everything DRF does
not recognise becomes a generic 500 without internals.
"""

from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = 'The given data was invalid.'


def _field_errors(detail) -> dict:
    if isinstance(detail, dict):
        return detail
    if isinstance(detail, list):
        return {'non_field_errors': detail}
    return {'non_field_errors': [detail]}


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            'Unhandled error in %s',
            view.__class__.__name__ if view is not None else 'unknown view',
            exc_info=exc,
        )
        set_rollback()
        return Response(
            {'detail': 'Internal server error.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        response.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        response.data = {
            'message': VALIDATION_MESSAGE,
            'errors': _field_errors(response.data),
        }

    return response
