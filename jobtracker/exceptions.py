"""
API error handling

Every failure leaves the API as ``{"error": "<message>"}`` with a 4xx/5xx
status. Views raise; this handler renders.
"""
import logging

from django.db import IntegrityError
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


class Conflict(APIException):
    """Raised when a write would duplicate an existing association."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = 'This resource already exists.'
    default_code = 'conflict'


def flatten_errors(detail, prefix: str = '') -> list:
    """
    Collapse nested serializer errors into "field: message" strings.

    Nested list/dict errors (e.g. requirements[0].skillIds) are joined with
    dots so the client can still tell which row failed.
    """
    if isinstance(detail, dict):
        messages = []
        for field, value in detail.items():
            key = str(field) if field != 'non_field_errors' else ''
            path = f"{prefix}.{key}" if prefix and key else (prefix or key)
            messages.extend(flatten_errors(value, path))
        return messages

    if isinstance(detail, list):
        messages = []
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list)):
                messages.extend(flatten_errors(value, f"{prefix}[{index}]"))
            else:
                messages.extend(flatten_errors(value, prefix))
        return messages

    text = str(detail)
    return [f"{prefix}: {text}" if prefix else text]


def api_exception_handler(exc, context):
    """
    DRF exception handler producing the ``{"error": ...}`` envelope.

    - APIException / Http404 / PermissionDenied: DRF's status code
    - ValidationError: 400 with flattened field messages
    - IntegrityError: 409, the pre-checks in the services missed a race
    - anything else: 500 with the underlying message
    """
    if isinstance(exc, IntegrityError):
        set_rollback()
        logger.warning("Integrity error in %s: %s", _view_name(context), exc)
        return Response(
            {'error': 'This entry conflicts with an existing one.'},
            status=status.HTTP_409_CONFLICT,
        )

    response = exception_handler(exc, context)

    if response is None:
        set_rollback()
        logger.exception("Unhandled error in %s", _view_name(context))
        return Response(
            {'error': str(exc) or exc.__class__.__name__},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        message = '; '.join(flatten_errors(exc.detail)) or 'Invalid request.'
    elif isinstance(response.data, dict) and 'detail' in response.data:
        message = str(response.data['detail'])
    else:
        message = '; '.join(flatten_errors(response.data))

    response.data = {'error': message}
    return response


def _view_name(context) -> str:
    view = (context or {}).get('view')
    return view.__class__.__name__ if view is not None else 'unknown view'
