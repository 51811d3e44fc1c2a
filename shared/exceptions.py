"""Error taxonomy shared by every app, plus the DRF exception handler that
renders any failure as ``{"success": false, "message": ...}``."""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class HomecookAPIError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'The request could not be processed.'
    default_code = 'error'

    def __init__(self, detail=None, code=None, status_code=None):
        super().__init__(detail, code)
        if status_code is not None:
            self.status_code = status_code


class ValidationError(HomecookAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'invalid'


class AuthenticationError(HomecookAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Invalid credentials.'
    default_code = 'authentication_failed'


class AuthorizationError(HomecookAPIError):
    """Ownership failures answer 401; pass ``status_code=403`` for role failures."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Not authorized to access this resource.'
    default_code = 'not_authorized'


class NotFoundError(HomecookAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found.'
    default_code = 'not_found'


def _flatten_detail(detail):
    if isinstance(detail, dict):
        if 'detail' in detail:
            return _flatten_detail(detail['detail'])
        parts = []
        for field, value in detail.items():
            text = _flatten_detail(value)
            parts.append(text if field == 'non_field_errors' else f'{field}: {text}')
        return '; '.join(parts)
    if isinstance(detail, (list, tuple)):
        return ' '.join(_flatten_detail(item) for item in detail)
    return str(detail)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        # Unhandled errors propagate to Django's 500 handling
        return None

    message = _flatten_detail(response.data)
    request = context.get('request')
    if request is not None:
        logger.warning(
            "%s %s rejected with %s: %s",
            request.method, request.path, response.status_code, message,
        )
    response.data = {'success': False, 'message': message}
    return response
