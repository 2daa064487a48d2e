"""
Domain errors raised by catalog queries and mutations, and the DRF
exception handler that renders them as API responses.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class SupplySightError(Exception):
    """Base class for errors a single query or mutation call can raise"""
    code = 'error'
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Request could not be completed'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(SupplySightError):
    """Product id (or id + warehouse combination) does not exist"""
    code = 'not_found'
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Product not found'


class InsufficientStock(SupplySightError):
    """Requested transfer quantity exceeds the source stock"""
    code = 'insufficient_stock'
    status_code = status.HTTP_409_CONFLICT
    default_message = 'Insufficient stock'


class InvalidInput(SupplySightError):
    """Negative demand, non-positive quantity or unknown warehouse"""
    code = 'invalid_input'
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Invalid input'


def api_exception_handler(exc, context):
    """
    Render SupplySightError as {'error': ..., 'code': ...}.

    Anything else falls through to the default DRF handler.
    """
    if isinstance(exc, SupplySightError):
        request = context.get('request')
        path = request.path if request is not None else 'unknown'
        logger.warning(f"{exc.__class__.__name__} on {path}: {exc.message}")
        return Response({'error': exc.message, 'code': exc.code}, status=exc.status_code)
    return exception_handler(exc, context)
