"""
Custom exception handling for the application.

Every error leaving a view is rendered with the same envelope:
``{"status": false, "message": ..., "errors": ...}``.
"""
import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class BusinessException(Exception):
    """Base exception for business logic errors."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message, code='BUSINESS_ERROR', errors=None, status_code=None):
        self.message = message
        self.code = code
        self.errors = errors
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class DuplicateStockError(BusinessException):
    """Raised when a product already has a stock row in a warehouse."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, message='Product Warehouse already exists!'):
        super().__init__(message, 'DUPLICATE_STOCK')


class ResourceNotFoundError(BusinessException):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, label):
        super().__init__(f'{label} not found!', 'NOT_FOUND')


class ResourceOperationError(BusinessException):
    """Raised when the database reports that a write did not happen."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message):
        super().__init__(message, 'OPERATION_FAILED')


class InvalidCredentialsError(BusinessException):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message='Unauthorized!'):
        super().__init__(message, 'UNAUTHORIZED')


class UpstreamServiceError(BusinessException):
    """Raised when a third-party service cannot be reached or answers garbage."""
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, message):
        super().__init__(message, 'UPSTREAM_ERROR')


def error_envelope(message, errors=None):
    return {
        'status': False,
        'message': message,
        'errors': errors,
    }


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns responses in the standard envelope.
    """
    if isinstance(exc, BusinessException):
        return Response(error_envelope(exc.message, exc.errors), status=exc.status_code)

    if isinstance(exc, exceptions.ValidationError):
        errors = exc.detail
        if not isinstance(errors, dict):
            errors = {'non_field_errors': errors}
        return Response(
            error_envelope('Validation error!', errors),
            status=status.HTTP_422_UNPROCESSABLE_ENTITY
        )

    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(f'Unhandled error in {view.__class__.__name__}: {exc}')
        return Response(
            error_envelope('Server error!'),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    detail = getattr(exc, 'detail', None)
    response.data = error_envelope(str(detail) if detail is not None else str(exc))
    return response
