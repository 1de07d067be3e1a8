"""
Custom exception handler for consistent API responses
"""
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

from apps.points.exceptions import LedgerError

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses.

    Ledger/workflow errors carry their own status and stable error code;
    everything else goes through DRF's default handling first.
    """
    if isinstance(exc, LedgerError):
        logger.info(f"Ledger error in {context['view'].__class__.__name__}: {exc.code} {exc}")
        return Response({
            'code': exc.status_code,
            'msg': str(exc),
            'error': exc.code,
        }, status=exc.status_code)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        if response.status_code >= 500:
            logger.error(f"API Exception: {exc}", exc_info=True)
        else:
            logger.warning(f"API Exception: {exc}")

        custom_response_data = {
            'code': response.status_code,
            'msg': 'An error occurred',
            'errors': response.data
        }

        # Handle specific error types
        if response.status_code == status.HTTP_400_BAD_REQUEST:
            custom_response_data['msg'] = 'Validation error'
        elif response.status_code == status.HTTP_401_UNAUTHORIZED:
            custom_response_data['msg'] = 'Authentication required'
        elif response.status_code == status.HTTP_403_FORBIDDEN:
            custom_response_data['msg'] = 'Permission denied'
        elif response.status_code == status.HTTP_404_NOT_FOUND:
            custom_response_data['msg'] = 'Resource not found'
        elif response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            custom_response_data['msg'] = 'Method not allowed'
        elif response.status_code >= 500:
            custom_response_data['msg'] = 'Internal server error'
            custom_response_data['errors'] = {'detail': 'Internal server error'}

        response.data = custom_response_data
    else:
        logger.error(f"Unhandled API exception: {exc}", exc_info=True)

    return response
