import logging

from django.db import connection, DatabaseError
from django.http import JsonResponse
from rest_framework.views import exception_handler

from apps.ledger.exceptions import LedgerServiceError

logger = logging.getLogger(__name__)


def health_check(request):
    """Liveness probe that also touches the database."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError:
        logger.exception('Health check could not reach the database')
        return JsonResponse({'status': 'unavailable', 'database': False}, status=503)
    return JsonResponse({'status': 'ok', 'database': True})


def api_exception_handler(exc, context):
    """
    DRF exception handler that adds the ledger error code to the payload.

    Every ledger failure resolves to ``{"detail": ..., "code": ...}`` so
    clients can tell e.g. ``out_of_stock`` from ``insufficient_points``.
    """
    response = exception_handler(exc, context)
    if response is not None and isinstance(exc, LedgerServiceError):
        # Field errors keep their structure; the code stays the category's
        structured = isinstance(exc.detail, (dict, list))
        code = exc.default_code if structured else exc.get_codes()
        response.data = {
            'detail': exc.detail if structured else str(exc.detail),
            'code': code,
        }
        request = context.get('request')
        logger.info(
            'Rejected %s %s: %s',
            request.method if request else '-',
            request.path if request else '-',
            code,
        )
    return response


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
