"""
Health check view for monitoring.
"""
from django.http import JsonResponse
from django.utils import timezone
from django.views import View
from django.db import connection, DatabaseError
import time
import logging

logger = logging.getLogger(__name__)


class BasicHealthCheckView(View):
    """
    Basic health check endpoint, no authentication required.
    Includes database connectivity verification.
    """

    def get(self, request):
        start_time = time.time()

        health_response = {
            'status': 'healthy',
            'timestamp': timezone.now().isoformat(),
            'version': '1.0.0'
        }

        db_status, db_error = self._check_database_health()
        health_response['database'] = db_status

        if db_status['status'] != 'healthy':
            health_response['status'] = 'unhealthy'
            logger.error(f"Database health check failed: {db_error}")

        response_time_ms = (time.time() - start_time) * 1000
        health_response['response_time_ms'] = round(response_time_ms, 2)

        status_code = 200 if health_response['status'] == 'healthy' else 503
        return JsonResponse(health_response, status=status_code)

    def _check_database_health(self):
        """
        Verify database connectivity using a simple SELECT query.

        Returns:
            tuple: (db_status_dict, error_message)
        """
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                result = cursor.fetchone()
        except DatabaseError as e:
            return {
                'status': 'unhealthy',
                'message': 'Database connection failed',
                'error': 'Database connectivity error'  # Generic error for external consumption
            }, str(e)

        if result and result[0] == 1:
            return {
                'status': 'healthy',
                'message': 'Database connection successful'
            }, None
        return {
            'status': 'unhealthy',
            'message': 'Database query returned unexpected result'
        }, 'Unexpected query result'
