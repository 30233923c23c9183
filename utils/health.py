"""
Health check view used by the e2e harness and load balancers to tell
"service down" apart from "admin page broken".
"""

import logging

from django.db import DatabaseError, connection
from django.http import HttpResponse
from django.views.decorators.cache import never_cache
from django.views.decorators.csrf import csrf_exempt

logger = logging.getLogger(__name__)


@csrf_exempt
@never_cache
def health_check(request):
    """Return 200 OK when the database answers, 503 otherwise."""
    try:
        connection.ensure_connection()
    except DatabaseError:
        logger.exception("Health check could not reach the database")
        return HttpResponse(
            "database unavailable", content_type="text/plain", status=503
        )
    return HttpResponse("OK", content_type="text/plain", status=200)
