"""Liveness and readiness probes."""

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from django.conf import settings
from django.db import connection
import logging

logger = logging.getLogger(__name__)


@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """
    Report whether the portal database answers.

    The notification mode is reported but not probed: with the broker
    enabled, an unreachable RabbitMQ only drops notifications.

    Returns:
        200 OK: Database reachable
        503 Service Unavailable: Database unreachable
    """
    checks = {"notifications": "broker" if settings.NOTIFICATIONS_BROKER_ENABLED else "log-only"}

    try:
        connection.ensure_connection()
        checks["database"] = "ok"
    except Exception as e:
        logger.error(f"Portal database unreachable: {str(e)}")
        checks["database"] = "error"

    healthy = checks["database"] == "ok"
    return Response(
        {"status": "healthy" if healthy else "unhealthy", "checks": checks},
        status=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
    )


@api_view(["GET"])
@permission_classes([AllowAny])
def readiness_check(request):
    return Response({"status": "ready"}, status=status.HTTP_200_OK)
