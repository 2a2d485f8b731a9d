"""
Citizen notifications.

Fire and forget: every message is logged, and queued on RabbitMQ only when
NOTIFICATIONS_BROKER_ENABLED is set. Failures never reach the caller.
"""

import logging
from typing import Optional

from django.conf import settings

from seniors.rabbitmq import publisher

logger = logging.getLogger(__name__)


def send_sms(to: str, message: str) -> bool:
    logger.info(f"[LOCAL-SMS] To: {to} | Message: {message}")
    if settings.NOTIFICATIONS_BROKER_ENABLED and to:
        return publisher.publish_sms(to, message)
    return True


def send_email(to: str, subject: str, body: str, to_name: str = "User") -> bool:
    logger.info(f"[LOCAL-EMAIL] To: {to_name} ({to}) | Subject: {subject}")
    if settings.NOTIFICATIONS_BROKER_ENABLED and to:
        return publisher.publish_email(to, subject, body, to_name)
    return True


def notify_registration_success(name: str, phone: str, email: str) -> None:
    """Tell an applicant their registration was received and awaits approval."""
    logger.info(f"[LOCAL-NOTIF] Registration received for {name}")
    body = (
        f"Dear {name}, your application for the Senior Citizen Management System of "
        f"San Juan City has been received and is pending approval."
    )
    if email:
        send_email(email, "Complete Registration!", body, name)


def notify_status_update(
    user_name: str,
    contact: str,
    email: str,
    application_type: str,
    status: str,
    reason: Optional[str] = None,
) -> None:
    """SMS (and email when known) telling the applicant their request was decided."""
    verdict = "APPROVED" if status == "Approved" else "DISAPPROVED"
    reason_text = f" Reason: {reason}" if reason else ""
    content = f"Hello {user_name}, your {application_type} application was {verdict}.{reason_text}"

    send_sms(contact, content)
    if email:
        send_email(email, f"SeniorConnect: {application_type} Update", content, user_name)
