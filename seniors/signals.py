import logging

from django.db.models.signals import post_save
from django.dispatch import receiver

from seniors.models import Application, ApplicationType
from seniors.notifications import notify_registration_success

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Application)
def application_post_save(sender, instance, created, **kwargs):
    """Acknowledge a newly received registration to the applicant."""
    if not created or instance.type != ApplicationType.REGISTRATION:
        return

    form_data = instance.form_data or {}
    logger.debug(f"Registration {instance.id} received, notifying applicant")
    notify_registration_success(
        instance.user_name,
        form_data.get("contactNumber") or "",
        form_data.get("email") or "",
    )
