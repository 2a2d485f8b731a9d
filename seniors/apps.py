from django.apps import AppConfig


class SeniorsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "seniors"
    verbose_name = "Senior Citizen Affairs"

    def ready(self):
        """Import signal handlers."""
        import seniors.signals  # noqa
