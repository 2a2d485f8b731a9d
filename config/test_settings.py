"""
Test settings - in-memory SQLite, no migrations, no broker.
"""

from config.settings import *

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}


# Build tables straight from the models
class DisableMigrations:
    def __contains__(self, item):
        return True

    def __getitem__(self, item):
        return None


MIGRATION_MODULES = DisableMigrations()

DEBUG = False

NOTIFICATIONS_BROKER_ENABLED = False

SESSION_ENGINE = "django.contrib.sessions.backends.signed_cookies"
