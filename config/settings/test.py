"""
Test-specific Django settings.

Uses an in-memory SQLite database so the suite needs no external services.
"""

from .base import *  # noqa: F403

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

ISSUER_STORE = "apps.issuers.store.DjangoIssuerStore"

# Speed up password hashing for tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Disable logging during tests
LOGGING_CONFIG = None
