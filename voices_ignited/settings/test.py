"""
Test settings.

SQLite in memory, local-memory cache and Bluesky credentials that never
leave the process (the client is mocked in tests).
"""
from .base import *  # noqa

DEBUG = False
ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "voices-ignited-tests",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_THROTTLE_RATES": {
        **REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"],
        "login": "3/min",
    },
}

BLUESKY_USERNAME = "voicesignited.bsky.social"
BLUESKY_APP_PASSWORD = "test-app-password"
BLUESKY_RETRY_DELAY = 0.0
