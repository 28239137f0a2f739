"""
Development settings for the Voices Ignited website.

Extends the base settings by enabling debugging and allowing all hosts.  Do
not use these settings in production.
"""
from .base import *  # noqa

# Development toggles
DEBUG = True
ALLOWED_HOSTS = ["*", "127.0.0.1", "localhost"]
CSRF_TRUSTED_ORIGINS = ["http://127.0.0.1:8000", "http://localhost:8000"]

for _name in ("events", "feed", "users", "pages"):
    LOGGING["loggers"][_name]["level"] = "DEBUG"
