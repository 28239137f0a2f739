"""
Production settings for the Voices Ignited website.

Turns debug off, refuses to start with the development secret key, serves
hashed static files and sends session and CSRF cookies over HTTPS only.
The app loggers follow ``DJANGO_LOG_LEVEL`` (INFO by default) so feed
degrades and approvals stay visible in the process logs.
"""
from copy import deepcopy

from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa

DEBUG = False

if SECRET_KEY == "dev-insecure":
    raise ImproperlyConfigured("DJANGO_SECRET_KEY must be set in production")

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.ManifestStaticFilesStorage"},
}

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_SSL_REDIRECT = os.getenv("DJANGO_SECURE_SSL_REDIRECT", "True") == "True"
SECURE_HSTS_SECONDS = int(os.getenv("DJANGO_HSTS_SECONDS", "31536000"))
SECURE_HSTS_INCLUDE_SUBDOMAINS = True

LOGGING = deepcopy(LOGGING)
for _name in LOGGING["loggers"]:
    LOGGING["loggers"][_name]["level"] = os.getenv("DJANGO_LOG_LEVEL", "INFO")
