"""WSGI entry point for the Voices Ignited website."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "voices_ignited.settings.dev")

application = get_wsgi_application()
