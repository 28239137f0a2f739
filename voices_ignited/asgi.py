"""
ASGI entry point for the Voices Ignited website.

The default settings module is the development configuration; deployments
set DJANGO_SETTINGS_MODULE to `voices_ignited.settings.prod`.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "voices_ignited.settings.dev")

application = get_asgi_application()
