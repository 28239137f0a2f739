from django.apps import AppConfig


class UsersConfig(AppConfig):
    """Admin authentication: session login for the site, JWT for API clients."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "users"
