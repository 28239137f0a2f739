from django.apps import AppConfig


class CommonConfig(AppConfig):
    """Shared error types, exception handler and permissions."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "common"
