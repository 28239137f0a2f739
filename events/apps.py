from django.apps import AppConfig


class EventsConfig(AppConfig):
    """Events calendar: submission, admin approval and listing."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "events"
