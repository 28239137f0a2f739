from django.apps import AppConfig


class FeedConfig(AppConfig):
    """Bluesky feed mirror shown on the home page widget."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "feed"
