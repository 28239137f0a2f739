from django.apps import AppConfig


class PagesConfig(AppConfig):
    """Server-rendered pages: home, calendar, admin approval screens."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "pages"
