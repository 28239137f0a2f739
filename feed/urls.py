from django.urls import re_path

from .views import BlueskyFeedView

urlpatterns = [
    re_path(r"^bluesky/?$", BlueskyFeedView.as_view(), name="bluesky-feed"),
]
