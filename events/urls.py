"""
Routes for the events API.

The trailing slash is optional on both routes, like the other ``/api/``
endpoints; DRF routers only generate the slashed or the slashless form.
"""
from django.urls import re_path

from .views import EventViewSet

event_list = EventViewSet.as_view({"get": "list", "post": "create"})
event_detail = EventViewSet.as_view({
    "get": "retrieve",
    "put": "update",
    "patch": "partial_update",
    "delete": "destroy",
})

urlpatterns = [
    re_path(r"^events/?$", event_list, name="event-list"),
    re_path(r"^events/(?P<pk>[^/.]+)/?$", event_detail, name="event-detail"),
]
