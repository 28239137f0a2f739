from django.urls import path

from . import views

app_name = "pages"

urlpatterns = [
    path("", views.home, name="home"),
    path("events/", views.events_page, name="events"),
    path("admin-panel/login/", views.admin_login, name="admin-login"),
    path("admin-panel/logout/", views.admin_logout, name="admin-logout"),
    path("admin-panel/", views.admin_events, name="admin-events"),
    path("admin-panel/events/<int:pk>/<str:action>/", views.admin_event_action, name="admin-event-action"),
]
