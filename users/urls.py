"""
Authentication endpoints for the users app.

Session login for the admin screens plus the JWT pair endpoint used by
API clients.  Mounted under ``/api/auth/``.
"""
from django.urls import re_path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import AdminTokenObtainPairView, LoginView, LogoutView, MeView

urlpatterns = [
    re_path(r"^login/?$", LoginView.as_view(), name="login"),
    re_path(r"^logout/?$", LogoutView.as_view(), name="logout"),
    re_path(r"^me/?$", MeView.as_view(), name="me"),

    # JWT pair for API clients
    re_path(r"^token/?$", AdminTokenObtainPairView.as_view(), name="token_obtain_pair"),
    re_path(r"^token/refresh/?$", TokenRefreshView.as_view(), name="token_refresh"),
]
