"""
URL configuration for the Voices Ignited website.

JSON endpoints live under `/api/`; authentication endpoints are nested
under `/api/auth/`.  Server-rendered pages (home, calendar, admin
approval screens) are mounted at the root by the `pages` app.
"""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView
)
from rest_framework_simplejwt.views import TokenRefreshView, TokenVerifyView

from users.views import AdminTokenObtainPairView

handler404 = "pages.views.page_not_found"

urlpatterns = [
    path("django-admin/", admin.site.urls),

    #  Swagger/Redoc
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),

    path("api/token/", AdminTokenObtainPairView.as_view(), name="api_token_obtain_pair"),
    path("api/token/refresh/", TokenRefreshView.as_view(), name="api_token_refresh"),
    path("api/token/verify/", TokenVerifyView.as_view(), name="token_verify"),

    # Auth endpoints
    path("api/auth/", include("users.urls")),
    path("api/", include("events.urls")),
    path("api/", include("feed.urls")),

    path("", include("pages.urls")),
]
