"""
Views for the users app.

Session login/logout for the admin screens and a JWT pair endpoint for
API clients.  Login attempts are rate limited per client address
(``login`` throttle scope); callers over the limit get a 429.
"""
import logging

from django.contrib.auth import login as django_login, logout as django_logout
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import ensure_csrf_cookie
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed, ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenObtainPairView

from common.permissions import IsStaffOrSuperuser

from .serializers import AdminSerializer, AdminTokenObtainPairSerializer, LoginSerializer

logger = logging.getLogger(__name__)


class LoginView(APIView):
    """
    Session-based admin login. Expects JSON: {"username": "...", "password": "..."}
    On success, creates a Django session (cookie-based) and returns {"success": true}.
    """
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "login"

    @method_decorator(ensure_csrf_cookie)
    def post(self, request):
        serializer = LoginSerializer(data=request.data, context={"request": request})
        try:
            serializer.is_valid(raise_exception=True)
        except (AuthenticationFailed, ValidationError):
            logger.warning("Failed admin login for %r", request.data.get("username"))
            raise
        user = serializer.validated_data["user"]

        django_login(request, user)          # <- creates session
        request.session.cycle_key()          # rotate session id
        logger.info("Admin %s logged in", user.get_username())
        return Response({"success": True, "user": AdminSerializer(user).data}, status=status.HTTP_200_OK)


class LogoutView(APIView):
    """Session-based logout. Destroys the admin's session cookie."""
    permission_classes = [AllowAny]

    def post(self, request):
        if request.user.is_authenticated:
            logger.info("Admin %s logged out", request.user.get_username())
        django_logout(request)
        return Response({"success": True}, status=status.HTTP_200_OK)


class MeView(APIView):
    """Return the current admin (401 if not logged in)."""
    permission_classes = [IsStaffOrSuperuser]

    def get(self, request):
        return Response({"success": True, "user": AdminSerializer(request.user).data}, status=status.HTTP_200_OK)


class AdminTokenObtainPairView(TokenObtainPairView):
    """JWT refresh/access pair for staff accounts; shares the login throttle."""
    serializer_class = AdminTokenObtainPairSerializer
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "login"
