"""
Serializers for the users app.

Only staff accounts may sign in: the public never logs in to this site.
"""
from django.contrib.auth import authenticate
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

INVALID_CREDENTIALS = "Invalid username or password"


def authenticate_admin(request, username, password):
    """Return the staff user for these credentials or raise ``AuthenticationFailed``."""
    user = authenticate(request, username=username, password=password)
    if user is None or not user.is_active:
        raise AuthenticationFailed(INVALID_CREDENTIALS)
    if not (user.is_staff or user.is_superuser):
        raise AuthenticationFailed(INVALID_CREDENTIALS)
    return user


class LoginSerializer(serializers.Serializer):
    """POST body of ``/api/auth/login``: {"username": "...", "password": "..."}"""
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate(self, attrs):
        attrs["user"] = authenticate_admin(self.context.get("request"), attrs["username"], attrs["password"])
        return attrs


class AdminSerializer(serializers.Serializer):
    username = serializers.CharField()
    isStaff = serializers.BooleanField(source="is_staff")
    isSuperuser = serializers.BooleanField(source="is_superuser")


class AdminTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Username + password login returning SimpleJWT refresh/access tokens,
    restricted to staff accounts.
    """

    def validate(self, attrs):
        authenticate_admin(self.context.get("request"), attrs.get(self.username_field), attrs.get("password"))
        return super().validate(attrs)
