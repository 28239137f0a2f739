"""
ViewSet for the events app.

Anyone can list approved events and submit new ones; submissions start
unapproved.  Everything else (point lookups, edits, approval, deletion
and listings that include pending events) requires an administrator.
"""
import logging

from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from common.exceptions import AuthRequired, InvalidInput
from common.permissions import IsStaffOrSuperuser, is_admin

from .exceptions import EventNotFound
from .serializers import ApprovalActionSerializer, EventSerializer
from .services import APPROVAL_ACTIONS, apply_action
from .store import EventStore, query_flag

logger = logging.getLogger(__name__)


class EventViewSet(viewsets.ViewSet):
    """
    /api/events/        GET (public, or admin with adminRequest=true), POST (public)
    /api/events/<id>/   GET, PUT, PATCH, DELETE (admin)
    """
    store = EventStore()
    serializer_class = EventSerializer

    def get_permissions(self):
        if self.action in ("list", "create"):
            return [AllowAny()]
        return [IsStaffOrSuperuser()]

    def permission_denied(self, request, message=None, code=None):
        # non-staff sessions are treated like anonymous callers
        raise AuthRequired()

    def get_throttles(self):
        if self.action == "create":
            return [AnonRateThrottle()]
        return super().get_throttles()

    def list(self, request):
        params = request.query_params
        admin_request = query_flag(params, "adminRequest")
        if admin_request and not is_admin(request.user):
            raise AuthRequired()

        events = self.store.find(params, admin=admin_request)
        data = EventSerializer(events, many=True).data
        return Response({"success": True, "count": len(data), "data": data})

    def create(self, request):
        serializer = EventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.store.create(serializer.validated_data)
        logger.info("Event %s submitted for approval: %s", event.pk, event.title)
        return Response(
            {"success": True, "data": EventSerializer(event).data},
            status=status.HTTP_201_CREATED,
        )

    def retrieve(self, request, pk=None):
        event = self.store.get(pk)
        if not query_flag(request.query_params, "adminRequest") and not event.approved:
            raise EventNotFound("Event not found or not yet approved")
        return Response({"success": True, "data": EventSerializer(event).data})

    def update(self, request, pk=None, partial=True):
        if not isinstance(request.data, dict):
            raise InvalidInput("Request body must be a JSON object")
        if request.data.get("action") in APPROVAL_ACTIONS:
            return self._apply_action(request, pk)

        # Generic field patch: only the fields present in the body change.
        event = self.store.get(pk)
        serializer = EventSerializer(event, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        event = self.store.update(event, serializer.validated_data)
        return Response({"success": True, "data": EventSerializer(event).data})

    def partial_update(self, request, pk=None):
        return self.update(request, pk, partial=True)

    def destroy(self, request, pk=None):
        self.store.delete(pk)
        logger.info("Event %s deleted by %s", pk, request.user)
        return Response({"success": True, "message": "Event deleted successfully"})

    def _apply_action(self, request, pk):
        serializer = ApprovalActionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        action = serializer.validated_data["action"]
        admin_name = serializer.validated_data.get("adminName") or request.user.get_username()

        event = apply_action(pk, action, admin_name, store=self.store)
        if event is None:
            return Response({"success": True, "message": "Event rejected and removed"})
        return Response({
            "success": True,
            "message": "Event approved successfully",
            "data": EventSerializer(event).data,
        })
