"""
Admin configuration for the events app.

Lists pending submissions first and exposes bulk approve through the
same conditional update the API uses.
"""
from django.contrib import admin, messages

from .exceptions import ApprovalNoOp, EventNotFound
from .models import Event
from .services import approve_event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("title", "date", "start_time", "type", "location_type", "approved", "approved_by")
    list_filter = ("approved", "type", "location_type")
    search_fields = ("title", "location", "organizer")
    readonly_fields = ("approved", "approved_by", "approved_at", "created_at", "updated_at")
    ordering = ("approved", "date", "start_time")
    actions = ["approve_selected"]

    @admin.action(description="Approve selected events")
    def approve_selected(self, request, queryset):
        approved = 0
        for event in queryset.filter(approved=False):
            try:
                approve_event(event.pk, request.user.get_username())
                approved += 1
            except (ApprovalNoOp, EventNotFound):
                continue
        self.message_user(request, f"{approved} event(s) approved.", messages.SUCCESS)
