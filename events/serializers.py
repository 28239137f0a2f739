"""
Serializers for the events app.

The JSON API speaks the camelCase field names the site's front end has
always used (``startTime``, ``locationType``, ...); each maps onto the
snake_case model field through ``source``.  Approval fields are read only:
only the approval workflow in ``events.services`` may set them.
"""
from rest_framework import serializers

from .models import Event
from .services import APPROVAL_ACTIONS

TIME_INPUT_FORMATS = ["%H:%M", "%H:%M:%S"]


class EventSerializer(serializers.ModelSerializer):
    """Serializer for Event objects."""
    startTime = serializers.TimeField(source="start_time", format="%H:%M", input_formats=TIME_INPUT_FORMATS)
    endTime = serializers.TimeField(source="end_time", format="%H:%M", input_formats=TIME_INPUT_FORMATS)
    locationType = serializers.ChoiceField(
        source="location_type",
        choices=Event.LOCATION_TYPE_CHOICES,
        required=False,
    )
    contactEmail = serializers.EmailField(source="contact_email", required=False, allow_blank=True)
    imageUrl = serializers.URLField(source="image_url", required=False, allow_blank=True, max_length=500)
    approvedBy = serializers.CharField(source="approved_by", read_only=True)
    approvedAt = serializers.DateTimeField(source="approved_at", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Event
        fields = [
            "id",
            "title",
            "description",
            "date",
            "startTime",
            "endTime",
            "type",
            "locationType",
            "location",
            "organizer",
            "contactEmail",
            "imageUrl",
            "approved",
            "approvedBy",
            "approvedAt",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id", "approved"]

    def validate(self, data):
        """endTime must be strictly later than startTime."""
        start = data.get("start_time", getattr(self.instance, "start_time", None))
        end = data.get("end_time", getattr(self.instance, "end_time", None))
        if start and end and not end > start:
            raise serializers.ValidationError({"endTime": "End time must be later than start time."})
        return data


class ApprovalActionSerializer(serializers.Serializer):
    """Body of ``PUT /api/events/<id>/`` when it carries an approval action."""
    action = serializers.ChoiceField(choices=APPROVAL_ACTIONS)
    adminName = serializers.CharField(required=False, allow_blank=True, max_length=150)
