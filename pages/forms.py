"""
Forms for the public event submission and the admin login screen.
"""
from django import forms
from django.contrib.auth.forms import AuthenticationForm

from events.models import Event


class EventSubmissionForm(forms.ModelForm):
    """Public submission; events created here always start unapproved."""

    class Meta:
        model = Event
        fields = [
            "title",
            "description",
            "date",
            "start_time",
            "end_time",
            "type",
            "location_type",
            "location",
            "organizer",
            "contact_email",
            "image_url",
        ]
        labels = {
            "title": "Event Title",
            "start_time": "Start Time",
            "end_time": "End Time",
            "type": "Event Type",
            "location_type": "Location Type",
            "location": "Meeting Link or Address",
            "contact_email": "Contact Email",
            "image_url": "Image URL",
        }
        widgets = {
            "date": forms.DateInput(attrs={"type": "date"}),
            "start_time": forms.TimeInput(attrs={"type": "time"}, format="%H:%M"),
            "end_time": forms.TimeInput(attrs={"type": "time"}, format="%H:%M"),
            "description": forms.Textarea(attrs={"rows": 4}),
        }

    def clean(self):
        cleaned = super().clean()
        start, end = cleaned.get("start_time"), cleaned.get("end_time")
        if start and end and not end > start:
            self.add_error("end_time", "End time must be later than start time.")
        return cleaned


class AdminLoginForm(AuthenticationForm):
    """Django's login form, restricted to staff accounts."""

    def confirm_login_allowed(self, user):
        super().confirm_login_allowed(user)
        if not (user.is_staff or user.is_superuser):
            raise forms.ValidationError(
                self.error_messages["invalid_login"],
                code="invalid_login",
                params={"username": self.username_field.verbose_name},
            )
