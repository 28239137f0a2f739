"""
Models for the events app.

An `Event` is a calendar item submitted by the public.  It is created
unapproved and only becomes publicly visible once an administrator
approves it; rejected submissions are deleted outright.
"""

from django.db import models


class Event(models.Model):
    """A community calendar event, gated behind admin approval."""
    TYPE_MEETING = "meeting"
    TYPE_WORKSHOP = "workshop"
    TYPE_ACTION = "action"
    TYPE_FUNDRAISER = "fundraiser"
    TYPE_SOCIAL = "social"

    TYPE_CHOICES = [
        (TYPE_MEETING, "Meeting"),
        (TYPE_WORKSHOP, "Workshop"),
        (TYPE_ACTION, "Action"),
        (TYPE_FUNDRAISER, "Fundraiser"),
        (TYPE_SOCIAL, "Social"),
    ]

    LOCATION_ONLINE = "online"
    LOCATION_IN_PERSON = "in-person"

    LOCATION_TYPE_CHOICES = [
        (LOCATION_ONLINE, "Online"),
        (LOCATION_IN_PERSON, "In-Person"),
    ]

    title = models.CharField(max_length=200)
    description = models.TextField()
    date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default=TYPE_MEETING)
    location_type = models.CharField(max_length=20, choices=LOCATION_TYPE_CHOICES, default=LOCATION_ONLINE)
    location = models.CharField(max_length=255)
    organizer = models.CharField(max_length=200, blank=True)
    contact_email = models.EmailField(blank=True)
    image_url = models.URLField(max_length=500, blank=True)
    # Approval
    approved = models.BooleanField(default=False, db_index=True)
    approved_by = models.CharField(max_length=150, blank=True)
    approved_at = models.DateTimeField(null=True, blank=True)
    # Meta
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["date", "start_time"]
        indexes = [
            models.Index(fields=["approved", "date"], name="event_approved_date_idx"),
        ]

    def __str__(self) -> str:
        state = "approved" if self.approved else "pending"
        return f"{self.title} ({self.date:%Y-%m-%d}, {state})"
