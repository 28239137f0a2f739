from datetime import date, time, timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from events.models import Event

SAMPLE_EVENTS = [
    {
        "title": "Community Workshop",
        "description": "Join us for an engaging community workshop on social justice and activism.",
        "offset_days": 7,
        "start_time": time(14, 0),
        "end_time": time(16, 0),
        "type": Event.TYPE_WORKSHOP,
        "location_type": Event.LOCATION_IN_PERSON,
        "location": "Community Center, 123 Main St",
        "organizer": "Voices Ignited Team",
        "contact_email": "contact@voicesignited.org",
    },
    {
        "title": "Monthly Planning Meeting",
        "description": "Monthly meeting to discuss upcoming initiatives and community projects.",
        "offset_days": 12,
        "start_time": time(18, 30),
        "end_time": time(20, 0),
        "type": Event.TYPE_MEETING,
        "location_type": Event.LOCATION_ONLINE,
        "location": "Zoom (link will be sent)",
        "organizer": "Core Team",
        "contact_email": "team@voicesignited.org",
    },
    {
        "title": "Climate Action Rally",
        "description": "Join us for a peaceful rally to raise awareness about climate change.",
        "offset_days": 21,
        "start_time": time(10, 0),
        "end_time": time(13, 0),
        "type": Event.TYPE_ACTION,
        "location_type": Event.LOCATION_IN_PERSON,
        "location": "City Hall Plaza",
        "organizer": "Environmental Committee",
        "contact_email": "environment@voicesignited.org",
    },
    {
        "title": "Spring Fundraiser Dinner",
        "description": "An evening of food and music supporting our community programs.",
        "offset_days": 30,
        "start_time": time(18, 0),
        "end_time": time(21, 0),
        "type": Event.TYPE_FUNDRAISER,
        "location_type": Event.LOCATION_IN_PERSON,
        "location": "Riverside Hall",
        "organizer": "Fundraising Committee",
        "contact_email": "giving@voicesignited.org",
    },
    {
        "title": "Neighborhood Potluck",
        "description": "Bring a dish and meet your neighbors.",
        "offset_days": 35,
        "start_time": time(17, 0),
        "end_time": time(20, 0),
        "type": Event.TYPE_SOCIAL,
        "location_type": Event.LOCATION_IN_PERSON,
        "location": "Park Pavilion",
        "organizer": "",
        "contact_email": "",
    },
]


class Command(BaseCommand):
    help = "Seed the calendar with sample events dated relative to today"

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete every existing event before seeding",
        )
        parser.add_argument(
            "--pending",
            action="store_true",
            help="Create the events unapproved so they show up in the approval queue",
        )

    def handle(self, *args, **options):
        if options.get("clear"):
            deleted, _ = Event.objects.all().delete()
            self.stdout.write(self.style.WARNING(f"Deleted {deleted} existing event(s)"))

        pending = options.get("pending", False)
        today = date.today()
        now = timezone.now()
        created = 0

        for sample in SAMPLE_EVENTS:
            fields = dict(sample)
            event_date = today + timedelta(days=fields.pop("offset_days"))
            _, was_created = Event.objects.get_or_create(
                title=fields["title"],
                date=event_date,
                defaults={
                    **fields,
                    "approved": not pending,
                    "approved_by": "" if pending else "system",
                    "approved_at": None if pending else now,
                },
            )
            if was_created:
                created += 1
                self.stdout.write(f"  + {fields['title']} ({event_date:%Y-%m-%d})")

        self.stdout.write(self.style.SUCCESS(f"Seeded {created} event(s)."))
