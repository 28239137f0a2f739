"""
Initial migration for the events app.

Defines the Event model with its scheduling, location and approval
fields.
"""
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                ("date", models.DateField()),
                ("start_time", models.TimeField()),
                ("end_time", models.TimeField()),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("meeting", "Meeting"),
                            ("workshop", "Workshop"),
                            ("action", "Action"),
                            ("fundraiser", "Fundraiser"),
                            ("social", "Social"),
                        ],
                        default="meeting",
                        max_length=20,
                    ),
                ),
                (
                    "location_type",
                    models.CharField(
                        choices=[("online", "Online"), ("in-person", "In-Person")],
                        default="online",
                        max_length=20,
                    ),
                ),
                ("location", models.CharField(max_length=255)),
                ("organizer", models.CharField(blank=True, max_length=200)),
                ("contact_email", models.EmailField(blank=True, max_length=254)),
                ("image_url", models.URLField(blank=True, max_length=500)),
                ("approved", models.BooleanField(db_index=True, default=False)),
                ("approved_by", models.CharField(blank=True, max_length=150)),
                ("approved_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["date", "start_time"],
                "indexes": [models.Index(fields=["approved", "date"], name="event_approved_date_idx")],
            },
        ),
    ]
