import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="SpeakerAvailability",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("date", models.DateField()),
                ("start_time", models.TimeField()),
                ("end_time", models.TimeField()),
                (
                    "status",
                    models.CharField(
                        choices=[("available", "Available"), ("pending", "Pending approval"), ("booked", "Booked")],
                        default="available",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "speaker",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="availability_slots",
                        to="users.speaker",
                    ),
                ),
            ],
            options={
                "verbose_name": "Availability slot",
                "verbose_name_plural": "Availability slots",
                "db_table": "speaker_availability",
                "ordering": ["date", "start_time"],
                "indexes": [
                    models.Index(fields=["speaker", "date", "start_time"], name="avail_speaker_date_idx"),
                    models.Index(fields=["speaker", "status"], name="avail_speaker_status_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("start_time__lt", models.F("end_time"))),
                        name="availability_valid_time_range",
                    ),
                ],
            },
        ),
    ]
