from __future__ import annotations

from datetime import timedelta

from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore
from django.core.management.base import BaseCommand, CommandError  # type: ignore
from django.utils import timezone  # type: ignore

from apps.availability.services import SlotStore
from apps.users.models import Speaker
from shared.domain.exceptions import ConflictError

SAMPLE_TIMES = [
    ("09:00", "10:00"),
    ("10:00", "11:00"),
    ("14:00", "15:00"),
]


class Command(BaseCommand):
    help = "Publishes demo availability slots for a speaker over the coming days"

    def add_arguments(self, parser):  # type: ignore
        parser.add_argument("speaker_id")
        parser.add_argument("--days", type=int, default=14)
        parser.add_argument(
            "--replace",
            action="store_true",
            help="Delete the speaker's upcoming available slots first",
        )

    def handle(self, *args, **options):  # type: ignore
        try:
            speaker = Speaker.objects.filter(pk=options["speaker_id"]).first()
        except DjangoValidationError:
            raise CommandError(f"Invalid speaker id {options['speaker_id']!r}")
        if speaker is None:
            raise CommandError(f"Speaker {options['speaker_id']} not found")

        store = SlotStore()

        if options["replace"]:
            removed = 0
            for slot in store.list_slots(speaker.id):
                if slot.is_available:
                    store.delete_slot(speaker.id, slot.id)
                    removed += 1
            self.stdout.write(f"Removed {removed} available slots")

        today = timezone.localdate()
        created = skipped = 0
        for offset in range(1, options["days"] + 1):
            day = today + timedelta(days=offset)
            for start, end in SAMPLE_TIMES:
                try:
                    store.create_slot(speaker.id, day, start, end)
                    created += 1
                except ConflictError:
                    skipped += 1

        self.stdout.write(
            self.style.SUCCESS(f"Created {created} slots for {speaker.full_name}, skipped {skipped} overlapping")
        )
