"""Django apps of the SpeakerHub platform."""
