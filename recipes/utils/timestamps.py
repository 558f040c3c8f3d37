"""Timestamp helpers."""

from django.utils import timezone


def now_millis() -> int:
    """Return the current time as epoch milliseconds, the format stored on records."""
    return int(timezone.now().timestamp() * 1000)
