"""Best-effort extraction of call details from a free-text message.

Each extractor looks at the raw message on its own and returns None when it
finds nothing. ``extract_call_info`` runs all of them and collects the results
into a partial record; defaults are applied by the caller.
"""

import re
from datetime import datetime, timedelta
from typing import Optional
from pydantic import BaseModel

from calls_assistant.models import CallPriority

# ASCII mode: digits are 0-9 only and [A-Za-z] does not case-fold onto letters
# such as the Kelvin sign.
NAME_RE = re.compile(r"with\s+([A-Za-z\s]+?)(?:\s+at|\s+on|\s+tomorrow|\s+,|$)", re.IGNORECASE | re.ASCII)
PHONE_RE = re.compile(r"(\+?\d{1}-?\d{3}-?\d{4}|\+?\d{10,})", re.ASCII)
DURATION_RE = re.compile(r"(\d+)\s*(min|minute|hour)", re.IGNORECASE | re.ASCII)
CATEGORY_RE = re.compile(r"category\s+([A-Za-z]+)", re.IGNORECASE | re.ASCII)
NOTES_RE = re.compile(r"(?:discuss|about|regarding)\s+(.+?)(?:\s*$)", re.IGNORECASE | re.ASCII)

# Checked in order, so "high" wins when several are present.
PRIORITY_PHRASES: list[tuple[str, CallPriority]] = [
    ("high priority", "high"),
    ("low priority", "low"),
    ("medium priority", "medium"),
]

# Relative day phrases always land on this hour; an explicit time of day is not parsed.
DEFAULT_CALL_HOUR = 14


class ExtractedCall(BaseModel):
    """Fields found in a message; anything not found stays None."""
    client_name: Optional[str] = None
    phone_number: Optional[str] = None
    scheduled_time: Optional[datetime] = None
    duration: Optional[int] = None
    priority: Optional[CallPriority] = None
    category: Optional[str] = None
    notes: Optional[str] = None


def extract_client_name(message: str) -> Optional[str]:
    match = NAME_RE.search(message)
    if not match:
        return None
    # An empty capture ("with ,") counts as no name.
    return match.group(1).strip() or None


def extract_phone_number(message: str) -> Optional[str]:
    match = PHONE_RE.search(message)
    return match.group(1) if match else None


def extract_duration(message: str) -> Optional[int]:
    """Return the duration in minutes; hours are converted."""
    match = DURATION_RE.search(message)
    if not match:
        return None
    value = int(match.group(1))
    if match.group(2).lower().startswith("hour"):
        return value * 60
    return value


def extract_priority(message: str) -> Optional[CallPriority]:
    lowered = message.lower()
    for phrase, priority in PRIORITY_PHRASES:
        if phrase in lowered:
            return priority
    return None


def extract_category(message: str) -> Optional[str]:
    match = CATEGORY_RE.search(message)
    return match.group(1) if match else None


def extract_notes(message: str) -> Optional[str]:
    match = NOTES_RE.search(message)
    return match.group(1).strip() if match else None


def extract_scheduled_time(message: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """
    Resolve "tomorrow" / "next week" to a concrete time.

    Both resolve to DEFAULT_CALL_HOUR:00 local time, one or seven days ahead.
    """
    lowered = message.lower()
    if "tomorrow" in lowered:
        days_ahead = 1
    elif "next week" in lowered:
        days_ahead = 7
    else:
        return None

    now = now or datetime.now()
    return (now + timedelta(days=days_ahead)).replace(
        hour=DEFAULT_CALL_HOUR, minute=0, second=0, microsecond=0
    )


def extract_call_info(message: str, now: Optional[datetime] = None) -> ExtractedCall:
    """Run every extractor over the message and collect the results."""
    return ExtractedCall(
        client_name=extract_client_name(message),
        phone_number=extract_phone_number(message),
        scheduled_time=extract_scheduled_time(message, now=now),
        duration=extract_duration(message),
        priority=extract_priority(message),
        category=extract_category(message),
        notes=extract_notes(message),
    )
