"""Stateless filters and counts over a call list."""

from typing import Optional, Sequence
from calls_assistant.models import Call, CallPriority, CallStatus, CallSummary


def calls_with_status(calls: Sequence[Call], status: CallStatus) -> list[Call]:
    """Return calls with the given status, keeping input order."""
    return [call for call in calls if call.status == status]


def calls_with_priority(calls: Sequence[Call], priority: CallPriority) -> list[Call]:
    """Return calls with the given priority, keeping input order."""
    return [call for call in calls if call.priority == priority]


def upcoming_calls(calls: Sequence[Call]) -> list[Call]:
    return calls_with_status(calls, "scheduled")


def high_priority_calls(calls: Sequence[Call]) -> list[Call]:
    return calls_with_priority(calls, "high")


def first_scheduled_call(calls: Sequence[Call]) -> Optional[Call]:
    """Return the first scheduled call in input order, if any."""
    for call in calls:
        if call.status == "scheduled":
            return call
    return None


def count_status(calls: Sequence[Call], status: CallStatus) -> int:
    return len(calls_with_status(calls, status))


def summarize_calls(calls: Sequence[Call]) -> CallSummary:
    """Count calls by status and high priority."""
    return CallSummary(
        scheduled=count_status(calls, "scheduled"),
        completed=count_status(calls, "completed"),
        missed=count_status(calls, "missed"),
        high_priority=len(high_priority_calls(calls)),
        total=len(calls),
    )
