"""Rule-based chat assistant for managing business calls."""

import re
from datetime import datetime, timedelta
from typing import Callable, NamedTuple, Optional, Sequence

from calls_assistant.models import Call, CallUpdate, NewCall
from calls_assistant import call_filters
from calls_assistant.extraction import extract_call_info

# (reply, action, action_payload)
Reply = tuple[str, Optional[str], Optional[dict]]

DEFAULT_PHONE_NUMBER = "+1-555-XXXX"
DEFAULT_DURATION_MINUTES = 30
DEFAULT_NOTES = "No notes provided"
DEFAULT_PRIORITY = "medium"
DEFAULT_CATEGORY = "General"
DEFAULT_LEAD_TIME = timedelta(hours=24)

SCHEDULE_PROMPT_REPLY = (
    "I'll help you schedule a call. Here's what I need:\n\n"
    "1. Client name\n2. Phone number\n3. Date and time\n4. Duration\n"
    "5. Priority (high/medium/low)\n6. Category\n7. Any notes\n\n"
    "For example: 'Schedule a call with Sarah Johnson at +1-555-0199 tomorrow at 2 PM "
    "for 45 minutes, high priority, category Sales, discuss new contract'"
)
NO_UPCOMING_CALLS_REPLY = "You don't have any upcoming calls scheduled."
NO_HIGH_PRIORITY_CALLS_REPLY = "You don't have any high priority calls at the moment."
NOTHING_TO_COMPLETE_REPLY = "No scheduled calls to mark as completed."
HELP_REPLY = (
    "I can help you with:\n\n"
    "📅 Schedule new calls\n📊 View your call schedule\n✅ Mark calls as completed\n"
    "🔥 Check high priority calls\n📝 Generate summaries and reports\n\n"
    "What would you like to do?"
)

SPECIFIC_SCHEDULE_RE = re.compile(r"schedule.*with|call with")


class Rule(NamedTuple):
    """One entry of the decision list.

    ``matches`` sees the lowercased message. ``respond`` may return None to
    let the following rules try the same message.
    """
    intent: str
    matches: Callable[[str], bool]
    respond: Callable[[str, Sequence[Call], datetime], Optional[Reply]]


def format_call_time(value: datetime) -> str:
    """Render a time the way an en-US locale does, e.g. '10/20/2026, 2:00:00 PM'."""
    if value.tzinfo is not None:
        value = value.astimezone()
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{value.month}/{value.day}/{value.year}, {hour}:{value.minute:02d}:{value.second:02d} {meridiem}"


def _contains_any(text: str, *keywords: str) -> bool:
    return any(keyword in text for keyword in keywords)


def _schedule_prompt(message: str, calls: Sequence[Call], now: datetime) -> Reply:
    return SCHEDULE_PROMPT_REPLY, None, None


def _schedule_call(message: str, calls: Sequence[Call], now: datetime) -> Optional[Reply]:
    extracted = extract_call_info(message, now=now)
    if not extracted.client_name:
        return None

    new_call = NewCall(
        client_name=extracted.client_name,
        phone_number=extracted.phone_number or DEFAULT_PHONE_NUMBER,
        scheduled_time=extracted.scheduled_time or now + DEFAULT_LEAD_TIME,
        duration=extracted.duration or DEFAULT_DURATION_MINUTES,
        status="scheduled",
        notes=extracted.notes or DEFAULT_NOTES,
        priority=extracted.priority or DEFAULT_PRIORITY,
        category=extracted.category or DEFAULT_CATEGORY,
    )

    reply = (
        "✅ Call scheduled successfully!\n\n"
        f"Client: {new_call.client_name}\n"
        f"Phone: {new_call.phone_number}\n"
        f"Time: {format_call_time(new_call.scheduled_time)}\n"
        f"Duration: {new_call.duration} minutes\n"
        f"Priority: {new_call.priority}\n"
        f"Category: {new_call.category}\n"
        f"Notes: {new_call.notes}"
    )
    return reply, "schedule_call", new_call.model_dump(mode="json", by_alias=True)


def _list_calls(message: str, calls: Sequence[Call], now: datetime) -> Reply:
    upcoming = call_filters.upcoming_calls(calls)
    if not upcoming:
        return NO_UPCOMING_CALLS_REPLY, None, None

    lines = "\n".join(
        f"{idx}. {call.client_name} - {format_call_time(call.scheduled_time)} ({call.priority} priority)"
        for idx, call in enumerate(upcoming, start=1)
    )
    return f"📅 You have {len(upcoming)} upcoming call(s):\n\n{lines}", None, None


def _high_priority(message: str, calls: Sequence[Call], now: datetime) -> Reply:
    urgent = call_filters.high_priority_calls(calls)
    if not urgent:
        return NO_HIGH_PRIORITY_CALLS_REPLY, None, None

    lines = "\n".join(
        f"{idx}. {call.client_name} - {format_call_time(call.scheduled_time)} [{call.status}]"
        for idx, call in enumerate(urgent, start=1)
    )
    return f"🔥 You have {len(urgent)} high priority call(s):\n\n{lines}", None, None


def _summary(message: str, calls: Sequence[Call], now: datetime) -> Reply:
    summary = call_filters.summarize_calls(calls)
    reply = (
        "📊 Calls Summary:\n\n"
        f"✅ Completed: {summary.completed}\n"
        f"📅 Scheduled: {summary.scheduled}\n"
        f"❌ Missed: {summary.missed}\n"
        f"🔥 High Priority: {summary.high_priority}\n\n"
        f"Total Calls: {summary.total}"
    )
    return reply, None, None


def _mark_complete(message: str, calls: Sequence[Call], now: datetime) -> Reply:
    call = call_filters.first_scheduled_call(calls)
    if call is None:
        return NOTHING_TO_COMPLETE_REPLY, None, None

    update = CallUpdate(id=call.id, status="completed")
    return (
        f"✅ Marked call with {call.client_name} as completed. Great job!",
        "update_call",
        update.model_dump(by_alias=True),
    )


def _help(message: str, calls: Sequence[Call], now: datetime) -> Reply:
    return HELP_REPLY, None, None


# Order matters: several rules share trigger words and the first match wins.
RULES: list[Rule] = [
    Rule(
        "schedule_prompt",
        lambda text: _contains_any(text, "schedule", "add a call", "new call"),
        _schedule_prompt,
    ),
    Rule(
        "schedule_call",
        lambda text: SPECIFIC_SCHEDULE_RE.search(text) is not None,
        _schedule_call,
    ),
    Rule(
        "list_calls",
        lambda text: "show" in text and _contains_any(text, "call", "schedule"),
        _list_calls,
    ),
    Rule(
        "high_priority",
        lambda text: _contains_any(text, "priority", "urgent", "important"),
        _high_priority,
    ),
    Rule(
        "summary",
        lambda text: _contains_any(text, "summar", "report", "overview"),
        _summary,
    ),
    Rule(
        "mark_complete",
        lambda text: _contains_any(text, "complete", "finished"),
        _mark_complete,
    ),
]


def decide_reply(
    message: str,
    calls: Sequence[Call],
    now: Optional[datetime] = None,
) -> tuple[str, str, Optional[str], Optional[dict]]:
    """
    Classify a chat message and build the assistant's answer.

    Returns:
        tuple: (intent, reply, action, action_payload)
        - intent: name of the rule that answered
        - reply: text shown to the user
        - action: "schedule_call", "update_call" or None
        - action_payload: data the caller applies to its call list
    """
    now = now or datetime.now()
    lowered = message.lower()

    for rule in RULES:
        if not rule.matches(lowered):
            continue
        result = rule.respond(message, calls, now)
        if result is None:
            continue
        reply, action, payload = result
        return rule.intent, reply, action, payload

    reply, action, payload = _help(message, calls, now)
    return "help", reply, action, payload
