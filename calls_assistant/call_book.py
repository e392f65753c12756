"""In-memory call list and chat transcript for a chat client.

A CallBook is what a front end keeps between messages: it sends each message
together with its current calls to POST /api/chat and applies the returned
action locally. Nothing is persisted; a new CallBook starts from scratch.
"""

import time
from datetime import datetime, timedelta
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from calls_assistant.models import Call, CallDelete, ChatMessage, ChatResponse, NewCall
from calls_assistant import call_filters
from calls_assistant.logging_config import get_logger

logger = get_logger(__name__)

GREETING = (
    "Hello! I'm your AI business calls assistant. I can help you schedule calls, manage your call list, "
    "take notes, and provide insights. Try asking me to \"schedule a call\" or \"show my upcoming calls\"."
)
APOLOGY = "I apologize, but I encountered an error processing your request. Please try again."

QUICK_PROMPTS = {
    "Schedule Call": "Schedule a new call",
    "View Schedule": "Show upcoming calls",
    "Daily Summary": "Summarize today's calls",
    "Priority Calls": "What are my high priority calls?",
}


def demo_call(now: Optional[datetime] = None) -> Call:
    """The sample call a fresh session starts with."""
    now = now or datetime.now()
    return Call(
        id="1",
        client_name="John Smith",
        phone_number="+1-555-0123",
        scheduled_time=now + timedelta(hours=1),
        duration=30,
        status="scheduled",
        notes="Discuss Q4 sales report",
        priority="high",
        category="Sales",
    )


def render_call(call: Call) -> str:
    """Text card for one call, as shown on the dashboard."""
    return "\n".join([
        f"{call.client_name} [{call.status}]",
        f"  phone:    {call.phone_number}",
        f"  time:     {call.scheduled_time.strftime('%b %d, %Y %H:%M')}",
        f"  duration: {call.duration} min",
        f"  priority: {call.priority.upper()}",
        f"  notes:    {call.notes}",
        f"  category: {call.category}",
    ])


class CallBook:
    """Call list and transcript for one chat session."""

    def __init__(
        self,
        calls: Optional[list[Call]] = None,
        chat_history: Optional[list[ChatMessage]] = None,
    ):
        self.calls: list[Call] = list(calls or [])
        self.chat_history: list[ChatMessage] = list(chat_history or [])

    @classmethod
    def with_demo_data(cls, now: Optional[datetime] = None) -> "CallBook":
        """Start a session with the sample call and the assistant greeting."""
        return cls(
            calls=[demo_call(now)],
            chat_history=[ChatMessage(role="assistant", content=GREETING)],
        )

    def get_call(self, call_id: str) -> Optional[Call]:
        for call in self.calls:
            if call.id == call_id:
                return call
        return None

    def count_scheduled(self) -> int:
        return call_filters.count_status(self.calls, "scheduled")

    def count_completed(self) -> int:
        return call_filters.count_status(self.calls, "completed")

    def _next_id(self) -> str:
        # Millisecond timestamps, bumped past any id already in use.
        candidate = int(time.time() * 1000)
        taken = {call.id for call in self.calls}
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def apply_action(self, action: Optional[str], data: Optional[dict[str, Any]]) -> bool:
        """
        Apply an assistant action to the call list.

        Returns True if the call list changed. Unknown actions and actions
        without a payload are ignored.
        """
        if not action or not data:
            return False

        if action == "schedule_call":
            new_call = NewCall.model_validate(data)
            call = Call(id=self._next_id(), **new_call.model_dump())
            self.calls.append(call)
            logger.debug("call_action_applied", action=action, call_id=call.id)
            return True

        if action == "update_call":
            call_id = data.get("id")
            changed = False
            for idx, call in enumerate(self.calls):
                if call.id != call_id:
                    continue
                merged = {**call.model_dump(by_alias=True), **data}
                self.calls[idx] = Call.model_validate(merged)
                changed = True
            logger.debug("call_action_applied", action=action, call_id=call_id, changed=changed)
            return changed

        if action == "delete_call":
            call_id = CallDelete.model_validate(data).id
            before = len(self.calls)
            self.calls = [call for call in self.calls if call.id != call_id]
            logger.debug("call_action_applied", action=action, call_id=call_id)
            return len(self.calls) != before

        logger.debug("call_action_ignored", action=action)
        return False

    def request_body(self, text: str) -> dict[str, Any]:
        """Build the JSON body for POST /api/chat."""
        return {
            "message": text,
            "calls": [call.model_dump(mode="json", by_alias=True) for call in self.calls],
            "chatHistory": [msg.model_dump(by_alias=True) for msg in self.chat_history],
        }

    def send_message(self, client: httpx.Client, text: str, path: str = "/api/chat") -> Optional[ChatResponse]:
        """
        Send one user message and fold the answer into this session.

        Blank input is ignored. On any transport or parse failure the
        transcript gets a generic apology and None is returned.
        """
        if not text.strip():
            return None

        # The server sees the transcript as it was before this message.
        body = self.request_body(text)
        self.chat_history.append(ChatMessage(role="user", content=text))

        try:
            resp = client.post(path, json=body)
            answer = ChatResponse.model_validate(resp.json())
            self.apply_action(answer.action, answer.data)
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.warning("chat_request_failed", error=str(e))
            self.chat_history.append(ChatMessage(role="assistant", content=APOLOGY))
            return None

        self.chat_history.append(ChatMessage(role="assistant", content=answer.message))
        return answer
