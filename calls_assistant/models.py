"""Data models for the business calls assistant."""

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CallStatus = Literal["scheduled", "completed", "missed", "in-progress"]
CallPriority = Literal["low", "medium", "high"]
ChatRole = Literal["user", "assistant"]
CallAction = Literal["schedule_call", "update_call", "delete_call"]


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NewCall(CamelModel):
    """A call proposed by the assistant; the caller assigns the id."""
    client_name: str
    phone_number: str
    scheduled_time: datetime
    duration: int = Field(gt=0)  # minutes
    status: CallStatus = "scheduled"
    notes: str = ""
    priority: CallPriority = "medium"
    category: str = "General"


class Call(NewCall):
    """A business call held in the caller's call list."""
    id: str


class CallUpdate(CamelModel):
    """Payload for the update_call action."""
    id: str
    status: CallStatus


class CallDelete(CamelModel):
    """Payload for the delete_call action."""
    id: str


class ChatMessage(CamelModel):
    """One entry of the chat transcript."""
    role: ChatRole
    content: str


class ChatRequest(CamelModel):
    """Request model for POST /api/chat."""
    message: str
    calls: list[Call] = Field(default_factory=list)
    chat_history: list[ChatMessage] = Field(default_factory=list)  # accepted, not used by the rules


class ChatResponse(CamelModel):
    """Response model for POST /api/chat."""
    message: str
    action: Optional[CallAction] = None
    data: Optional[dict] = None


class CallSummary(BaseModel):
    """Counts reported by the summary intent."""
    scheduled: int
    completed: int
    missed: int
    high_priority: int
    total: int
