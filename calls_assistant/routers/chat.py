from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from calls_assistant.models import ChatRequest, ChatResponse
from calls_assistant import agent_logic
from calls_assistant.config import config
from calls_assistant.logging_config import get_logger, truncate_for_log
from calls_assistant.metrics import chat_intents_total, chat_failures_total

logger = get_logger(__name__)

router = APIRouter(tags=["Chat"])

CHAT_ERROR_MESSAGE = "An error occurred processing your request."


# POST /api/chat
# Gets: JSON body {message: str, calls?: list[Call], chatHistory?: list[ChatMessage]}
# Returns: ChatResponse {message: str, action: str | null, data?: dict}
#          500 with a generic message on any failure, including a malformed body
# Example:
#   curl -X POST http://localhost:8000/api/chat \
#     -H 'Content-Type: application/json' \
#     -d '{"message": "show my calls", "calls": [], "chatHistory": []}'
@router.post("/api/chat", response_model=ChatResponse, response_model_exclude_unset=True)
async def chat(request: Request):
    """Answer one chat message and tell the caller how to update its call list."""
    try:
        body = await request.json()
        chat_request = ChatRequest.model_validate(body)

        log_fields = {"calls": len(chat_request.calls), "history_turns": len(chat_request.chat_history)}
        if config.has_chat_logging():
            log_fields["text"] = truncate_for_log(chat_request.message)
        logger.info("chat_message_received", **log_fields)

        intent, reply, action, payload = agent_logic.decide_reply(
            message=chat_request.message,
            calls=chat_request.calls,
        )
    except Exception:
        logger.exception("chat_processing_failed")
        chat_failures_total.inc()
        return JSONResponse(
            status_code=500,
            content={"message": CHAT_ERROR_MESSAGE, "action": None},
        )

    chat_intents_total.labels(intent=intent).inc()
    logger.info("chat_intent_matched", intent=intent, action=action)

    # "data" is left unset (and so omitted) when the rule has no payload.
    fields = {"message": reply, "action": action}
    if payload is not None:
        fields["data"] = payload
    return ChatResponse(**fields)
