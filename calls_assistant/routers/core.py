from fastapi import APIRouter

from calls_assistant.config import config

router = APIRouter(tags=["Core"])


# GET /
# Gets: nothing
# Returns: basic API metadata and a map of key endpoints
# Example:
#   curl http://localhost:8000/
@router.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Business Calls Assistant API",
        "version": config.VERSION,
        "description": "Chat-style assistant that schedules, lists, summarizes and completes business calls",
        "endpoints": {
            "chat": "/api/chat",
            "health": "/health",
            "health_ready": "/health/ready",
            "health_info": "/health/info",
            "metrics": "/metrics",
        },
        "features": [
            "Schedule calls from a chat message",
            "List upcoming calls",
            "High priority call filter",
            "Call summaries",
            "Mark calls as completed",
        ],
    }
