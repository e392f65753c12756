"""
Health check and monitoring endpoints.
"""

from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from calls_assistant.config import config
from calls_assistant.agent_logic import RULES
from calls_assistant.logging_config import logger

router = APIRouter(tags=["Health & Monitoring"])


# GET /health
# Gets: nothing
# Returns: {status, service, version}
# Example:
#   curl http://localhost:8000/health
@router.get("/health")
async def health_check():
    """
    Basic health check - returns 200 if service is running.
    Use this for basic liveness probes.
    """
    return {
        "status": "healthy",
        "service": config.SERVICE_NAME,
        "version": config.VERSION,
    }


# GET /health/ready
# Gets: nothing
# Returns: readiness checks
# Example:
#   curl http://localhost:8000/health/ready
@router.get("/health/ready")
async def readiness_check():
    """
    Readiness check.

    The service keeps no state and has no external dependencies, so it is
    ready as soon as the rule list is loaded.
    """
    checks = {
        "persistence": "not_used",
        "rules_loaded": len(RULES) > 0,
        "ready": False,
    }
    checks["ready"] = checks["rules_loaded"]
    logger.debug("readiness_check", ready=checks["ready"])
    return checks


# GET /health/info
# Gets: nothing
# Returns: service configuration summary
# Example:
#   curl http://localhost:8000/health/info
@router.get("/health/info")
async def system_info():
    """
    System information and configuration status.
    """
    return {
        "service": config.SERVICE_NAME,
        "version": config.VERSION,
        "configuration": {
            "debug_mode": config.DEBUG,
            "log_level": config.LOG_LEVEL,
            "chat_logging": config.has_chat_logging(),
            "cors_origins": config.cors_origins(),
        },
        "features": {
            "intents": [rule.intent for rule in RULES] + ["help"],
            "session_persistence": False,
            "authentication": False,
        },
    }


# GET /metrics
# Gets: nothing
# Returns: Prometheus text exposition
# Example:
#   curl http://localhost:8000/metrics
@router.get("/metrics")
async def metrics():
    """Prometheus scrape endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
