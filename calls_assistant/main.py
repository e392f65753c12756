"""Main FastAPI application."""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import time

from calls_assistant.config import config
from calls_assistant.logging_config import logger
from calls_assistant.metrics import api_requests_total, api_request_duration
from calls_assistant.health import router as health_router
from calls_assistant.routers.chat import router as chat_router
from calls_assistant.routers.core import router as core_router

UNMATCHED_ENDPOINT = "unmatched"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    logger.info("application_starting", service=config.SERVICE_NAME, version=config.VERSION)
    logger.info("chat_logging", enabled=config.has_chat_logging())

    yield

    logger.info("application_shutting_down")


app = FastAPI(
    title="Business Calls Assistant API",
    description="Chat-style assistant for scheduling and tracking business calls",
    version=config.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def record_request_metrics(request: Request, call_next):
    """Count every request and time it."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - started

    # Label by route template; anything that matched no route shares one label.
    route = request.scope.get("route")
    endpoint = getattr(route, "path", None) or UNMATCHED_ENDPOINT
    api_requests_total.labels(
        method=request.method,
        endpoint=endpoint,
        status=str(response.status_code),
    ).inc()
    api_request_duration.observe(elapsed)
    return response


app.include_router(core_router)
app.include_router(chat_router)
app.include_router(health_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
