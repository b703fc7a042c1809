# ==============================================================================
# HTTP Application
# ==============================================================================
"""
FastAPI application factory.

Run with:
    edge-collector serve
    uvicorn edge_collector.api.server:create_app --factory --port 8787
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from edge_collector.api import ingest, queries, scripts
from edge_collector.api.dependencies import UserAgentParser
from edge_collector.core.errors import MalformedInput, TransportFailure
from edge_collector.dispatch import Dispatcher, get_transport
from edge_collector.infrastructure.analytics_store import AnalyticsStore
from edge_collector.infrastructure.user_agent import parse_user_agent
from edge_collector.utils.config import Settings, get_settings
from edge_collector.utils.versions import get_collector_version

logger = logging.getLogger(__name__)

SERVICE_NAME = "edge-collector"


async def _malformed_input_handler(request: Request, exc: MalformedInput) -> PlainTextResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse("Bad Request", status_code=400)


async def _transport_failure_handler(request: Request, exc: TransportFailure) -> PlainTextResponse:
    logger.error("Query %s failed: %s", request.url.path, exc)
    return PlainTextResponse("Internal Server Error", status_code=500)


def create_app(
    settings: Optional[Settings] = None,
    dispatcher: Optional[Dispatcher] = None,
    store: Optional[AnalyticsStore] = None,
    user_agent_parser: Optional[UserAgentParser] = None,
) -> FastAPI:
    """
    Build the collector application.

    Collaborators default to the configured implementations; tests pass
    fakes instead.

    Args:
        settings: Application settings (defaults to get_settings())
        dispatcher: Event log dispatcher (defaults to the EVENT_LOG_IMPL transport)
        store: Analytical store client
        user_agent_parser: Callable turning a User-Agent header into metadata

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    dispatcher = dispatcher or Dispatcher(get_transport(settings.event_log))
    store = store or AnalyticsStore(settings.analytics)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "%s v%s started | transport %s (%s)",
            SERVICE_NAME,
            get_collector_version(),
            dispatcher.transport.name,
            dispatcher.transport.version,
        )
        yield
        dispatcher.close()
        store.close()
        logger.info("%s shutdown complete.", SERVICE_NAME)

    app = FastAPI(title=SERVICE_NAME, version=get_collector_version(), lifespan=lifespan)
    app.state.settings = settings
    app.state.dispatcher = dispatcher
    app.state.store = store
    app.state.user_agent_parser = user_agent_parser or parse_user_agent

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.collector.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MalformedInput, _malformed_input_handler)
    app.add_exception_handler(TransportFailure, _transport_failure_handler)

    @app.get("/", response_class=PlainTextResponse)
    def index() -> PlainTextResponse:
        return PlainTextResponse(f"{SERVICE_NAME} v{get_collector_version()}")

    @app.get("/health")
    def health() -> dict:
        return {"ok": True, "service": SERVICE_NAME, "version": get_collector_version()}

    app.include_router(ingest.router)
    app.include_router(queries.router)
    app.include_router(scripts.router)

    return app
