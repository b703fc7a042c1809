# ==============================================================================
# Ingestion Endpoints
# ==============================================================================
"""
POST /track and POST /save-recording.

Both handlers acknowledge immediately and leave delivery to a background
task. Starlette runs background tasks after the response has been sent and
keeps the request cycle (and, on graceful shutdown, the server) alive until
they finish. A slow event log therefore never delays the client.
"""

import json
from typing import Any

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import PlainTextResponse

from edge_collector.api.dependencies import (
    UserAgentParser,
    get_app_settings,
    get_dispatcher,
    get_user_agent_parser,
)
from edge_collector.core.assembler import assemble
from edge_collector.core.errors import MalformedInput
from edge_collector.core.models import RecordingEvent
from edge_collector.dispatch import Dispatcher
from edge_collector.utils.config import Settings


router = APIRouter(tags=["ingest"])


async def read_json(request: Request) -> Any:
    """
    Parse the request body as JSON.

    Raises:
        MalformedInput: If the body is empty or not valid JSON
    """
    raw = await request.body()
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedInput(f"Request body is not valid JSON: {e}") from e


@router.post("/track", response_class=PlainTextResponse)
async def track(
    request: Request,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(get_app_settings),
    dispatcher: Dispatcher = Depends(get_dispatcher),
    parse_user_agent: UserAgentParser = Depends(get_user_agent_parser),
) -> PlainTextResponse:
    """Record a page view."""
    body = await read_json(request)
    collector = settings.collector

    event = assemble(
        body,
        request.headers,
        parse_user_agent(request.headers.get("user-agent")),
        client_ip_header=collector.client_ip_header,
        country_header=collector.country_header,
        fallback_ip=collector.fallback_ip,
    )

    background_tasks.add_task(
        dispatcher.dispatch, event.to_event_log_message(), settings.event_log.visits_topic
    )
    return PlainTextResponse("Ok")


@router.post("/save-recording", response_class=PlainTextResponse)
async def save_recording(
    request: Request,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(get_app_settings),
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> PlainTextResponse:
    """Record one session-replay event."""
    body = await read_json(request)
    if not isinstance(body, dict):
        raise MalformedInput("Recording payload must be a JSON object")
    recording = RecordingEvent.model_validate(body)

    background_tasks.add_task(
        dispatcher.dispatch, recording.to_event_log_message(), settings.event_log.recordings_topic
    )
    return PlainTextResponse("ok")
