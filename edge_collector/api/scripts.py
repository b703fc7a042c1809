# ==============================================================================
# Client Script Endpoints
# ==============================================================================
"""
GET /js and GET /record.js: instrumentation snippets served to browsers.

/js posts the current page URL to /track. /record.js loads rrweb and streams
every replay event to /save-recording, tagged with a session id generated
when the script is served.
"""

import json
import uuid

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from edge_collector.api.dependencies import get_app_settings
from edge_collector.utils.config import Settings

router = APIRouter(tags=["scripts"])

JAVASCRIPT = "application/javascript"

TRACK_SCRIPT = """
const payload = {
  url: window.location.href
}
fetch(%(track_url)s, {
  method: 'POST',
  headers: { 'Content-Type': 'application/json' },
  body: JSON.stringify(payload)
});
"""

RECORD_SCRIPT = """
import * as rrweb from 'https://esm.run/rrweb';

if (document.title != %(admin_title)s) {
  const stopFn = rrweb.record({
    emit(event) {
      const recording = {
        id: %(session_id)s,
        page_title: document.title,
        recording: event,
        timestamp: event?.timestamp
      }
      fetch(%(save_url)s, {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify(recording)
      });
    },
  });
}
"""


def get_base_url(request: Request, settings: Settings) -> str:
    """Public base URL of the collector: configured value or request origin."""
    if settings.collector.public_base_url:
        return settings.collector.public_base_url.rstrip("/")
    url = request.url
    port = f":{url.port}" if url.port else ""
    return f"{url.scheme}://{url.hostname}{port}"


@router.get("/js")
def track_script(request: Request, settings: Settings = Depends(get_app_settings)) -> Response:
    base_url = get_base_url(request, settings)
    script = TRACK_SCRIPT % {"track_url": json.dumps(f"{base_url}/track")}
    return Response(content=script, media_type=JAVASCRIPT)


@router.get("/record.js")
def record_script(request: Request, settings: Settings = Depends(get_app_settings)) -> Response:
    base_url = get_base_url(request, settings)
    script = RECORD_SCRIPT % {
        "admin_title": json.dumps(settings.analytics.admin_page_title),
        "session_id": json.dumps(str(uuid.uuid4())),
        "save_url": json.dumps(f"{base_url}/save-recording"),
    }
    return Response(content=script, media_type=JAVASCRIPT)
