# ==============================================================================
# Query Endpoints
# ==============================================================================
"""
Read-only aggregate queries against the analytical store.

Handlers are plain (sync) functions so that blocking HTTP calls to the store
run in Starlette's threadpool. Store failures propagate as TransportFailure
and are turned into a generic 500 by the app-level exception handler.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from edge_collector.api.dependencies import get_store
from edge_collector.infrastructure.analytics_store import AnalyticsStore

router = APIRouter(tags=["queries"])


def totals_sql(visits_table: str) -> str:
    return f"""
    SELECT ip, COUNT() AS total
    FROM {visits_table}
    GROUP BY ip
    """


def recordings_sql(recordings_table: str, limit: int) -> str:
    return f"""
    SELECT
      id,
      page_title,
      max(timestamp) AS latest_timestamp
    FROM {recordings_table}
    WHERE page_title != {{admin_title:String}}
    GROUP BY id, page_title
    ORDER BY latest_timestamp DESC
    LIMIT {int(limit)}
    """


def recording_sql(recordings_table: str) -> str:
    return f"""
    SELECT *
    FROM {recordings_table}
    WHERE id = {{id:String}}
    ORDER BY timestamp DESC
    """


@router.get("/totals", response_class=PlainTextResponse)
def totals(store: AnalyticsStore = Depends(get_store)) -> PlainTextResponse:
    """Page views per client IP, as returned by the store."""
    sql = totals_sql(store.settings.visits_table)
    return PlainTextResponse(store.query_text(sql))


@router.get("/recordings")
def list_recordings(store: AnalyticsStore = Depends(get_store)) -> JSONResponse:
    """Most recent recording sessions, newest first."""
    settings = store.settings
    sql = recordings_sql(settings.recordings_table, settings.recordings_limit)
    rows = store.query_rows(sql, {"admin_title": settings.admin_page_title})
    return JSONResponse(rows)


@router.get("/recordings/{recording_id}")
def get_recording(recording_id: str, store: AnalyticsStore = Depends(get_store)) -> JSONResponse:
    """All stored events of one recording session."""
    sql = recording_sql(store.settings.recordings_table)
    return JSONResponse(store.query_rows(sql, {"id": recording_id}))
