# ==============================================================================
# Status Command
# ==============================================================================
"""
Reachability checks for the collector's external services.
"""

import json
from typing import Annotated

import typer

from edge_collector.cli.shared import C, status_line
from edge_collector.dispatch import get_transport
from edge_collector.infrastructure.analytics_store import AnalyticsStore
from edge_collector.utils.config import get_settings


def show_status(
    json_output: Annotated[
        bool, typer.Option("--json", "-j", help="Output as JSON for scripting")
    ] = False,
) -> None:
    """Check that the event log and analytics store are reachable.

    Exits with code 1 if any service is unreachable.
    """
    settings = get_settings()

    transport = get_transport(settings.event_log)
    store = AnalyticsStore(settings.analytics)
    try:
        event_log_ok = transport.ping()
        analytics_ok = store.ping()
    finally:
        transport.close()
        store.close()

    if settings.event_log.impl == "rest_proxy":
        event_log_target = settings.event_log.rest_proxy_url
    else:
        event_log_target = settings.event_log.bootstrap_servers

    if json_output:
        print(
            json.dumps(
                {
                    "event_log": {
                        "ok": event_log_ok,
                        "transport": transport.name,
                        "version": transport.version,
                        "target": event_log_target,
                    },
                    "analytics": {"ok": analytics_ok, "target": settings.analytics.url},
                },
                indent=2,
            )
        )
    else:
        print()
        print(f"{C.BOLD}Service Status{C.RESET}")
        print()
        print(status_line(event_log_ok, "Event log", f"{transport.version} {event_log_target}"))
        print(status_line(analytics_ok, "Analytics store", settings.analytics.url))
        print()

    if not (event_log_ok and analytics_ok):
        raise typer.Exit(1)
