# ==============================================================================
# Config Commands
# ==============================================================================
"""
Configuration commands for the collector CLI.
"""

import json
from typing import Annotated

import typer

from edge_collector.cli.shared import C
from edge_collector.utils.config import get_settings


def config_show(
    json_output: Annotated[
        bool, typer.Option("--json", "-j", help="Output configuration as JSON")
    ] = False,
) -> None:
    """Display current configuration (includes secrets in JSON mode)."""
    settings = get_settings()
    event_log = settings.event_log
    analytics = settings.analytics
    collector = settings.collector

    if json_output:
        config = {
            "event_log": {
                "impl": event_log.impl,
                "rest_proxy_url": event_log.rest_proxy_url,
                "bootstrap_servers": [s.strip() for s in event_log.bootstrap_servers.split(",")],
                "security_protocol": event_log.security_protocol,
                "visits_topic": event_log.visits_topic,
                "recordings_topic": event_log.recordings_topic,
                "request_timeout_seconds": event_log.request_timeout_seconds,
            },
            "analytics": {
                "url": analytics.url,
                "database": analytics.database,
                "user": analytics.user,
                "password": analytics.password,
                "visits_table": analytics.visits_table,
                "recordings_table": analytics.recordings_table,
                "recordings_limit": analytics.recordings_limit,
            },
            "collector": {
                "host": collector.host,
                "port": collector.port,
                "client_ip_header": collector.client_ip_header,
                "country_header": collector.country_header,
                "fallback_ip": collector.fallback_ip,
                "public_base_url": collector.public_base_url,
                "cors_origins": collector.cors_origins,
            },
            "log_level": settings.log_level,
        }
        print(json.dumps(config, indent=2))
        return

    # Human-readable output
    print()
    print(f"{C.BOLD}Configuration{C.RESET}")
    print()

    print(f"{C.CYAN}Event Log{C.RESET}")
    print(f"  Transport:  {C.WHITE}{event_log.impl}{C.RESET}")
    if event_log.impl == "rest_proxy":
        print(f"  Proxy:      {C.WHITE}{event_log.rest_proxy_url}{C.RESET}")
    else:
        print(f"  Bootstrap:  {C.WHITE}{event_log.bootstrap_servers}{C.RESET}")
        ssl_enabled = event_log.security_protocol == "SSL"
        kafka_ssl = "mTLS (client certificates)" if ssl_enabled else "disabled"
        print(f"  SSL:        {C.WHITE}{kafka_ssl}{C.RESET}")
    print(f"  Visits:     {C.WHITE}{event_log.visits_topic}{C.RESET}")
    print(f"  Recordings: {C.WHITE}{event_log.recordings_topic}{C.RESET}")
    print()

    print(f"{C.CYAN}Analytics Store{C.RESET}")
    print(f"  URL:        {C.WHITE}{analytics.url}{C.RESET}")
    print(f"  Database:   {C.WHITE}{analytics.database}{C.RESET}")
    print(f"  User:       {C.WHITE}{analytics.user or '(none)'}{C.RESET}")
    print()

    print(f"{C.CYAN}Collector{C.RESET}")
    print(f"  Listen:     {C.WHITE}{collector.host}:{collector.port}{C.RESET}")
    print(f"  IP Header:  {C.WHITE}{collector.client_ip_header}{C.RESET}")
    print(f"  Geo Header: {C.WHITE}{collector.country_header}{C.RESET}")
    print(f"  Log Level:  {C.WHITE}{settings.log_level}{C.RESET}")
    print()
