# ==============================================================================
# Event Assembler
# ==============================================================================
"""
Build a TrackingEvent from a parsed request body, request headers and the
client metadata produced by the user-agent parser.
"""

import logging
import time
from collections.abc import Callable, Mapping
from typing import Any, Optional

from edge_collector.core.errors import MalformedInput
from edge_collector.core.flatten import flatten
from edge_collector.core.models import TrackingEvent

logger = logging.getLogger(__name__)

CLIENT_IP_HEADER = "CF-Connecting-IP"
COUNTRY_HEADER = "CF-IPCountry"
LOOPBACK_IP = "127.0.0.1"


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """
    Case-insensitive header lookup.

    Works for plain dicts as well as Starlette's Headers.
    """
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def assemble(
    body: Any,
    headers: Mapping[str, str],
    client_info: Optional[Mapping[str, Any]],
    *,
    client_ip_header: str = CLIENT_IP_HEADER,
    country_header: str = COUNTRY_HEADER,
    fallback_ip: str = LOOPBACK_IP,
    clock: Callable[[], float] = time.time,
) -> TrackingEvent:
    """
    Assemble a page-view event.

    Args:
        body: Parsed JSON request body; must be an object with a string "url"
        headers: Request headers
        client_info: Nested client metadata from the user-agent parser
        client_ip_header: Trusted proxy header carrying the client IP
        country_header: Platform header carrying the client country
        fallback_ip: IP used when the client-IP header is missing or empty
        clock: Wall-clock source returning unix seconds

    Returns:
        TrackingEvent with a timestamp truncated to whole seconds

    Raises:
        MalformedInput: If the body is not an object or lacks a string url
    """
    if not isinstance(body, Mapping):
        raise MalformedInput("Tracking payload must be a JSON object")
    url = body.get("url")
    if not isinstance(url, str):
        raise MalformedInput("Tracking payload requires a string 'url'")

    ip = get_header(headers, client_ip_header) or fallback_ip
    country = get_header(headers, country_header) or None

    event = TrackingEvent(
        url=url,
        ip=ip,
        country=country,
        timestamp=int(clock()),
        client=flatten(client_info) if client_info else {},
    )

    shadowed = event.shadowed_client_keys()
    if shadowed:
        logger.debug("Client metadata keys shadowed by reserved fields: %s", shadowed)

    return event
