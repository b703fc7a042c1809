# ==============================================================================
# Kafka Infrastructure
# ==============================================================================
"""
Kafka client configuration and connection checks for the native
(kafka_python) event log transport.

Supports both PLAINTEXT (local Docker) and SSL (mTLS) security protocols.
"""

import logging
from typing import TYPE_CHECKING

from edge_collector.utils.config import get_settings
from edge_collector.utils.paths import resolve_project_path

if TYPE_CHECKING:
    from edge_collector.utils.config import EventLogSettings

logger = logging.getLogger(__name__)


def build_kafka_config(
    settings: "EventLogSettings | None" = None,
    include_serializers: bool = False,
    request_timeout_ms: int | None = None,
) -> dict:
    """
    Build Kafka client configuration from settings.

    Args:
        settings: EventLogSettings instance. If None, loads from get_settings().
        include_serializers: If True, add a JSON value serializer (for producer)
        request_timeout_ms: Optional request timeout in milliseconds

    Returns:
        Dict with Kafka client configuration
    """
    if settings is None:
        settings = get_settings().event_log

    config: dict = {
        "bootstrap_servers": settings.bootstrap_servers,
        "security_protocol": settings.security_protocol,
        "reconnect_backoff_ms": 1000,
        "reconnect_backoff_max_ms": 32000,
        "request_timeout_ms": request_timeout_ms
        or int(settings.request_timeout_seconds * 1000),
    }

    # Add SSL config if using SSL protocol
    if settings.security_protocol == "SSL":
        for option, configured in (
            ("ssl_cafile", settings.ssl_ca_file),
            ("ssl_certfile", settings.ssl_cert_file),
            ("ssl_keyfile", settings.ssl_key_file),
        ):
            if not configured:
                continue
            path = resolve_project_path(configured)
            if path.exists():
                config[option] = str(path)
            else:
                logger.warning("Kafka %s not found: %s", option, path)

    if include_serializers:
        import json

        config["value_serializer"] = lambda v: json.dumps(v).encode("utf-8")

    return config


def check_kafka_connection(settings: "EventLogSettings | None" = None) -> bool:
    """
    Check if Kafka is reachable.

    Returns:
        True if Kafka responds to list_topics(), False otherwise
    """
    from kafka import KafkaAdminClient

    try:
        admin_client = KafkaAdminClient(**build_kafka_config(settings, request_timeout_ms=10000))
        admin_client.list_topics()
        admin_client.close()
        return True
    except Exception as e:
        logger.debug("Kafka connection check failed: %s", e)
        return False
