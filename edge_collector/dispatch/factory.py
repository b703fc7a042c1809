# ==============================================================================
# Transport Factory
# ==============================================================================
"""
Factory function for getting the active event log transport.

The transport is selected based on the EVENT_LOG_IMPL environment variable.
"""

from typing import Optional

from edge_collector.dispatch.base import EventLogTransport
from edge_collector.utils.config import EventLogSettings


def get_transport(settings: Optional[EventLogSettings] = None) -> EventLogTransport:
    """
    Get the transport instance based on EVENT_LOG_IMPL setting.

    - "rest_proxy" (default): HTTP POST to a Kafka REST proxy
    - "kafka_python": Native producer using the kafka-python library

    Returns:
        EventLogTransport: The transport instance

    Raises:
        ValueError: If an unknown transport is specified

    Example:
        >>> from edge_collector.dispatch import get_transport
        >>> transport = get_transport()
        >>> print(transport.name)
        'rest-proxy'
    """
    if settings is None:
        from edge_collector.utils.config import get_settings

        settings = get_settings().event_log

    match settings.impl:
        case "rest_proxy":
            from edge_collector.dispatch.rest_proxy import RestProxyTransport

            return RestProxyTransport(settings)
        case "kafka_python":
            from edge_collector.dispatch.kafka_python import KafkaPythonTransport

            return KafkaPythonTransport(settings)
        case _:
            raise ValueError(
                f"Unknown transport: '{settings.impl}'.\n"
                "Valid options are: rest_proxy, kafka_python"
            )
