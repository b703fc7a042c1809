# ==============================================================================
# Event Log Dispatch
# ==============================================================================
"""
Delivery of collected events to the event log.

- base.py - EventLogTransport abstract base
- rest_proxy.py - Kafka REST proxy transport (default)
- kafka_python.py - Native Kafka transport
- factory.py - Transport selection from EVENT_LOG_IMPL
- dispatcher.py - Fire-and-forget Dispatcher used by the ingestion handlers
"""

from edge_collector.dispatch.base import EventLogTransport
from edge_collector.dispatch.dispatcher import Dispatcher
from edge_collector.dispatch.factory import get_transport

__all__ = [
    "Dispatcher",
    "EventLogTransport",
    "get_transport",
]
