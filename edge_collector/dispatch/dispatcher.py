# ==============================================================================
# Dispatcher
# ==============================================================================
"""
Fire-and-forget delivery of event records to the event log.

Dispatcher.dispatch() is scheduled as a background task by the ingestion
handlers. It never raises: delivery failures are logged and dropped so that
ingestion availability does not depend on the event log.
"""

import logging
from typing import Any

from edge_collector.core.models import DispatchEnvelope
from edge_collector.dispatch.base import EventLogTransport

logger = logging.getLogger(__name__)


class Dispatcher:
    """Wrap records in envelopes and hand them to a transport."""

    def __init__(self, transport: EventLogTransport):
        self._transport = transport

    @property
    def transport(self) -> EventLogTransport:
        return self._transport

    def dispatch(self, record: dict[str, Any], topic: str) -> None:
        """
        Deliver one record to a topic, swallowing any failure.

        Args:
            record: Flat event record
            topic: Destination topic
        """
        envelope = DispatchEnvelope(topic=topic, value=record)
        try:
            self._transport.send(envelope)
        except Exception as e:
            logger.warning("Dispatch to topic %s via %s failed: %s", topic, self._transport.name, e)
            return
        logger.debug("Dispatched record to topic %s", topic)

    def close(self) -> None:
        self._transport.close()
