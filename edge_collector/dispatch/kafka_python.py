# ==============================================================================
# kafka-python Transport
# ==============================================================================
"""
Transport implementation using kafka-python.

Publishes directly to the brokers instead of going through a REST proxy.
The producer is created lazily on first send so that an unreachable broker
never blocks application startup.
"""

import logging
import threading

from edge_collector.core.errors import TransportFailure
from edge_collector.core.models import DispatchEnvelope
from edge_collector.dispatch.base import EventLogTransport
from edge_collector.infrastructure.kafka import build_kafka_config, check_kafka_connection
from edge_collector.utils.config import EventLogSettings
from edge_collector.utils.versions import get_package_version

logger = logging.getLogger(__name__)


class KafkaPythonTransport(EventLogTransport):
    """
    Transport implementation using kafka-python's KafkaProducer.

    send() waits for the broker acknowledgment; it runs on a background
    task, so the wait never reaches the client response.
    """

    def __init__(self, settings: EventLogSettings):
        self._settings = settings
        self._producer = None
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "kafka-python"

    @property
    def version(self) -> str:
        return f"kafka-python v{get_package_version('kafka-python')}"

    def _get_producer(self):
        producer = self._producer
        if producer is not None:
            return producer

        from kafka import KafkaProducer

        # Bootstrap can block on unreachable brokers; keep it outside the lock
        created = KafkaProducer(**build_kafka_config(self._settings, include_serializers=True))
        with self._lock:
            if self._producer is None:
                self._producer = created
                return created
            producer = self._producer
        created.close()
        return producer

    def send(self, envelope: DispatchEnvelope) -> None:
        from kafka.errors import KafkaError

        try:
            future = self._get_producer().send(
                envelope.topic,
                value=envelope.value,
                partition=envelope.partition,
            )
            future.get(timeout=self._settings.request_timeout_seconds)
        except KafkaError as e:
            raise TransportFailure(f"Kafka delivery to {envelope.topic} failed: {e}") from e

    def ping(self) -> bool:
        return check_kafka_connection(self._settings)

    def close(self) -> None:
        with self._lock:
            if self._producer is not None:
                self._producer.flush()
                self._producer.close()
                self._producer = None
