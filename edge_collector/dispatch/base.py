# ==============================================================================
# Event Log Transport Base Class
# ==============================================================================
"""
Abstract base class for event log transports.

Transports deliver one DispatchEnvelope to the event log. Available
implementations:
- rest_proxy: HTTP POST to a Kafka REST proxy (requests)
- kafka_python: Native Kafka producer (kafka-python)

Transports raise TransportFailure on delivery errors. Swallowing those
errors is the Dispatcher's job, not the transport's.
"""

from abc import ABC, abstractmethod

from edge_collector.core.models import DispatchEnvelope


class EventLogTransport(ABC):
    """
    Abstract base for event log transport implementations.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable transport name.

        Examples:
            'rest-proxy'
            'kafka-python'
        """
        pass

    @property
    @abstractmethod
    def version(self) -> str:
        """
        Return version string for the transport implementation.

        Format: "{package} v{version}"
        Example: "requests v2.32.3" or "kafka-python v2.0.2"
        """
        pass

    @abstractmethod
    def send(self, envelope: DispatchEnvelope) -> None:
        """
        Deliver one envelope to the event log.

        Args:
            envelope: Topic-addressed record

        Raises:
            TransportFailure: If the record could not be delivered
        """
        pass

    @abstractmethod
    def ping(self) -> bool:
        """Return True if the event log is reachable."""
        pass

    def close(self) -> None:
        """Release connections. Default is a no-op."""
        pass
