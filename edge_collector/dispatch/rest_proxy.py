# ==============================================================================
# Kafka REST Proxy Transport
# ==============================================================================
"""
Transport implementation using a Kafka REST proxy (e.g. Redpanda's
pandaproxy or Confluent REST Proxy).

Each envelope becomes one request:

    POST {rest_proxy_url}/topics/{topic}
    Content-Type: application/vnd.kafka.json.v2+json

    {"records": [{"value": {...}, "partition": 0}]}
"""

import logging
from typing import Optional

import requests

from edge_collector.core.errors import TransportFailure, UpstreamNon2xx
from edge_collector.core.models import DispatchEnvelope
from edge_collector.dispatch.base import EventLogTransport
from edge_collector.utils.config import EventLogSettings
from edge_collector.utils.versions import get_package_version

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/vnd.kafka.json.v2+json"
SERVICE_NAME = "event log"


class RestProxyTransport(EventLogTransport):
    """
    Transport implementation posting JSON records to a Kafka REST proxy.

    One requests.Session is shared by all requests; it is safe to call send()
    from Starlette's threadpool.
    """

    def __init__(
        self,
        settings: EventLogSettings,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = settings.rest_proxy_url.rstrip("/")
        self._timeout = settings.request_timeout_seconds
        self._session = session or requests.Session()

    @property
    def name(self) -> str:
        return "rest-proxy"

    @property
    def version(self) -> str:
        return f"requests v{get_package_version('requests')}"

    def topic_url(self, topic: str) -> str:
        return f"{self._base_url}/topics/{topic}"

    def send(self, envelope: DispatchEnvelope) -> None:
        try:
            response = self._session.post(
                self.topic_url(envelope.topic),
                json=envelope.to_wire(),
                headers={"Content-Type": CONTENT_TYPE},
                timeout=self._timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportFailure(f"{SERVICE_NAME} unreachable: {e}") from e

        if not response.ok:
            raise UpstreamNon2xx(SERVICE_NAME, response.status_code, response.text)

    def ping(self) -> bool:
        try:
            response = self._session.get(f"{self._base_url}/topics", timeout=self._timeout)
            return response.ok
        except requests.exceptions.RequestException as e:
            logger.debug("REST proxy ping failed: %s", e)
            return False

    def close(self) -> None:
        self._session.close()
