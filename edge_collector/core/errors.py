# ==============================================================================
# Collector Errors
# ==============================================================================
"""
Exception types raised by the ingestion and query paths.

MalformedInput is mapped to a 400 response. TransportFailure (and its
UpstreamNon2xx subclass) is swallowed on the write path by the Dispatcher
and mapped to a 500 response on the read path.
"""


class CollectorError(Exception):
    """Base class for collector errors."""

    pass


class MalformedInput(CollectorError):
    """Request body is not parseable as the expected JSON shape."""

    pass


class TransportFailure(CollectorError):
    """The event log or analytical store could not be reached."""

    pass


class UpstreamNon2xx(TransportFailure):
    """An upstream HTTP service answered with a non-success status."""

    def __init__(self, service: str, status_code: int, body: str = ""):
        self.service = service
        self.status_code = status_code
        self.body = body
        super().__init__(f"{service} returned HTTP {status_code}: {body[:200]}")
