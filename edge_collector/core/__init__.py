# ==============================================================================
# Core Domain Logic
# ==============================================================================
"""
Pure domain logic with no I/O.

This module contains:
- Domain models (TrackingEvent, RecordingEvent, DispatchEnvelope)
- Metadata flattening and page-view assembly
- Collector error types

All code here is framework-agnostic and easily unit-testable.
"""

from edge_collector.core.assembler import assemble
from edge_collector.core.errors import (
    CollectorError,
    MalformedInput,
    TransportFailure,
    UpstreamNon2xx,
)
from edge_collector.core.flatten import flatten
from edge_collector.core.models import (
    RESERVED_FIELDS,
    DispatchEnvelope,
    RecordingEvent,
    TrackingEvent,
)

__all__ = [
    "assemble",
    "flatten",
    # Errors
    "CollectorError",
    "MalformedInput",
    "TransportFailure",
    "UpstreamNon2xx",
    # Models
    "RESERVED_FIELDS",
    "DispatchEnvelope",
    "RecordingEvent",
    "TrackingEvent",
]
