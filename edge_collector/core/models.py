# ==============================================================================
# Collector Domain Models
# ==============================================================================
"""
Pydantic models for collected events and the event log envelope.

These models are used for:
- Assembling page-view records from request data
- Carrying session recordings through unchanged
- Building the wire body sent to the event log

This module is part of the core domain layer and has no external dependencies
beyond Pydantic.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

# Field names owned by the collector; flattened client metadata never overrides them
RESERVED_FIELDS = ("url", "ip", "country", "timestamp")


class TrackingEvent(BaseModel):
    """
    A single page view, enriched with request metadata.

    Attributes:
        url: Page URL reported by the client
        ip: Client IP address (loopback when the proxy header is absent)
        country: Country code from the platform geo header, if present
        timestamp: Unix timestamp in seconds, assigned at assembly time
        client: Flattened user-agent metadata (browser_name, os_version, ...)
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Page URL")
    ip: str = Field(..., description="Client IP address")
    country: Optional[str] = Field(None, description="Client country code")
    timestamp: int = Field(..., description="Unix timestamp in seconds")
    client: dict[str, Any] = Field(
        default_factory=dict, description="Flattened client metadata"
    )

    def shadowed_client_keys(self) -> list[str]:
        """Metadata keys dropped because they collide with a reserved field."""
        return [key for key in self.client if key in RESERVED_FIELDS]

    def to_event_log_message(self) -> dict:
        """
        Serialize the event as one flat record.

        Key order is url, ip, country, client metadata, timestamp. Reserved
        fields always win over metadata keys of the same name. Country is
        omitted when unknown.
        """
        message: dict[str, Any] = {"url": self.url, "ip": self.ip}
        if self.country is not None:
            message["country"] = self.country
        for key, value in self.client.items():
            if key not in RESERVED_FIELDS:
                message[key] = value
        message["timestamp"] = self.timestamp
        return message


class RecordingEvent(BaseModel):
    """
    A session-replay event emitted by the recorder script.

    No field is required and no value is coerced or checked; unknown fields
    are kept. The recording payload is opaque and never inspected.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: Any = Field(None, description="Recording session identifier")
    page_title: Any = Field(None, description="Title of the recorded page")
    recording: Any = Field(None, description="Opaque replay payload")
    timestamp: Any = Field(None, description="Client event timestamp")

    def to_event_log_message(self) -> dict:
        """Serialize exactly the fields the client sent."""
        message = {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name in self.model_fields_set
        }
        message.update(self.model_extra or {})
        return message


class DispatchEnvelope(BaseModel):
    """
    One record addressed to one event log topic.

    The wire body follows the Kafka REST proxy v2 JSON format.
    """

    model_config = ConfigDict(frozen=True)

    topic: str = Field(..., description="Destination topic")
    value: dict[str, Any] = Field(..., description="Record value")
    partition: int = Field(0, description="Destination partition")

    def to_wire(self) -> dict:
        """Build the REST proxy request body."""
        return {"records": [{"value": self.value, "partition": self.partition}]}
