# ==============================================================================
# Application Configuration
# ==============================================================================
"""
Configuration management using pydantic-settings.

All configuration is loaded from environment variables, with support for
.env files via python-dotenv.
"""

from functools import lru_cache
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file before any settings are instantiated
load_dotenv()


class EventLogSettings(BaseSettings):
    """Event log (Kafka-compatible broker) settings.

    Events are delivered either through the broker's HTTP REST proxy
    (default, e.g. Redpanda's pandaproxy on port 8082) or directly with
    kafka-python.
    """

    model_config = SettingsConfigDict(env_prefix="EVENT_LOG_")

    impl: Literal["rest_proxy", "kafka_python"] = Field(
        default="rest_proxy",
        description="Transport implementation (rest_proxy, kafka_python)",
    )
    rest_proxy_url: str = Field(
        default="http://localhost:8082", description="Base URL of the Kafka REST proxy"
    )
    request_timeout_seconds: float = Field(
        default=10.0, description="Timeout for a single delivery request"
    )

    # Native Kafka connection (kafka_python transport only)
    bootstrap_servers: str = Field(default="localhost:9092", description="Kafka bootstrap servers")
    security_protocol: str = Field(
        default="PLAINTEXT", description="Security protocol (PLAINTEXT or SSL)"
    )
    ssl_ca_file: Optional[str] = Field(default=None, description="Path to CA certificate file")
    ssl_cert_file: Optional[str] = Field(
        default=None, description="Path to client certificate file"
    )
    ssl_key_file: Optional[str] = Field(default=None, description="Path to client private key file")

    # Topic configuration
    visits_topic: str = Field(default="website_visits", description="Page-view topic name")
    recordings_topic: str = Field(
        default="session_recordings", description="Session recording topic name"
    )


class AnalyticsStoreSettings(BaseSettings):
    """Analytical store (ClickHouse HTTP interface) settings."""

    model_config = SettingsConfigDict(env_prefix="ANALYTICS_")

    url: str = Field(default="http://localhost:8123", description="ClickHouse HTTP endpoint")
    database: str = Field(default="analytics", description="Default database")
    user: Optional[str] = Field(default=None, description="ClickHouse username")
    password: Optional[str] = Field(default=None, description="ClickHouse password")
    timeout_seconds: float = Field(default=10.0, description="Query timeout in seconds")

    # Query targets
    visits_table: str = Field(default="analytics.web", description="Page-view table")
    recordings_table: str = Field(
        default="analytics.recordings", description="Session recording table"
    )
    recordings_limit: int = Field(default=50, description="Max sessions listed by /recordings")
    admin_page_title: str = Field(
        default="Admin", description="Page title excluded from recording and listings"
    )

    @property
    def auth(self) -> tuple[str, str] | None:
        """Basic auth tuple for requests, if a user is configured."""
        if self.user:
            return (self.user, self.password or "")
        return None


class CollectorSettings(BaseSettings):
    """HTTP collector settings."""

    model_config = SettingsConfigDict(env_prefix="COLLECTOR_")

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8787, description="Bind port")

    # Request enrichment
    client_ip_header: str = Field(
        default="CF-Connecting-IP", description="Trusted proxy header carrying the client IP"
    )
    country_header: str = Field(
        default="CF-IPCountry", description="Platform header carrying the client country"
    )
    fallback_ip: str = Field(
        default="127.0.0.1", description="IP recorded when the client-IP header is absent"
    )

    # Script generation
    public_base_url: Optional[str] = Field(
        default=None, description="Base URL embedded in /js and /record.js (defaults to request)"
    )
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        extra="ignore",
    )

    # Nested settings
    event_log: EventLogSettings = Field(default_factory=EventLogSettings)
    analytics: AnalyticsStoreSettings = Field(default_factory=AnalyticsStoreSettings)
    collector: CollectorSettings = Field(default_factory=CollectorSettings)

    # General settings
    debug: bool = Field(default=False, description="Force DEBUG logging for serve")
    log_level: str = Field(default="INFO", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once and cached for subsequent calls.
    """
    return Settings()
