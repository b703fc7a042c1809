# ==============================================================================
# Infrastructure Adapters
# ==============================================================================
"""
Adapters for external services (ports-and-adapters architecture).

This module contains concrete implementations used by the HTTP layer:
- analytics_store.py - ClickHouse HTTP query client
- kafka.py - Kafka configuration and connection checks
- user_agent.py - User-Agent header parsing

Event log delivery lives in edge_collector.dispatch.
"""

from edge_collector.infrastructure.analytics_store import AnalyticsStore
from edge_collector.infrastructure.kafka import build_kafka_config, check_kafka_connection
from edge_collector.infrastructure.user_agent import parse_user_agent

__all__ = [
    "AnalyticsStore",
    "build_kafka_config",
    "check_kafka_connection",
    "parse_user_agent",
]
