# ==============================================================================
# Collector Utilities
# ==============================================================================
"""
Shared utilities for the collector: configuration, paths, retries, versions.
"""

from edge_collector.utils.config import (
    AnalyticsStoreSettings,
    CollectorSettings,
    EventLogSettings,
    Settings,
    get_settings,
)
from edge_collector.utils.versions import get_collector_version, get_package_version

__all__ = [
    # Config
    "AnalyticsStoreSettings",
    "CollectorSettings",
    "EventLogSettings",
    "Settings",
    "get_settings",
    # Versions
    "get_collector_version",
    "get_package_version",
]
