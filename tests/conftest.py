# ==============================================================================
# Shared Test Fixtures
# ==============================================================================
"""
Pytest fixtures shared across all test modules.

Provides:
- An in-memory event log transport that records envelopes
- A Dispatcher wired to that transport
- A stub user-agent parser returning fixed Chrome metadata
- A mock analytics store
- A collector app and TestClient built from those fakes
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from edge_collector.api.server import create_app
from edge_collector.dispatch import Dispatcher, EventLogTransport
from edge_collector.infrastructure.analytics_store import AnalyticsStore
from edge_collector.utils.config import AnalyticsStoreSettings, Settings

CHROME_METADATA = {
    "ua": "Mozilla/5.0 Chrome/120.0.0.0",
    "browser": {"name": "Chrome", "version": "120.0.0", "major": "120"},
    "os": {"name": "Mac OS X", "version": "10.15.7"},
    "device": {"vendor": "Apple", "model": "Mac", "type": None},
}


class RecordingTransport(EventLogTransport):
    """Transport that keeps every envelope in memory, or fails on demand."""

    def __init__(self):
        self.envelopes = []
        self.error = None
        self.closed = False

    @property
    def name(self) -> str:
        return "recording"

    @property
    def version(self) -> str:
        return "recording v0"

    def send(self, envelope) -> None:
        if self.error is not None:
            raise self.error
        self.envelopes.append(envelope)

    def ping(self) -> bool:
        return True

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def transport():
    """A fresh RecordingTransport for each test."""
    return RecordingTransport()


@pytest.fixture()
def dispatcher(transport):
    return Dispatcher(transport)


@pytest.fixture()
def user_agent_parser():
    """Stub parser: any non-empty header parses as desktop Chrome."""

    def _parse(header):
        return CHROME_METADATA if header else {}

    return _parse


@pytest.fixture()
def settings():
    return Settings()


@pytest.fixture()
def store():
    """A mock AnalyticsStore with real default settings."""
    store = MagicMock(spec=AnalyticsStore)
    store.settings = AnalyticsStoreSettings()
    return store


@pytest.fixture()
def app(settings, dispatcher, store, user_agent_parser):
    return create_app(
        settings=settings,
        dispatcher=dispatcher,
        store=store,
        user_agent_parser=user_agent_parser,
    )


@pytest.fixture()
def client(app):
    """TestClient; background tasks have run by the time a call returns."""
    return TestClient(app)
