# ==============================================================================
# Request Dependencies
# ==============================================================================
"""
FastAPI dependencies resolving the collaborators stored on app.state by
create_app().
"""

from collections.abc import Callable
from typing import Any, Optional

from fastapi import Request

from edge_collector.dispatch import Dispatcher
from edge_collector.infrastructure.analytics_store import AnalyticsStore
from edge_collector.utils.config import Settings

UserAgentParser = Callable[[Optional[str]], dict[str, Any]]


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_dispatcher(request: Request) -> Dispatcher:
    return request.app.state.dispatcher


def get_store(request: Request) -> AnalyticsStore:
    return request.app.state.store


def get_user_agent_parser(request: Request) -> UserAgentParser:
    return request.app.state.user_agent_parser
