# ==============================================================================
# User-Agent Parsing
# ==============================================================================
"""
Turn a raw User-Agent header into a nested client-metadata tree.

Uses the user-agents library (backed by ua-parser). The tree has the shape:

    {
        "ua": "<raw header>",
        "browser": {"name": ..., "version": ..., "major": ...},
        "os": {"name": ..., "version": ...},
        "device": {"vendor": ..., "model": ..., "type": ...},
    }

Unknown values are None. A missing or unparseable header yields {}.
"""

import logging
from typing import Any, Optional

from user_agents import parse

logger = logging.getLogger(__name__)

# ua-parser reports unrecognised families as "Other"
_UNKNOWN_FAMILY = "Other"


def _known(value: Optional[str]) -> Optional[str]:
    """Map empty or "Other" values to None."""
    if not value or value == _UNKNOWN_FAMILY:
        return None
    return value


def _device_type(user_agent) -> Optional[str]:
    if user_agent.is_tablet:
        return "tablet"
    if user_agent.is_mobile:
        return "mobile"
    if user_agent.is_bot:
        return "bot"
    return None


def parse_user_agent(header: Optional[str]) -> dict[str, Any]:
    """
    Parse a User-Agent header into client metadata.

    Args:
        header: Raw User-Agent header value (may be None)

    Returns:
        Nested metadata tree, or {} if the header is missing or unparseable
    """
    if not header:
        return {}

    try:
        user_agent = parse(header)
    except Exception as e:
        logger.debug("Could not parse user agent %r: %s", header, e)
        return {}

    browser_version = user_agent.browser.version
    return {
        "ua": header,
        "browser": {
            "name": _known(user_agent.browser.family),
            "version": user_agent.browser.version_string or None,
            "major": str(browser_version[0]) if browser_version else None,
        },
        "os": {
            "name": _known(user_agent.os.family),
            "version": user_agent.os.version_string or None,
        },
        "device": {
            "vendor": user_agent.device.brand,
            "model": user_agent.device.model,
            "type": _device_type(user_agent),
        },
    }
