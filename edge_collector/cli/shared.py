# ==============================================================================
# Shared Utilities for CLI Commands
# ==============================================================================
"""
Shared constants and helpers used across CLI command modules.

This module provides:
- ANSI color codes and status icons
- Logging setup for long-running commands
"""

import logging


# ==============================================================================
# ANSI Colors and Icons
# ==============================================================================


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    CYAN = "\033[36m"
    WHITE = "\033[37m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"


class Icons:
    """Status icons using Unicode symbols."""

    CHECK = "✓"
    CROSS = "✗"


# Module-level aliases for convenience
C, I = Colors, Icons


# ==============================================================================
# Logging
# ==============================================================================

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    """
    Configure root logging for the collector process.

    Args:
        level: Logging level name (e.g., "INFO", "DEBUG")
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)

    # Suppress noisy third-party loggers
    logging.getLogger("kafka").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def status_line(ok: bool, label: str, detail: str) -> str:
    """Format one check result line."""
    if ok:
        return f"  {C.BRIGHT_GREEN}{I.CHECK}{C.RESET} {label:<16}{C.DIM}{detail}{C.RESET}"
    return f"  {C.BRIGHT_RED}{I.CROSS}{C.RESET} {label:<16}{C.DIM}{detail}{C.RESET}"
