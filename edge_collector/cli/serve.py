# ==============================================================================
# Serve Command
# ==============================================================================
"""
Run the collector HTTP service with uvicorn.
"""

from typing import Annotated, Optional

import typer

from edge_collector.cli.shared import configure_logging
from edge_collector.utils.config import get_settings


def serve(
    host: Annotated[
        Optional[str], typer.Option("--host", help="Bind address (default: COLLECTOR_HOST)")
    ] = None,
    port: Annotated[
        Optional[int], typer.Option("--port", "-p", help="Bind port (default: COLLECTOR_PORT)")
    ] = None,
    reload: Annotated[
        bool, typer.Option("--reload", help="Reload on code changes (development only)")
    ] = False,
) -> None:
    """Start the collector HTTP service.

    Examples:
        edge-collector serve                 # Bind to COLLECTOR_HOST:COLLECTOR_PORT
        edge-collector serve -p 9000         # Custom port
        edge-collector serve --reload        # Development mode
    """
    import uvicorn

    settings = get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)

    uvicorn.run(
        "edge_collector.api.server:create_app",
        factory=True,
        host=host or settings.collector.host,
        port=port or settings.collector.port,
        reload=reload,
        log_config=None,
    )
