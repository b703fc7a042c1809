# ==============================================================================
# Edge Collector CLI
# ==============================================================================
"""
Command-line interface for the edge collector.

Usage:
    edge-collector --help
    edge-collector serve
    edge-collector status
    edge-collector config show
"""

import os

import typer

# Set consistent terminal width for help output formatting
if "COLUMNS" not in os.environ:
    os.environ["COLUMNS"] = "115"

app = typer.Typer(
    name="edge-collector",
    help="Page-view and session-replay event collector",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

from edge_collector.cli.serve import serve

app.command("serve")(serve)

from edge_collector.cli.status import show_status

app.command("status")(show_status)

config_app = typer.Typer(
    help="Configuration management",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

from edge_collector.cli.config import config_show

config_app.command("show")(config_show)


if __name__ == "__main__":
    app()
