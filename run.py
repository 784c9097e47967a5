#!/usr/bin/env python3
"""
Application Entry Script.

Usage:
    python run.py --help
    python run.py --action server --reload --verbose
    python run.py --action init-db
    python run.py --action config
"""

import asyncio
import subprocess
import sys
from pathlib import Path

import click

# Ensure project root is in path for absolute imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from notekeeper.backend.core.logging import get_logger, log_with_source, setup_logging


def validate_project_root() -> Path:
    """Validate that we're running from the project root."""
    if not (PROJECT_ROOT / ".project_root").exists():
        click.echo(
            click.style("Error: .project_root not found. Run from project root.", fg="red"),
            err=True,
        )
        sys.exit(1)
    return PROJECT_ROOT


@click.command()
@click.option(
    "--action",
    type=click.Choice(["server", "init-db", "config", "info"]),
    default="info",
    help="Action to perform.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable INFO level logging.")
@click.option("--debug", "-d", is_flag=True, help="Enable DEBUG level logging.")
@click.option("--host", default=None, help="Server host (for server action).")
@click.option("--port", default=None, type=int, help="Server port (for server action).")
@click.option("--reload", is_flag=True, help="Enable auto-reload (for server action).")
def main(
    action: str,
    verbose: bool,
    debug: bool,
    host: str | None,
    port: int | None,
    reload: bool,
) -> None:
    """
    Notekeeper entry point.

    Examples:

        # Create the notes and note_transactions tables
        python run.py --action init-db --verbose

        # Start development server
        python run.py --action server --reload
    """
    validate_project_root()

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"

    setup_logging(level=log_level, format_type="console")
    logger = get_logger(__name__)

    log_with_source(logger, "cli", "debug", "Starting", action=action)

    if action == "server":
        run_server(logger, host, port, reload)
    elif action == "init-db":
        init_db(logger)
    elif action == "config":
        show_config(logger)
    else:
        show_info()


def run_server(logger, host: str | None, port: int | None, reload: bool) -> None:
    """Start the API server under uvicorn."""
    from notekeeper.backend.core.config import get_server_address

    default_host, default_port = get_server_address()
    server_host = host or default_host
    server_port = port or default_port

    log_with_source(
        logger, "cli", "info", "Starting server",
        host=server_host, port=server_port, reload=reload,
    )

    cmd = [
        sys.executable, "-m", "uvicorn",
        "notekeeper.backend.main:app",
        "--host", server_host,
        "--port", str(server_port),
    ]
    if reload:
        cmd.append("--reload")

    click.echo(f"Starting server at http://{server_host}:{server_port}")
    click.echo("Press Ctrl+C to stop\n")

    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        log_with_source(logger, "cli", "info", "Server stopped")
    except subprocess.CalledProcessError as e:
        log_with_source(logger, "cli", "error", "Server failed to start", exit_code=e.returncode)
        sys.exit(e.returncode)


def init_db(logger) -> None:
    """Create the database tables from the ORM models."""
    from notekeeper.backend.core.database import create_tables, dispose_engine

    async def _run() -> None:
        try:
            await create_tables()
        finally:
            await dispose_engine()

    try:
        asyncio.run(_run())
    except Exception as e:
        log_with_source(logger, "cli", "error", "Table creation failed", error=str(e))
        click.echo(click.style(f"Error creating tables: {e}", fg="red"))
        sys.exit(1)

    click.echo(click.style("Tables created.", fg="green"))


def show_config(logger) -> None:
    """Display loaded YAML configuration. Secrets are not shown."""
    from notekeeper.backend.core.config import get_app_config

    try:
        app_config = get_app_config()
    except (FileNotFoundError, ValueError) as e:
        log_with_source(logger, "cli", "error", "Failed to load configuration", error=str(e))
        click.echo(click.style(f"Error loading configuration: {e}", fg="red"))
        sys.exit(1)

    sections = {
        "Application": app_config.application,
        "Database": app_config.database,
        "Logging": app_config.logging,
    }
    for title, section in sections.items():
        click.echo(f"{title} Settings (from YAML):")
        click.echo("-" * 40)
        for key, value in section.model_dump().items():
            click.echo(f"  {key}: {value}")
        click.echo()


def show_info() -> None:
    """Display usage information."""
    click.echo("Notekeeper")
    click.echo("=" * 40)
    click.echo("Available Actions:")
    click.echo("  --action server   Start the API server")
    click.echo("  --action init-db  Create database tables")
    click.echo("  --action config   Display configuration")
    click.echo("  --action info     Show this information")
    click.echo()
    click.echo("Logging Options:")
    click.echo("  --verbose, -v     Enable INFO level logging")
    click.echo("  --debug, -d       Enable DEBUG level logging")


if __name__ == "__main__":
    main()
