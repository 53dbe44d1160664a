"""Mini README: Entry point CLI for the Trustless Holdings economy overlay.

This script exposes a Typer CLI with three commands: ``play`` opens the
pygame overlay host, ``serve`` starts the FastAPI economy API, and
``balance`` prints the persisted balances. Settings come from ``HOLDINGS_*``
environment variables when available.
"""

from __future__ import annotations

import typer
import uvicorn

from trustless_holdings.configuration import get_settings
from trustless_holdings.economy import EconomySession
from trustless_holdings.host import KeyBindings
from trustless_holdings.logging_utils import configure_root_logger
from trustless_holdings.overlay import format_money
from trustless_holdings.storage import BankDataStore, PersistenceError

cli = typer.Typer(help="Run and inspect the Trustless Holdings economy overlay.")


@cli.command()
def play() -> None:
    """Open the overlay window and react to the configured key bindings."""

    from trustless_holdings.host.pygame_host import PygameHost

    settings = get_settings()
    configure_root_logger()
    bindings = KeyBindings.from_mapping(settings.key_bindings)
    host = PygameHost(
        width=settings.window_width,
        height=settings.window_height,
        frames_per_second=settings.frames_per_second,
        sound_directory=settings.sound_directory,
    )
    session = EconomySession.from_settings(settings, renderer=host, sounds=host, notifier=host)
    typer.echo(f"Balances saved to {settings.save_path}. Press Z to show them, Esc to quit.")
    host.run(session, bindings)


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the economy API using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger()

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting the economy API on {effective_host}:{effective_port}.\n"
        f"Balances: http://{browser_host}:{effective_port}/balances"
    )
    uvicorn.run(
        "trustless_holdings.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def balance() -> None:
    """Print the balances stored on disk."""

    settings = get_settings()
    try:
        snapshot = BankDataStore(settings.save_path).load()
    except PersistenceError as error:
        typer.echo(f"Error loading data: {error}", err=True)
        raise typer.Exit(code=1) from error
    if snapshot is None:
        typer.echo(f"No saved balances at {settings.save_path}.")
        return
    typer.echo(f"Bank: ${format_money(snapshot.bank)}")
    typer.echo(f"Cash: ${format_money(snapshot.cash)}")


if __name__ == "__main__":
    cli()
