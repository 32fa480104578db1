"""Mini README: Entry point CLI for the Profit Dashboard service.

Commands:
    * run - start the FastAPI application under uvicorn.
    * summary - print the monthly rollup of the configured transaction store.

Settings come from ``PROFITDASH_*`` environment variables or ``.env``;
command options override the host and port.
"""

from __future__ import annotations

import typer
import uvicorn

from profitdash.configuration import get_settings
from profitdash.ledger import TransactionStore, aggregate_monthly, build_overview
from profitdash.logging_utils import configure_root_logger, level_for_environment

cli = typer.Typer(help="Launch and inspect the Profit Dashboard service.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(level_for_environment(settings.environment))

    # Browsers cannot navigate to the wildcard bind address.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Profit Dashboard on {effective_host}:{effective_port}.\n"
        f"API available at http://{browser_host}:{effective_port}/api"
    )
    uvicorn.run(
        "profitdash.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def summary() -> None:
    """Print one line per month from the configured transaction store."""

    settings = get_settings()
    configure_root_logger(level_for_environment(settings.environment))
    snapshot = TransactionStore(settings.data_file).load()
    if not snapshot.available:
        typer.echo(f"Transaction store unavailable: {snapshot.error}", err=True)
        raise typer.Exit(code=1)

    months = aggregate_monthly(snapshot.transactions)
    if not months:
        typer.echo("No transactions recorded yet.")
        return
    for month in months:
        typer.echo(
            f"{month.month:<12} online {month.online_revenue:>10.2f}"
            f"  cash {month.cash_revenue:>10.2f}"
            f"  expenses {month.expenses:>10.2f}"
            f"  profit {month.profit:>10.2f}"
        )
    overview = build_overview(months)
    typer.echo(f"Latest margin: {overview.profit_margin:.1f}%")


if __name__ == "__main__":
    cli()
