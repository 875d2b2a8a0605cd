"""CLI application for Event Publisher."""

import json
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from event_publisher.auth.gate import CredentialGate
from event_publisher.auth.store import SessionStore
from event_publisher.core.config import Config
from event_publisher.core.exceptions import (
    AuthorizationError,
    ConfigurationError,
    EventPublisherError,
    ValidationError,
)
from event_publisher.models.event import EventData
from event_publisher.models.results import PlatformResult, Status
from event_publisher.utils.datetimes import parse_datetime
from event_publisher.workflows import ConnectivityProbe, PublishOrchestrator

app = typer.Typer(
    name="event-publisher",
    help="Event Publisher - publish one event to Meetup and Eventbrite",
    no_args_is_help=True,
)

console = Console()

STATUS_STYLES = {
    Status.SUCCESS: "green",
    Status.PUBLISHED: "green",
    Status.UNPUBLISHED: "yellow",
    Status.FAILED: "red",
    Status.NOT_CONFIGURED: "dim",
}


def configure_logging(level: str) -> None:
    """Send log records through rich on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def get_config() -> Config:
    """Load configuration from the environment."""
    return Config.from_env()


def get_gate(config: Config) -> CredentialGate:
    """Build the credential gate, exiting if the admin settings are unusable."""
    try:
        return CredentialGate.from_config(config)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print("\n[yellow]Set the admin settings:[/yellow]")
        console.print("  export AUTH_SECRET='<at least 32 characters>'")
        console.print("  export AUTH_EMAIL='admin@example.com'")
        console.print("  export AUTH_PASSWORD='...'")
        raise typer.Exit(1)


def get_store(config: Config) -> SessionStore:
    return SessionStore(config.session_file)


def print_results(results: list[PlatformResult], title: str = "Results") -> None:
    """Print one row per platform."""
    table = Table(title=title)
    table.add_column("Platform", style="cyan")
    table.add_column("Status")
    table.add_column("Message", style="white")
    table.add_column("Details")

    for result in results:
        style = STATUS_STYLES.get(result.status, "white")
        details = result.event_url
        if result.needs_attention:
            warning = f"[yellow]{escape(result.error)}[/yellow]" if result.error else ""
            details = "\n".join(part for part in (result.event_url, warning) if part)
        elif result.is_failure:
            details = f"[red]{escape(result.error)}[/red]"
        elif not result.is_configured:
            details = escape(result.error)
        table.add_row(
            result.platform.title(),
            f"[{style}]{result.status.value}[/{style}]",
            result.message,
            details,
        )

    console.print(table)


def _exit_with_error(error: EventPublisherError) -> None:
    if isinstance(error, AuthorizationError):
        console.print("[red]Error:[/red] Not logged in or session expired.")
        console.print("Run [cyan]event-publisher login[/cyan] first.")
    elif isinstance(error, ValidationError):
        console.print("[red]Validation errors:[/red]")
        for message in error.errors:
            console.print(f"  - {message}")
    else:
        console.print(f"[red]Error:[/red] {error.message}")
    raise typer.Exit(1)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Event Publisher - publish one event to Meetup and Eventbrite."""
    configure_logging("DEBUG" if verbose else get_config().log_level)


@app.command("login")
def login(
    email: str = typer.Option(..., "--email", "-e", prompt=True, help="Admin email"),
    password: str = typer.Option(
        ..., "--password", prompt=True, hide_input=True, help="Admin password"
    ),
) -> None:
    """Sign in as the admin and store a session."""
    config = get_config()
    gate = get_gate(config)

    result = gate.login(email, password)
    if not result.success:
        console.print(f"[red]Error:[/red] {result.error}")
        raise typer.Exit(1)

    get_store(config).save(result.token)
    console.print(f"[green]Logged in as {email}[/green]")


@app.command("logout")
def logout() -> None:
    """Remove the stored session."""
    get_store(get_config()).clear()
    console.print("Logged out")


@app.command("status")
def session_status() -> None:
    """Show the current session."""
    config = get_config()
    gate = get_gate(config)

    session = gate.get_session(get_store(config).load())
    if session is None:
        console.print("[yellow]Not logged in[/yellow]")
        raise typer.Exit(1)

    hours = session.remaining.total_seconds() / 3600
    console.print(f"Logged in as [cyan]{session.email}[/cyan] ({hours:.1f}h remaining)")


@app.command("test-connection")
def test_connection(
    platform: Optional[str] = typer.Option(
        None, "--platform", "-p", help="Only test this platform (meetup or eventbrite)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Check the configured Meetup and Eventbrite credentials."""
    config = get_config()
    gate = get_gate(config)
    token = get_store(config).load()
    probe = ConnectivityProbe(config, gate=gate)

    try:
        if platform:
            results = [probe.test(platform, session_token=token)]
        else:
            results = probe.test_all(session_token=token)
    except EventPublisherError as e:
        _exit_with_error(e)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps([r.to_dict() for r in results], indent=2, default=str))
    else:
        print_results(results, "Connection Status")


@app.command("publish")
def publish(
    title: str = typer.Option(..., "--title", "-t", help="Event title"),
    description: str = typer.Option(..., "--description", "-d", help="Event description"),
    start: str = typer.Option(..., "--start", help="Start, ISO-8601 (e.g. 2025-01-25T18:00)"),
    end: str = typer.Option(..., "--end", help="End, ISO-8601 (e.g. 2025-01-25T20:00)"),
    venue: str = typer.Option("", "--venue", "-l", help="Venue address (omit for online events)"),
    photo: str = typer.Option("", "--photo", help="Photo reference kept with the event"),
    platforms: str = typer.Option(
        "meetup,eventbrite",
        "--platforms",
        "-p",
        help="Comma-separated platforms to publish on",
    ),
    timezone: Optional[str] = typer.Option(
        None, "--timezone", help="Timezone for --start/--end without an offset"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Publish an event to Meetup and/or Eventbrite."""
    config = get_config()
    gate = get_gate(config)
    tz_name = timezone or config.event_timezone

    try:
        event = EventData(
            title=title,
            description=description,
            start=parse_datetime(start, tz_name),
            end=parse_datetime(end, tz_name),
            venue=venue,
            photo=photo,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] Invalid date/time: {e}")
        raise typer.Exit(1)

    platform_list = [p.strip() for p in platforms.split(",") if p.strip()]
    orchestrator = PublishOrchestrator(config, gate=gate)

    try:
        result = orchestrator.publish(
            event,
            session_token=get_store(config).load(),
            platforms=platform_list,
        )
    except EventPublisherError as e:
        _exit_with_error(e)

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        print_results(result.results, "Publish Results")
        console.print(f"\n{result.summary}")

    if result.success_count == 0:
        raise typer.Exit(1)


@app.command("info")
def show_info() -> None:
    """Show supported platforms and configuration."""
    table = Table(title="Event Publisher Platforms")
    table.add_column("Platform", style="cyan")
    table.add_column("API", style="white")
    table.add_column("Credentials", style="green")

    table.add_row("Meetup", "GraphQL", "MEETUP_API_KEY, MEETUP_GROUP_URLNAME")
    table.add_row("Eventbrite", "REST v3", "EVENTBRITE_API_KEY, EVENTBRITE_ORG_ID")

    console.print(table)

    console.print(Panel(
        "AUTH_SECRET                 Session signing key (required, 32+ chars)\n"
        "AUTH_EMAIL / AUTH_PASSWORD  Admin login (required)\n"
        "EVENTPUB_REQUEST_TIMEOUT    Per-request timeout in seconds (default: 30)\n"
        "EVENTPUB_TIMEZONE           Timezone for naive times (default: America/Los_Angeles)\n"
        "EVENTPUB_LOG_LEVEL          Log level (default: INFO)",
        title="Environment Variables",
        border_style="yellow",
    ))


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from event_publisher import __version__
    console.print(f"Event Publisher v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
