"""Command-line interface for mpris2mqtt."""

import typer
from rich.console import Console
from rich.table import Table

from .config.settings import Settings
from .core.player import MprisPlayerSource
from .core.publisher import build_facts
from .errors import HostResolutionError, Mpris2MqttError, PlayerError
from .service import Mpris2MqttService
from .utils.logger import setup_logger
from .utils.platform import get_hostname

app = typer.Typer(help="Publish MPRIS now-playing information to MQTT")
console = Console()


@app.command()
def start():
    """Start the bridge service."""
    console.print("[cyan]Starting mpris2mqtt service...[/cyan]")

    try:
        service = Mpris2MqttService()
        service.start()
    except Mpris2MqttError:
        # Already logged by the service
        raise typer.Exit(1)


@app.command(name="now-playing")
def now_playing():
    """Show what would be published for the active player."""
    settings = Settings.from_env()
    logger = setup_logger(level=settings.logging.level)
    source = MprisPlayerSource(logger)

    try:
        snapshot = source.get_snapshot()
    except PlayerError as e:
        console.print(f"[red]{type(e).__name__}: {e}[/red]")
        raise typer.Exit(1)

    try:
        hostname = get_hostname()
    except HostResolutionError as e:
        console.print(f"[yellow]Warning: {e}[/yellow]")
        hostname = None

    table = Table(title=f"Now Playing ({snapshot.player or 'unknown player'})")
    table.add_column("Topic", style="cyan")
    table.add_column("Value", style="green")

    for fact in build_facts(snapshot, hostname):
        table.add_row(fact.topic.value, fact.value)

    console.print(table)


if __name__ == "__main__":
    app()
