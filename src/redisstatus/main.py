import asyncio
import logging
import typer
from typing import Optional
from pathlib import Path
from .config import AppConfig, RedisServerConfig
from .connectors.factory import get_client
from .exceptions import RedisStatusException
from .inspector import StatusChecker

app = typer.Typer(help="Redis Health Probe")

@app.callback()
def main():
    """
    Reports whether a Redis server is responsive and within its memory budget.
    """

@app.command()
def check(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to configuration file"),
    server: Optional[str] = typer.Option(None, "--server", "-s", help="Server name in the configuration file"),
    url: Optional[str] = typer.Option(None, "--url", help="Redis URL (e.g., 'redis://localhost:6379/0')"),
    name: Optional[str] = typer.Option(None, "--name", help="Display name, defaults to 'Redis' (only with --url)"),
    memory_threshold: Optional[float] = typer.Option(None, "--memory-threshold", min=0, help="Maximum healthy used_memory in bytes (only with --url)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """
    Runs a single status check: PING, then INFO memory when a threshold is set.
    Exits with code 1 if the server is unhealthy.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if config:
            if url or name is not None or memory_threshold is not None:
                typer.echo("Error: --url, --name and --memory-threshold cannot be combined with --config", err=True)
                raise typer.Exit(code=1)
            if not server:
                typer.echo("Error: --server is required when using --config", err=True)
                raise typer.Exit(code=1)
            server_config = AppConfig.from_yaml(config).get_server_config(server)
        elif url:
            server_config = RedisServerConfig(name=name or "Redis", url=url, memory_threshold=memory_threshold)
        else:
            typer.echo("Error: Either --config or --url must be provided", err=True)
            raise typer.Exit(code=1)

        client = get_client(server_config)
    except RedisStatusException as e:
        typer.secho(f"❌ Error loading config: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Checking {server_config.name} ({server_config.url})...")
    checker = StatusChecker.from_config(client, server_config)
    report = asyncio.run(checker.check())

    if report.healthy:
        typer.secho(f"✅ {report.name}: healthy ({report.latency_ms}ms)", fg=typer.colors.GREEN)
        if verbose and report.used_memory is not None:
            typer.echo(f"   used_memory: {report.used_memory} / {report.memory_threshold} bytes")
    else:
        typer.secho(f"❌ {report.reason}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

if __name__ == "__main__":
    app()
