"""Command line entry point for kafkaview."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from kafkaview import __version__
from kafkaview.exceptions import FetchError
from kafkaview.models.state.app_settings import AppSettings, ConfigLoadError
from kafkaview.models.state.config_manager import ConfigManager

logger = logging.getLogger(__name__)

cli = typer.Typer(add_completion=False)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Path, verbose: bool) -> None:
    """Log to a file; the TUI owns the terminal."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"kafkaview version {__version__}")
        raise typer.Exit()


@cli.command()
def run(
    records_file: Optional[Path] = typer.Option(
        None,
        "--records-file",
        "-f",
        exists=True,
        dir_okay=False,
        help="YAML file with topics, records and schemas to browse",
    ),
    topic: Optional[list[str]] = typer.Option(
        None, "--topic", "-t", help="Preselect a topic (repeatable)"
    ),
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Search to run at startup"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", dir_okay=False, help="Settings file (YAML)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """
    kafkaview - browse Kafka records from the terminal.

    [bold]Examples:[/bold]

        [cyan]kafkaview --records-file records.yaml[/cyan]

        [cyan]kafkaview -f records.yaml --topic orders --query "order-1"[/cyan]
    """
    from kafkaview.app import KafkaViewApp
    from kafkaview.controllers.records.memory_source import InMemoryRecordSource

    try:
        settings = ConfigManager.load(config)
    except ConfigLoadError:
        settings = AppSettings()
    log_file = Path(settings.log_file).expanduser() if settings.log_file else None
    configure_logging(log_file or ConfigManager.default_log_file(), verbose)
    logger.info("Starting kafkaview %s", __version__)

    source = None
    if records_file is not None:
        try:
            source = InMemoryRecordSource.from_yaml(records_file, page_size=settings.page_size)
        except FetchError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc

    KafkaViewApp(source, topics=topic or (), query=query, config_path=config).run()


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
