"""Main CLI entry point."""

import sys
from contextlib import ExitStack
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, List, Optional

import click
from rich.console import Console

from .. import __version__
from ..config import Config, ConfigManager
from ..core.interfaces import IReportSink, IStatsOrchestrator
from ..core.models import RunSummary
from ..core.services import ConsoleTableSink, CsvReportSink, PathMatcher
from ..infrastructure import Container, setup_logging
from ..utils import ConfigurationError, MediaStatsError, build_csv_path, format_elapsed

LOOKING_GLASS = "🔍 "
MOVIE = "🎬 "
SPARKLE = "✨ "


@click.command()
@click.option("--base", "-b", required=True, help="The base folder to search in")
@click.option(
    "--pattern", "-p", required=True, help="The file pattern to search for inside the base folder"
)
@click.option(
    "--csv",
    "-c",
    "write_csv",
    is_flag=True,
    default=False,
    help="Write output to a .csv file in the current directory",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the CSV report (defaults to the current directory)",
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--skip-missing-dimensions",
    is_flag=True,
    help="Skip files without a width or height instead of aborting",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="media-stats")
def cli(
    base: str,
    pattern: str,
    write_csv: bool,
    output_dir: Optional[Path],
    config: Optional[Path],
    skip_missing_dimensions: bool,
    verbose: bool,
) -> None:
    """Media stats - report resolution, duration, codec and languages of media files."""
    started_at = datetime.now()

    try:
        config_manager = ConfigManager(config)
        app_config = config_manager.load_config()

        if verbose:
            app_config.logging.level = "DEBUG"
        if skip_missing_dimensions:
            app_config.processing.skip_missing_dimensions = True
        setup_logging(app_config.logging)

        container = Container(config_manager)
        container.configure_default_services()

        # Malformed globs are rejected here, before any traversal
        matcher = PathMatcher(base, pattern)

    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    try:
        orchestrator = container.get(IStatsOrchestrator)  # type: ignore

        errors = orchestrator.validate_prerequisites()
        if errors:
            for error in errors:
                click.echo(f"✗ {error}", err=True)
            raise MediaStatsError("Prerequisites not met")

        csv_path = None
        if write_csv:
            csv_path = _csv_report_path(app_config, output_dir, started_at)

        summary = _run_report(orchestrator, matcher, csv_path)

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.", err=True)
        sys.exit(1)
    except MediaStatsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo("")
    click.echo(f"{MOVIE}Total files found: {summary.total_files}")
    if summary.skipped:
        click.echo(f"Files skipped without dimensions: {summary.skipped}")
    click.echo(f"{SPARKLE}Done in {format_elapsed(summary.elapsed_seconds)}")


def _csv_report_path(config: Config, output_dir: Optional[Path], started_at: datetime) -> Path:
    """Resolve where the CSV report goes."""
    if output_dir is not None:
        directory = output_dir
    elif config.report.output_dir:
        directory = Path(config.report.output_dir)
    else:
        directory = Path.cwd()

    return build_csv_path(
        directory,
        started_at,
        prefix=config.report.csv_prefix,
        timestamp_format=config.report.timestamp_format,
    )


def _run_report(
    orchestrator: IStatsOrchestrator, matcher: PathMatcher, csv_path: Optional[Path]
) -> RunSummary:
    """Run the pipeline with a console table and, optionally, a CSV sink."""
    console = Console()
    sinks: List[IReportSink] = [ConsoleTableSink(console)]

    click.echo(f"{LOOKING_GLASS}Searching for files...")

    with ExitStack() as stack:
        stack.enter_context(sinks[0])
        if csv_path is not None:
            # Unwound in reverse, so the CSV path is announced before the table prints
            stack.push(_announce_csv(csv_path))
            sinks.append(stack.enter_context(CsvReportSink(csv_path)))

        with console.status("Searching...", spinner="dots") as status:
            summary = orchestrator.run(
                matcher, sinks, on_file=lambda file_info: status.update(file_info.file_name)
            )

    if csv_path is not None:
        summary.csv_path = str(csv_path)
    return summary


def _announce_csv(csv_path: Path) -> Callable[..., None]:
    """Build an exit callback reporting the CSV file once it is closed."""

    def announce(exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if exc_type is None:
            click.echo(f"CSV file written to: {csv_path}")

    return announce


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
