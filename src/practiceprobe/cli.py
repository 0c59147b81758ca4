"""
practiceprobe CLI - run the practice page widget checks from the command line.
"""
import logging
import sys
from typing import Tuple

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .automation.checks import CHECKS, CHECKS_BY_NAME
from .automation.runner import ProbeRunner
from .automation.types import CheckStatus, RunReport
from .config import (
    DEFAULT_IMPLICIT_TIMEOUT,
    DEFAULT_SUGGESTION_DELAY,
    ENGINES,
    WAIT_STRATEGIES,
    ProbeSettings,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("practiceprobe")

# Create console for rich output
console = Console()

EXIT_CHECK_FAILURES = 1
EXIT_LAUNCH_ERROR = 2

STATUS_STYLE = {
    CheckStatus.PASSED: "green",
    CheckStatus.OBSERVED: "cyan",
    CheckStatus.NOT_FOUND: "yellow",
    CheckStatus.FAILED: "red",
    CheckStatus.ERROR: "red",
}


def print_report(report: RunReport) -> None:
    table = Table(title=f"Practice page probe: {report.title or report.url}")
    table.add_column("Check", style="bold", no_wrap=True)
    table.add_column("Status")
    table.add_column("Found", justify="right")
    table.add_column("Notes")
    for obs in report.observations:
        style = STATUS_STYLE.get(obs.status, "white")
        notes = obs.error or "; ".join(obs.failures)
        table.add_row(obs.check, f"[{style}]{obs.status.value}[/]", str(obs.found), notes)
    console.print(table)


@click.group(invoke_without_command=True)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Enable debug output",
    show_default=True
)
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Probe the widgets of the Automation Practice page."""
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled")

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.option("--engine", type=click.Choice(ENGINES), default="selenium", show_default=True,
              envvar="PRACTICEPROBE_ENGINE")
@click.option("--headless/--no-headless", default=False, show_default=True, envvar="PRACTICEPROBE_HEADLESS",
              help="Run the browser without a window")
@click.option("--strict/--no-strict", default=False, show_default=True,
              help="Assert expected values and fail on mismatches")
@click.option("--wait", "wait_strategy", type=click.Choice(WAIT_STRATEGIES), default="sleep", show_default=True,
              envvar="PRACTICEPROBE_WAIT", help="How to wait for autocomplete suggestions")
@click.option("--delay", type=click.FloatRange(min=0), default=DEFAULT_SUGGESTION_DELAY, show_default=True,
              envvar="PRACTICEPROBE_DELAY", help="Suggestion wait in seconds")
@click.option("--timeout", type=click.FloatRange(min=0), default=DEFAULT_IMPLICIT_TIMEOUT, show_default=True,
              envvar="PRACTICEPROBE_TIMEOUT", help="Element lookup timeout in seconds")
@click.option("--only", multiple=True, type=click.Choice(list(CHECKS_BY_NAME)),
              help="Run only the named check (repeatable)")
def run(
    engine: str,
    headless: bool,
    strict: bool,
    wait_strategy: str,
    delay: float,
    timeout: float,
    only: Tuple[str, ...],
) -> None:
    """Open the practice page, run every check once and report."""
    settings = ProbeSettings(
        engine=engine,
        headless=headless,
        suggestion_delay=delay,
        wait_strategy=wait_strategy,
        implicit_timeout=timeout,
    )
    report = ProbeRunner(settings).run(strict=strict, only=only)

    if report.launch_error:
        console.print(f"[red]✗[/] Could not open {report.url}: {report.launch_error}")
        sys.exit(EXIT_LAUNCH_ERROR)

    if report.setup_error:
        console.print(f"[red]✗[/] Setup failed: {report.setup_error}")
        sys.exit(EXIT_CHECK_FAILURES)

    print_report(report)
    if not report.ok:
        sys.exit(EXIT_CHECK_FAILURES)
    console.print("[green]✓[/] Probe run completed")


@cli.command(name="checks")
def list_checks() -> None:
    """List the checks in execution order."""
    table = Table(title="Checks")
    table.add_column("#", justify="right")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Locator")
    table.add_column("Action")
    for check in CHECKS:
        table.add_row(str(check.priority), check.name, str(check.locator), check.action.value)
    console.print(table)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
