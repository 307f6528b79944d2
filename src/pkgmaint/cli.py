"""CLI entry point for pkgmaint."""

import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv
load_dotenv()

import typer
from pydantic import ValidationError
from rich.console import Console, Group
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from pkgmaint.adapters.base import parse_package_list
from pkgmaint.analyzers.pipeline import MaintenancePipeline
from pkgmaint.config import Settings
from pkgmaint.models.schemas import (
    MaintenanceStatus,
    PackageError,
    PackageOutcome,
    PackageResult,
)

app = typer.Typer(help="Maintenance health checks for PyPI packages.")

console = Console()
err_console = Console(stderr=True)

STATUS_STYLES = {
    MaintenanceStatus.ACTIVE: ("green", "Actively Maintained"),
    MaintenanceStatus.MODERATE: ("yellow", "Moderately Maintained"),
    MaintenanceStatus.POOR: ("red", "Poor Maintenance"),
    MaintenanceStatus.UNKNOWN: ("yellow", "Unknown Status"),
}

# Adoption faster than this may be a routine release rather than real support
ADOPTION_CONFIDENT_DAYS = 180


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def check(
    packages: list[str] | None = typer.Argument(
        None, help="Package names, optionally with version specifiers"
    ),
    file: Path | None = typer.Option(
        None, "--file", "-f", help="Newline-delimited package list ('-' for stdin)"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output JSON file"),
    registry_url: str | None = typer.Option(None, "--registry-url", help="JSON API base URL"),
    timeout: float | None = typer.Option(None, "--timeout", help="Request timeout in seconds, 0 for none"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 2 if any lookup fails"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Check maintenance status of one or more packages."""
    _configure_logging(verbose)

    lines = list(packages or [])
    if file is not None:
        text = sys.stdin.read() if str(file) == "-" else file.read_text()
        lines.extend(text.splitlines())

    names = parse_package_list(lines)
    if not names:
        console.print("[red]Please enter at least one package name[/red]")
        raise typer.Exit(1)

    try:
        settings = Settings.from_env()
        overrides = {"registry_url": registry_url, "timeout": timeout}
        overrides = {key: value for key, value in overrides.items() if value is not None}
        if overrides:
            settings = Settings(**{**settings.model_dump(), **overrides})
    except ValidationError as e:
        console.print(f"[red]Invalid settings: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    results = asyncio.run(_check_packages(names, settings))

    for result in results:
        console.print(render_outcome(result))

    if output:
        data = [result.model_dump(mode="json") for result in results]
        output.write_text(json.dumps(data, indent=2))
        console.print(f"\n[green]Saved to {output}[/green]")

    if strict and any(result.is_error for result in results):
        raise typer.Exit(2)


async def _check_packages(names: list[str], settings: Settings) -> list[PackageOutcome]:
    """Async implementation of check."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(f"Checking {len(names)} package(s)...", total=None)
        async with MaintenancePipeline(settings=settings) as pipeline:
            return await pipeline.check_packages(names)


def render_outcome(result: PackageOutcome) -> Panel:
    """Render a result or an error as a rich panel."""
    if isinstance(result, PackageError):
        return Panel(
            f"[red]Error: {escape(result.error)}[/red]",
            title=f"[bold]{escape(result.name)}[/bold]",
            title_align="left",
            border_style="red",
            expand=False,
        )
    return _render_result(result)


def _render_result(pkg: PackageResult) -> Panel:
    color, status_text = STATUS_STYLES[pkg.maintenance_status]

    details = Table(show_header=False, box=None)
    details.add_column("Key", style="bold")
    details.add_column("Value")

    details.add_row("Last Release", _last_release_text(pkg.last_release, pkg.checked_at))
    details.add_row(
        "Claimed (!) Python",
        ", ".join(pkg.python_versions) if pkg.python_versions else "[dim]No version info available[/dim]",
    )
    details.add_row("Python Adoption", adoption_text(pkg) or "No adoption data available")
    details.add_row(
        "Release Frequency",
        f"Every {pkg.release_frequency} days (average over 10 latest)"
        if pkg.release_frequency is not None
        else "Not enough data",
    )
    details.add_row("Total Releases", str(pkg.total_releases))
    details.add_row(
        "Dependencies",
        str(pkg.dependency_count) if pkg.dependency_count is not None else "?",
    )
    details.add_row(
        "Recent Releases",
        "\n".join(f"{r.version}: {r.date.date().isoformat()}" for r in pkg.recent_releases)
        or "No release data",
    )

    links = [
        f"{label.upper()}: {escape(url)}"
        for label, url in pkg.project_urls.model_dump().items()
        if url
    ]
    if links:
        details.add_row("Links", "\n".join(links))

    header = f"[bold cyan]{escape(pkg.name)}[/bold cyan] v{escape(pkg.version)}  [{color}]{status_text}[/{color}]"
    body = [details]
    if pkg.summary:
        body.insert(0, f"[dim italic]{escape(pkg.summary)}[/dim italic]\n")

    return Panel(Group(*body), title=header, title_align="left", border_style=color, expand=False)


def adoption_text(pkg: PackageResult) -> str:
    """One line per tracked Python version, newest first."""
    lines = []
    for version, record in pkg.python_adoption.items():
        if record.supported and record.days is not None:
            verdict = "maybe OK" if record.days < ADOPTION_CONFIDENT_DAYS else "likely OK"
            lines.append(f"Python {version}: {verdict} ({record.days} days)")
        else:
            lines.append(f"Python {version}: [red]not OK[/red]")
    return "\n".join(lines)


def _last_release_text(last_release: datetime | None, now: datetime) -> str:
    if last_release is None:
        return "Unknown"
    days_ago = (now - last_release).days
    return f"{last_release.date().isoformat()} ({days_ago} days ago)"


@app.command()
def version() -> None:
    """Show version information."""
    from pkgmaint import __version__

    console.print(f"pkgmaint v{__version__}")


if __name__ == "__main__":
    app()
