"""
Command line interface for sitesmith.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import ConfigurationError, SiteRequest, get_settings, load_request, parse_page_kind
from .pipeline import SiteReport, build_site, classify_with_rule, generate_site, plan_site
from .registry import default_registry
from .util import slugify

console = Console()
app = typer.Typer(help="Generate archetype-driven marketing sites from business profiles.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level_name: str) -> None:
    env_override = os.getenv("SITESMITH_LOG_LEVEL")
    level_str = (env_override or level_name or "info").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_config_path(value: Path) -> Path:
    """Ensure the request path exists and return it absolute."""
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No request file found at {resolved}")
    if not resolved.is_file():
        raise typer.BadParameter(f"Request path must be a file, got directory: {resolved}")
    return resolved


def _load_request_or_exit(path: Path) -> SiteRequest:
    try:
        return load_request(path)
    except ConfigurationError as exc:
        console.print(f"[bold red]Configuration error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _print_site_report(report: SiteReport) -> None:
    table = Table(title="Site Summary")
    table.add_column("Page")
    table.add_column("Status")
    table.add_column("Detail", overflow="fold")
    styles = {"failed": "red", "written": "green"}
    for page, status, detail in report.summary_rows():
        style = styles.get(status)
        table.add_row(page, f"[{style}]{status}[/]" if style else status, detail)
    console.print(table)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show sitesmith version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]sitesmith[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            "[bold yellow]sitesmith[/] is ready. Run [cyan]sitesmith generate path/to/site.toml[/] "
            "to build a site.",
        )


@app.command()
def generate(
    config: Path = typer.Argument(
        ...,
        help="Path to the site request TOML file.",
        callback=_resolve_config_path,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Directory for generated pages (defaults to <SITESMITH_OUTPUT_DIR>/<business-slug>).",
    ),
    page: List[str] = typer.Option(
        None,
        "--page",
        "-p",
        help="Only generate these page kinds (multiple allowed).",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Compose and render every page without writing files.",
    ),
) -> None:
    """
    Classify the business, compose every page and write the HTML site.
    """
    request = _load_request_or_exit(config)
    business = request.business

    try:
        settings = get_settings()
        output_dir = output or settings.output_dir / slugify(business.name)
        pages = [parse_page_kind(kind) for kind in page] if page else None
        pages = pages or request.options.pages or settings.default_pages or None
        report = generate_site(
            business,
            request.options,
            pages=pages,
            output_dir=output_dir,
            dry_run=dry_run,
        )
    except ConfigurationError as exc:
        console.print(f"[bold red]Configuration error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    summary_table = Table(title="Site Request Summary")
    summary_table.add_column("Key")
    summary_table.add_column("Value", overflow="fold")
    summary_table.add_row("Business", escape(business.name) or "(unnamed)")
    summary_table.add_row("Industry", report.industry)
    summary_table.add_row("Archetype", report.archetype_id)
    summary_table.add_row("Layout variant", report.variant or "archetype default")
    summary_table.add_row("Output", str(output_dir))
    summary_table.add_row("Request hash", request.hash)
    console.print(summary_table)
    _print_site_report(report)

    if dry_run:
        console.print("[bold blue]Dry run complete.[/] No filesystem changes made.")
    if report.failures:
        console.print(f"[bold red]{len(report.failures)} page(s) failed.[/]")
        raise typer.Exit(code=1)
    if not dry_run:
        console.print("[bold green]Site generated.[/]")


@app.command()
def classify(
    config: Path = typer.Argument(
        ...,
        help="Path to the site request TOML file.",
        callback=_resolve_config_path,
    ),
) -> None:
    """
    Show which archetype a business resolves to and why.
    """
    request = _load_request_or_exit(config)
    options = request.options
    try:
        plan = plan_site(request.business, options)
    except ConfigurationError as exc:
        console.print(f"[bold red]Configuration error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    result = classify_with_rule(request.business)

    table = Table(title="Classification")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    table.add_row("Industry", result.industry)
    table.add_row("Family", result.family)
    table.add_row("Archetype", result.archetype_id)
    table.add_row("Matched keyword", result.matched_keyword or "(family default)")
    if options.archetype_override:
        table.add_row("Override", plan.archetype.id)
    table.add_row("Layout variant", plan.variant or "archetype default")
    console.print(table)


@app.command()
def spec(
    config: Path = typer.Argument(
        ...,
        help="Path to the site request TOML file.",
        callback=_resolve_config_path,
    ),
    page: str = typer.Option(
        "home",
        "--page",
        "-p",
        help="Page kind to dump (home, menu, services, about, contact, gallery).",
    ),
) -> None:
    """
    Print the composed page specification as JSON.
    """
    request = _load_request_or_exit(config)
    try:
        kind = parse_page_kind(page)
        site = build_site(request.business, request.options, pages=[kind])
    except ConfigurationError as exc:
        console.print(f"[bold red]Configuration error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    typer.echo(site.page(kind).model_dump_json(indent=2))


@app.command()
def industries() -> None:
    """
    List canonical industry keys, their family and aliases.
    """
    registry = default_registry()
    aliases: dict[str, List[str]] = {}
    for alias, target in registry.aliases.items():
        aliases.setdefault(target, []).append(alias)

    table = Table(title="Industries")
    table.add_column("Industry")
    table.add_column("Family")
    table.add_column("Aliases", overflow="fold")
    for key in registry.industries:
        table.add_row(key, registry.families[key], ", ".join(sorted(aliases.get(key, []))))
    console.print(table)


@app.command()
def archetypes(
    family: Optional[str] = typer.Option(
        None,
        "--family",
        "-f",
        help="Only list archetypes for this family (e.g. food-service).",
    ),
) -> None:
    """
    List available archetypes.
    """
    registry = default_registry()
    selected = registry.archetypes_for_family(family) if family else list(registry.archetypes.values())
    if not selected:
        console.print(f"[bold yellow]No archetypes for family '{escape(family)}'.[/]")
        raise typer.Exit(code=1)

    table = Table(title="Archetypes")
    table.add_column("Id", no_wrap=True)
    table.add_column("Name")
    table.add_column("Family")
    table.add_column("Hero")
    table.add_column("Description", overflow="fold")
    table.add_column("Best for", overflow="fold")
    for archetype in selected:
        table.add_row(
            archetype.id,
            archetype.name,
            archetype.family,
            archetype.hero_type,
            archetype.description,
            ", ".join(archetype.best_for),
        )
    console.print(table)


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
