"""CLI interface for brandcn."""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.tree import Tree

from . import __version__
from .config.constants import ExitCode
from .config.logging import get_logger, setup_logging
from .config.settings import Settings, get_settings
from .exceptions import StoreReadError
from .models import BatchStatus, LogoOperationResult, ProcessOptions, ValidationResult
from .resolver import get_variant_type, group_by_brand, process_logos, summarize_results
from .store import LogoStore
from .target import (
    get_default_directory_path,
    normalize_directory,
    persist_output_dir,
    resolve_target_dir,
)
from .validate import validate_logo_names

app = typer.Typer(
    name="brandcn",
    help="Add brand logos to your project.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()

USAGE = f"""[bold]Usage:[/bold]
  {escape("brandcn add <logo-name> [logo-names...]")}

[bold]Examples:[/bold]
  brandcn add vercel
  brandcn add vercel neon react
  brandcn add github --wordmark
  pipx run brandcn add nextjs tailwindcss

[dim]Logo names must contain only alphanumeric characters, hyphens, or underscores.[/dim]"""


def _display_usage() -> None:
    console.print()
    console.print(Panel(USAGE, title="Usage", border_style="blue"))


def _load_settings() -> Settings:
    """Load settings or exit with a configuration error."""
    logger = get_logger(__name__)
    try:
        return get_settings()
    except ValidationError as e:
        logger.error("Configuration validation error: %s", e)
        console.print(
            "[red]Configuration error:[/red] Invalid configuration values.\n"
            "Check your BRANDCN_* environment variables and .env file.\n"
            f"Details: {escape(str(e))}"
        )
        raise typer.Exit(ExitCode.FAILURE)


def _is_interactive() -> bool:
    return sys.stdin.isatty()


def _library_store(settings: Settings) -> LogoStore:
    return LogoStore(settings.library_dir, latency=settings.store_latency)


def _report_invalid_names(validation: ValidationResult) -> None:
    console.print("[red]Invalid logo names:[/red]")
    for error in validation.errors:
        console.print(f"  • {escape(repr(error.name))}: {escape(error.error)}")
    _display_usage()


def _ask_for_directory(cwd: Path) -> Optional[str]:
    """Prompt for a custom target directory.

    Returns:
        The chosen directory if it differs from the default, else None.
    """
    default = get_default_directory_path(cwd)
    console.print(Panel("[bold]brandcn[/bold]", border_style="cyan"))
    answer = Prompt.ask(
        "[bold]Would you like to specify a custom directory?[/bold]",
        default=default,
        console=console,
    )
    directory = normalize_directory(answer)
    if directory == default:
        return None
    return directory


def _display_results(results: List[LogoOperationResult]) -> None:
    added = [r for r in results if r.success and not r.skipped]
    skipped = [r for r in results if r.success and r.skipped]
    failed = [r for r in results if not r.success]

    console.print()
    if added:
        console.print("[bold green]Added logos:[/bold green]")
        for result in added:
            console.print(f"  [green]✓[/green] {result.logo_name}.svg")
    if skipped:
        console.print("[bold cyan]Skipped (already exist):[/bold cyan]")
        for result in skipped:
            console.print(f"  [cyan]→[/cyan] {result.logo_name}.svg")
    if failed:
        console.print("[bold red]Failed:[/bold red]")
        for result in failed:
            error = escape(result.error or "Unknown error")
            console.print(f"  [red]✗[/red] {escape(result.logo_name)}: {error}")
    console.print()


def _finish(results: List[LogoOperationResult]) -> None:
    """Print the outcome line and exit with a status matching the results."""
    summary = summarize_results(results)
    if summary.status == BatchStatus.ALL_FAILED:
        console.print("[red]All operations failed. Please check the errors above.[/red]")
        raise typer.Exit(ExitCode.FAILURE)
    if summary.status == BatchStatus.PARTIAL:
        skipped_text = f", {summary.skipped} skipped" if summary.skipped else ""
        console.print(
            "[yellow]Completed with warnings. "
            f"{summary.added} logos added{skipped_text}.[/yellow]"
        )
        raise typer.Exit(ExitCode.PARTIAL)
    if summary.added:
        plural = "" if summary.added == 1 else "s"
        existed = f" ({summary.skipped} already existed)" if summary.skipped else ""
        console.print(
            f"[green]Successfully added {summary.added} logo{plural}{existed}![/green]"
        )
    else:
        console.print("[green]All logos were already present in your project.[/green]")


@app.command()
def add(
    names: Optional[List[str]] = typer.Argument(
        None, help="Logo names to add (e.g. 'vercel neon react')", show_default=False
    ),
    dark: bool = typer.Option(False, "--dark", "-d", help="Add only dark variant of the logo"),
    light: bool = typer.Option(False, "--light", "-l", help="Add only light variant of the logo"),
    wordmark: bool = typer.Option(
        False, "--wordmark", "-w", help="Add only wordmark variant of the logo"
    ),
    directory: Optional[str] = typer.Option(
        None,
        "--dir",
        help="Target directory, relative to the current directory",
        show_default=False,
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Never prompt; use the configured or default directory",
    ),
) -> None:
    """Add brand logos to your project.

    Examples:
        brandcn add vercel
        brandcn add vercel neon react
        brandcn add vercel --dark --light
        brandcn add github --wordmark
    """
    logger = get_logger(__name__)

    if not names:
        console.print("[red]No logo names provided[/red]")
        _display_usage()
        raise typer.Exit(ExitCode.FAILURE)

    validation = validate_logo_names(names)
    if validation.has_errors:
        _report_invalid_names(validation)
        raise typer.Exit(ExitCode.FAILURE)
    if not validation.valid_names:
        console.print("[red]No valid logo names provided[/red]")
        _display_usage()
        raise typer.Exit(ExitCode.FAILURE)

    settings = _load_settings()
    cwd = Path.cwd()

    override = directory
    target_dir = resolve_target_dir(override, cwd)
    if override is None and not yes and not target_dir.exists() and _is_interactive():
        override = _ask_for_directory(cwd)
        if override is not None:
            persist_output_dir(override, cwd)
            target_dir = resolve_target_dir(override, cwd)

    options = ProcessOptions(dark=dark, light=light, wordmark=wordmark)
    library = _library_store(settings)
    target = LogoStore(target_dir)
    logger.debug("Library: %s, target: %s, options: %s", library.directory, target_dir, options)

    count = len(validation.valid_names)
    try:
        with console.status(f"Processing {count} logo(s)..."):
            results = process_logos(
                validation.valid_names, options, library=library, target=target
            )
    except StoreReadError as e:
        logger.error("Library read failed: %s", e)
        console.print(
            Panel(
                f"[red]Operation failed[/red]\n\n{escape(str(e))}",
                title="Error",
                border_style="red",
            )
        )
        raise typer.Exit(ExitCode.FAILURE)

    _display_results(results)
    _finish(results)


@app.command("list")
def list_logos(
    search: Optional[str] = typer.Option(
        None,
        "--search",
        "-s",
        help="Search for logos containing the specified text",
        show_default=False,
    ),
    variants: bool = typer.Option(
        False, "--variants", "-v", help="Group logos by brand and show variants"
    ),
) -> None:
    """List all available brand logos."""
    settings = _load_settings()
    try:
        logos = _library_store(settings).list_logos()
    except StoreReadError as e:
        console.print(f"[red]Failed to load logos:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.FAILURE)

    if not logos:
        console.print("[red]No logos found in library[/red]")
        raise typer.Exit(ExitCode.FAILURE)

    if search:
        term = search.lower()
        logos = [logo for logo in logos if term in logo.lower()]
        if not logos:
            console.print(f'[yellow]No logos found matching "{escape(search)}"[/yellow]')
            console.print(
                "Try a different search term or run [bold]brandcn list[/bold] "
                "to see all available logos."
            )
            raise typer.Exit(ExitCode.SUCCESS)

    if variants:
        _display_grouped(logos, search)
    else:
        _display_simple(logos, search)


def _display_grouped(logos: List[str], search: Optional[str]) -> None:
    if search:
        title = f'Found {len(logos)} logos matching "{escape(search)}" (grouped by brand)'
    else:
        title = f"Available logos grouped by brand ({len(logos)} total)"
    tree = Tree(f"[bold]{title}[/bold]")
    for base_name, members in group_by_brand(logos).items():
        if len(members) == 1:
            tree.add(f"[cyan]{base_name}[/cyan]")
            continue
        branch = tree.add(f"[cyan]{base_name}[/cyan] [dim]({len(members)} variants)[/dim]")
        for member in members:
            variant_type = get_variant_type(member, base_name)
            suffix = f" [dim]({variant_type})[/dim]" if variant_type else ""
            branch.add(f"{member}{suffix}")
    console.print(tree)
    console.print()
    console.print(
        "[dim]Use `brandcn add <logo-name>` to add a logo or variant to your project[/dim]"
    )


def _display_simple(logos: List[str], search: Optional[str]) -> None:
    if search:
        title = f'Found {len(logos)} logos matching "{escape(search)}"'
    else:
        title = f"Available logos ({len(logos)})"
    console.print(f"[bold]{title}[/bold]")
    console.print(Columns(logos, column_first=True, padding=(0, 4)))
    console.print()
    console.print("[dim]Use `brandcn add <logo-name>` to add a logo to your project[/dim]")


@app.command()
def version() -> None:
    """Display version information."""
    console.print(f"brandcn v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    # Initialize logging with settings
    try:
        log_level = get_settings().brandcn_log_level
    except Exception:
        # Use default log level if settings fail to load
        log_level = "WARNING"

    setup_logging(level=log_level)
    app()


if __name__ == "__main__":
    main()
