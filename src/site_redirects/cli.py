"""CLI commands for site-redirects using Typer."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from site_redirects.config import get_settings
from site_redirects.core.redirects import (
    RedirectWriteError,
    build_table,
    write_manifest,
    write_redirect_file,
)
from site_redirects.models.redirect import RedirectTable
from site_redirects.utils.logging import setup_logging


app = typer.Typer(
    name="site-redirects",
    help="Generate hosting redirect rules from the site's post folders",
    no_args_is_help=True,
)

console = Console()


def _build(content_root: Optional[Path], verbose: bool) -> RedirectTable:
    settings = get_settings()
    setup_logging(
        level=logging.DEBUG if verbose else logging.INFO,
        log_file=settings.log_file,
    )
    return build_table(
        content_root or settings.content_root,
        metadata_filename=settings.metadata_filename,
        category_key=settings.category_key,
        posts_prefix=settings.posts_prefix,
    )


# --- Build Command ---


@app.command()
def build(
    content_root: Optional[Path] = typer.Option(
        None, "--content-root", "-c", help="Directory of post folders"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Redirect file to write"
    ),
    manifest: Optional[Path] = typer.Option(
        None, "--manifest", help="Also write a YAML summary of posts and categories"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Build the redirect file."""
    settings = get_settings()
    table = _build(content_root, verbose)
    output_path = output or settings.redirects_file

    try:
        write_redirect_file(table.lines, output_path)
        if manifest:
            write_manifest(table, manifest)
    except RedirectWriteError as exc:
        console.print("[red]Could not write redirect output.[/red]")
        console.print(f"[dim]{exc}[/dim]")
        raise typer.Exit(1)

    console.print(
        f"[green]Wrote {len(table.rules)} redirects to {output_path}[/green]"
    )
    if manifest:
        console.print(f"[dim]Manifest: {manifest}[/dim]")


# --- Show Command ---


@app.command()
def show(
    content_root: Optional[Path] = typer.Option(
        None, "--content-root", "-c", help="Directory of post folders"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Print the redirect table without writing it."""
    table = _build(content_root, verbose)
    if not table.rules:
        console.print("[yellow]No redirects found[/yellow]")
        return

    rich_table = Table(show_header=True, header_style="bold cyan")
    rich_table.add_column("Kind", style="dim")
    rich_table.add_column("Source", style="green")
    rich_table.add_column("Destination")

    for rule in table.rules:
        rich_table.add_row(rule.kind.value, rule.source, rule.destination)
    console.print(rich_table)


# --- Categories Command ---


@app.command()
def categories(
    content_root: Optional[Path] = typer.Option(
        None, "--content-root", "-c", help="Directory of post folders"
    ),
):
    """List the categories declared across posts."""
    table = _build(content_root, verbose=False)
    if not table.categories:
        console.print("[yellow]No categories found[/yellow]")
        return

    rich_table = Table(show_header=True, header_style="bold cyan")
    rich_table.add_column("Category", style="green")
    rich_table.add_column("Key", style="yellow")
    rich_table.add_column("Encoded")
    rich_table.add_column("Posts", justify="right")

    for category in table.categories:
        rich_table.add_row(
            category.display_name,
            category.key,
            category.encoded,
            str(category.post_count),
        )
    console.print(rich_table)


# --- Entry Point ---


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
