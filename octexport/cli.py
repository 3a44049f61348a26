"""
Octexport CLI - export Octicons to static SVG assets.
"""

from pathlib import Path
from typing import Optional, Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from octexport.errors import OctexportError, RegistryError
from octexport.exporter import (
    DEFAULT_BASE_DIR,
    DEFAULT_TASKS,
    ExportTask,
    export_icons,
    find_stale,
    render_icon,
)
from octexport.registry import OcticonRegistry

app = typer.Typer(
    name="octexport",
    help="📦 [bold cyan]Octexport[/] - Export Octicons to static SVG assets.",
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)

console = Console()
error_console = Console(stderr=True, style="bold red")

RegistryOption = Annotated[
    Optional[Path],
    typer.Option(
        "--registry", "-r",
        help="Octicons data.json to read icons from [dim](default: bundled icons)[/]",
        show_default=False,
    )
]


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        from octexport import __version__
        console.print(Panel(
            f"[bold cyan]Octexport[/] version [bold green]{__version__}[/]",
            title="Version Info",
            border_style="cyan",
        ))
        raise typer.Exit()


def format_size(size_bytes: int) -> str:
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    return f"{size_bytes / (1024 * 1024):.2f} MB"


def load_registry(path: Optional[Path]) -> OcticonRegistry:
    try:
        if path is None:
            return OcticonRegistry.bundled()
        return OcticonRegistry.from_file(path)
    except RegistryError as e:
        error_console.print(f"❌ {e}")
        raise typer.Exit(1)


@app.command("export", rich_help_panel="Commands")
def export(
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output-dir", "-o",
            help="Directory to write SVG files to [dim](default: static/ next to the package)[/]",
            show_default=False,
        )
    ] = None,
    registry_file: RegistryOption = None,
    check: Annotated[
        bool,
        typer.Option("--check", help="Only verify that exported files are up to date")
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress output except errors")
    ] = False,
):
    """
    🚀 Export the file and directory icons to SVG.

    Writes [cyan]file.svg[/] and [cyan]file_directory.svg[/], replacing any
    existing files.
    """
    registry = load_registry(registry_file)

    if output_dir is None:
        base_dir = DEFAULT_BASE_DIR
        tasks = DEFAULT_TASKS
    else:
        # Keep only the file names when writing to an explicit directory.
        base_dir = output_dir
        tasks = tuple(ExportTask(t.icon, Path(t.path.name)) for t in DEFAULT_TASKS)

    if check:
        try:
            stale = find_stale(registry, tasks, base_dir)
        except OctexportError as e:
            error_console.print(f"❌ {e}")
            raise typer.Exit(1)
        except OSError as e:
            error_console.print(f"❌ Could not read icon: {e}")
            raise typer.Exit(1)
        if stale:
            for task in stale:
                error_console.print(f"❌ Out of date: [yellow]{(Path(base_dir) / task.path).resolve()}[/]")
            raise typer.Exit(1)
        if not quiet:
            console.print("✅ All icons are up to date")
        return

    try:
        results = export_icons(registry, tasks, base_dir)
    except OctexportError as e:
        error_console.print(f"❌ {e}")
        raise typer.Exit(1)
    except OSError as e:
        error_console.print(f"❌ Could not write icon: {e}")
        raise typer.Exit(1)

    if quiet:
        return

    table = Table(box=box.ROUNDED, border_style="green")
    table.add_column("Icon", style="bold")
    table.add_column("Output")
    table.add_column("Size", justify="right")
    table.add_column("SHA-256", style="dim")
    for result in results:
        table.add_row(
            result.task.icon,
            str(result.output),
            format_size(result.size),
            result.sha256[:12],
        )

    console.print()
    console.print(Panel(table, title="✨ Icons Exported", border_style="green"))


@app.command("list", rich_help_panel="Commands")
def list_icons(registry_file: RegistryOption = None):
    """
    📋 List the icons available in the registry.
    """
    registry = load_registry(registry_file)

    table = Table(title=f"{len(registry)} icons", box=box.ROUNDED, border_style="cyan")
    table.add_column("Name", style="cyan bold", no_wrap=True)
    table.add_column("Heights")
    table.add_column("Keywords", style="dim")
    for name in sorted(registry):
        icon = registry[name]
        table.add_row(
            name,
            ", ".join(str(h) for h in icon.natural_heights),
            ", ".join(icon.keywords),
        )
    console.print(table)


@app.command("show", rich_help_panel="Commands")
def show(
    name: Annotated[str, typer.Argument(help="Icon name, e.g. file-directory-fill")],
    registry_file: RegistryOption = None,
):
    """
    🔍 Print the default SVG rendering of one icon.
    """
    registry = load_registry(registry_file)
    try:
        svg = render_icon(registry, name)
    except OctexportError as e:
        error_console.print(f"❌ {e}")
        raise typer.Exit(1)
    # Plain stdout so the markup can be piped to a file.
    typer.echo(svg)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version", "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        )
    ] = None,
):
    """
    📦 [bold cyan]Octexport[/] - Export Octicons to static SVG assets.

    [bold]Quick Start:[/]

      [dim]# Regenerate static/file.svg and static/file_directory.svg[/]
      $ octexport export

      [dim]# Fail if the committed assets are stale[/]
      $ octexport export --check
    """


def run():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
