"""CLI interface for flyer-studio."""

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config.logging import setup_logging
from .config.settings import get_settings
from .exceptions import FlyerStudioError
from .templates import BrandKit, GeneratedContent, TemplateDraft, feature_labels, get_template_manager

app = typer.Typer(
    name="flyer-studio",
    help="Browse HTML flyer templates and fill them from a prompt.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()


def _load_brand_kit(path: Path | None) -> BrandKit | None:
    """Read a brand kit JSON file, exiting with an error if it's invalid."""
    if path is None:
        return None
    try:
        return BrandKit.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        console.print(f"[red]Cannot read brand kit:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid brand kit:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _emit(result: GeneratedContent, output: Path | None) -> None:
    table = Table(title="Placeholders", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Value")
    for name, value in result.placeholders.items():
        table.add_row(escape(name), escape(value))
    console.print(table)
    if output is None:
        console.print(Panel(Text(result.html_content), title="HTML", border_style="green"))
        return
    output.write_text(result.html_content, encoding="utf-8")
    console.print(f"[green]✓[/green] Wrote {output}")


@app.command()
def categories() -> None:
    """List template categories."""
    cats = get_template_manager().get_categories()
    if not cats:
        console.print("[yellow]No categories found.[/yellow]")
        return
    table = Table(title="Template Categories", show_header=True, header_style="bold")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Description", style="dim")
    for c in cats:
        table.add_row(escape(c.id), escape(c.name), escape(c.description))
    console.print(table)


@app.command()
def templates(
    category: str = typer.Option(None, "--category", "-c", help="Only list this category"),
) -> None:
    """List templates, optionally filtered by category."""
    found = get_template_manager().list_templates(category)
    if not found:
        console.print("[yellow]No templates found.[/yellow]")
        return
    table = Table(title="Templates", show_header=True, header_style="bold")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Placeholders", style="dim")
    table.add_column("Features")
    for t in found:
        table.add_row(
            escape(t.id),
            escape(t.name),
            escape(", ".join(t.placeholders)),
            ", ".join(feature_labels(t.features)),
        )
    console.print(table)


@app.command()
def show(template_id: str = typer.Argument(..., help="Template id, e.g. 'event/neon-night'")) -> None:
    """Show a template's details."""
    t = get_template_manager().load_template(template_id)
    if t is None:
        console.print(f"[red]Template '{escape(template_id)}' not found[/red]")
        raise typer.Exit(1)
    console.print(
        Panel(
            f"[bold]Name:[/bold] {escape(t.name)}\n"
            f"[bold]Category:[/bold] {escape(t.category)}\n"
            f"[bold]Description:[/bold] {escape(t.description)}\n"
            f"[bold]Placeholders:[/bold] {escape(', '.join(t.placeholders)) or '-'}\n"
            f"[bold]Features:[/bold] {', '.join(feature_labels(t.features)) or '-'}",
            title=escape(t.id),
            border_style="cyan",
        )
    )


@app.command()
def generate(
    template_id: str = typer.Argument(..., help="Template id, e.g. 'event/neon-night'"),
    prompt: str = typer.Argument(..., help="Describe the flyer, e.g. 'Summer music festival'"),
    brand_kit: Path = typer.Option(None, "--brand-kit", "-b", help="Brand kit JSON file"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the HTML here"),
) -> None:
    """Fill a template from a prompt."""
    if not prompt.strip():
        raise typer.BadParameter("Prompt cannot be empty")
    kit = _load_brand_kit(brand_kit)
    result = get_template_manager().generate_template_content(template_id, prompt, kit)
    if result is None:
        console.print(f"[red]Template '{escape(template_id)}' not found[/red]")
        raise typer.Exit(1)
    _emit(result, output)


@app.command()
def preview(
    template_id: str = typer.Argument(..., help="Template id"),
    brand_kit: Path = typer.Option(None, "--brand-kit", "-b", help="Brand kit JSON file"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the HTML here"),
) -> None:
    """Fill a template with sample content."""
    kit = _load_brand_kit(brand_kit)
    result = get_template_manager().render_preview(template_id, kit)
    if result is None:
        console.print(f"[red]Template '{escape(template_id)}' not found[/red]")
        raise typer.Exit(1)
    _emit(result, output)


@app.command()
def save(
    name: str = typer.Argument(..., help="Template name, e.g. 'My Banner'"),
    html_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Markup file to save"),
    category: str = typer.Option(..., "--category", "-c", help="Category id"),
    description: str = typer.Option("", "--description", "-d", help="Template description"),
    template_id: str = typer.Option(None, "--id", help="Explicit id (default custom/<name>)"),
) -> None:
    """Save markup as a custom template."""
    try:
        draft = TemplateDraft(
            name=name,
            category=category,
            description=description,
            html_content=html_file.read_text(encoding="utf-8"),
        )
        saved_id = get_template_manager().save_template(draft, template_id)
    except (OSError, UnicodeDecodeError, ValidationError, FlyerStudioError) as e:
        console.print(f"[red]Failed to save template:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"[green]✓ Saved template[/green] [bold]{saved_id}[/bold]")


@app.command()
def status() -> None:
    """Show configuration status."""
    settings = get_settings()
    checks = settings.is_configured()
    table = Table(title="Configuration", show_header=True, header_style="bold")
    table.add_column("Setting", style="cyan")
    table.add_column("Status")
    table.add_column("Value", style="dim")
    table.add_row(
        "Templates directory",
        "[green]✓ Found[/green]" if checks["templates_dir"] else "[red]✗ Missing[/red]",
        str(settings.templates_dir),
    )
    table.add_row(
        "Category manifest",
        "[green]✓ Found[/green]" if checks["categories_manifest"] else "[red]✗ Missing[/red]",
        "categories.json",
    )
    ttl = settings.cache_ttl_seconds
    table.add_row("Cache TTL", "", "process lifetime" if ttl is None else f"{ttl}s")
    table.add_row("Log level", "", settings.log_level)
    console.print(table)
    if not all(checks.values()):
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the CLI."""
    try:
        log_level = get_settings().log_level
    except ValidationError:
        log_level = "INFO"
    setup_logging(level=log_level)
    app()


if __name__ == "__main__":
    main()
