"""
CLI Main - Typer-based command-line interface.

Usage:
    infographer serve
    infographer check-config
    infographer research "Photosynthesis" --level College --style Vintage
    infographer version
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from infographer.domains.generation import ComplexityLevel, Language, VisualStyle

app = typer.Typer(
    name="infographer",
    help="Infographer - AI infographic gateway",
    add_completion=False,
)
console = Console()

_SECRET_FIELDS = {"workos_api_key", "workos_cookie_password", "gemini_api_key"}


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Host to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to bind"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
) -> None:
    """Start the API server."""
    import uvicorn

    from infographer.config import configure_logging, get_settings

    settings = get_settings()
    configure_logging(settings.log_level)
    host = host or settings.api_host
    port = port or settings.api_port

    console.print("\n[green]Starting Infographer API server[/green]")
    console.print(f"[dim]http://{host}:{port}[/dim]\n")

    uvicorn.run(
        "infographer.interfaces.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
        log_level=settings.log_level.lower(),
    )


@app.command("check-config")
def check_config(
    strict: bool = typer.Option(False, "--strict", help="Exit 1 if any warning is reported"),
) -> None:
    """Show effective settings and misconfigurations."""
    from infographer.config import get_settings

    settings = get_settings()

    table = Table(title="Effective Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for name, value in settings.model_dump().items():
        if name in _SECRET_FIELDS:
            value = "********" if value else "(unset)"
        table.add_row(name, str(value))

    console.print(table)

    warnings = settings.config_warnings()
    if not warnings:
        console.print("\n[green]Configuration OK[/green]")
        return

    console.print(
        Panel(
            "\n".join(f"[yellow]![/yellow] {w}" for w in warnings),
            title="Warnings",
            style="yellow",
        )
    )
    if strict:
        raise typer.Exit(1)


@app.command()
def research(
    topic: str = typer.Argument(..., help="Infographic topic"),
    level: ComplexityLevel | None = typer.Option(None, "--level", "-l", help="Audience level"),
    style: VisualStyle | None = typer.Option(None, "--style", "-s", help="Visual style"),
    language: Language = typer.Option(Language.ENGLISH, "--language", help="Output language"),
) -> None:
    """Run the research stage once and print the plan."""
    asyncio.run(_research_async(topic, level, style, language))


async def _research_async(
    topic: str,
    level: ComplexityLevel | None,
    style: VisualStyle | None,
    language: Language,
) -> None:
    """Async research implementation."""
    from infographer.config import get_settings
    from infographer.domains.generation import Err
    from infographer.interfaces.api.deps import build_services

    pipeline = build_services(get_settings()).pipeline

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        progress.add_task("Researching...", total=None)
        outcome = await pipeline.research(topic, level, style, language)

    if isinstance(outcome, Err):
        console.print(f"[red]Error:[/red] {outcome.message}")
        raise typer.Exit(1)

    result = outcome.value

    console.print(f"\n[bold cyan]Topic:[/bold cyan] {topic}")
    if result.facts:
        console.print("\n[bold]Facts:[/bold]")
        for i, fact in enumerate(result.facts, 1):
            console.print(f"  {i}. {fact}")

    console.print(Panel(result.image_prompt, title="Image Prompt"))

    if result.search_results:
        table = Table(title="Sources")
        table.add_column("Title", style="cyan")
        table.add_column("URL", style="dim")
        for item in result.search_results:
            table.add_row(item.title, item.url)
        console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from infographer import __version__

    console.print(f"Infographer v{__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
