"""
ResumeCraft Command Line Interface

Provides CLI commands for importing resume documents into a resume file
and inspecting the result.
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="resumecraft",
    help="ResumeCraft resume import CLI",
    add_completion=False,
)
console = Console()


@app.callback()
def main():
    """Configure logging before any command runs."""
    from resumecraft.utils.logger import setup_logging

    setup_logging()


@app.command()
def version():
    """Show application version."""
    from resumecraft import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show system information and configuration."""
    from resumecraft.utils.config import get_settings
    from resumecraft.utils.constants import APP_DISPLAY_NAME

    settings = get_settings()

    table = Table(title=f"{APP_DISPLAY_NAME} Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Generation Provider", settings.generation.provider)
    table.add_row("Generation Model", settings.generation.resolved_model)
    table.add_row("Generation Endpoint", settings.generation.base_url or "default")
    table.add_row("OCR Languages", settings.ocr.languages)
    table.add_row("OCR Config", settings.ocr.tesseract_config)
    table.add_row("Render Resolution", f"{settings.extraction.render_resolution} dpi")
    table.add_row("Max File Size", f"{settings.extraction.max_file_size_mb} MB")
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def import_resume(
    document: Path = typer.Argument(..., help="Path to the resume PDF"),
    resume_file: Path = typer.Option(
        ..., "--resume", "-r", help="Resume JSON file to import into (created if missing)"
    ),
    provider: Optional[str] = typer.Option(
        None, "--provider", "-p", help="Generation provider override (openai or ollama)"
    ),
):
    """Import a resume document into a resume file."""
    from resumecraft.core.importer import ResumeImporter
    from resumecraft.data import load_resume_file, save_resume_file
    from resumecraft.data.models import Resume
    from resumecraft.exceptions import ResumeImportError
    from resumecraft.services import get_generation_service
    from resumecraft.utils.config import get_settings

    console.print(f"[yellow]Importing resume from: {document}[/yellow]")

    if resume_file.exists():
        try:
            resume = load_resume_file(resume_file)
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)
        console.print(f"  Loaded existing resume [cyan]{resume.id}[/cyan]")
    else:
        resume = Resume()
        console.print(f"  Creating new resume [cyan]{resume.id}[/cyan]")

    generation_settings = get_settings().generation
    if provider:
        if provider not in ("openai", "ollama"):
            console.print(f"[red]Error: Unsupported provider: {provider}[/red]")
            raise typer.Exit(1)
        generation_settings = generation_settings.model_copy(update={"provider": provider})

    try:
        importer = ResumeImporter(generation_service=get_generation_service(generation_settings))
        with console.status("Running import pipeline..."):
            result = asyncio.run(importer.import_document(document, resume))
    except ResumeImportError as e:
        console.print(f"[red]Import failed: {e}[/red]")
        raise typer.Exit(1)

    save_resume_file(resume, resume_file)

    if result.extraction and result.extraction.ocr_pages:
        pages = ", ".join(str(i + 1) for i in result.extraction.ocr_pages)
        console.print(f"  [dim]OCR used for page(s): {pages}[/dim]")
    for warning in result.warnings:
        console.print(f"  [yellow]![/yellow] {warning}")

    table = Table(title="Import Summary")
    table.add_column("Collection", style="cyan")
    table.add_column("Added", justify="right", style="green")
    table.add_column("Merged", justify="right", style="yellow")
    table.add_column("Total", justify="right")

    for kind, added in result.added.items():
        table.add_row(
            kind,
            str(added),
            str(result.merge.merged.get(kind, 0)),
            str(len(resume.collection(kind))),
        )

    console.print(table)
    console.print(f"\n[green]Saved resume to {resume_file}[/green]")


@app.command()
def sections(
    text_file: Path = typer.Argument(..., help="Text file with canonical resume text"),
    parse: bool = typer.Option(False, "--parse", help="Also show the parsed draft counts"),
):
    """Split canonical resume text into sections and show them."""
    from resumecraft.core.importer import ResumeImporter
    from resumecraft.nlp import SectionSplitter

    if not text_file.exists():
        console.print(f"[red]Error: File not found: {text_file}[/red]")
        raise typer.Exit(1)

    text = text_file.read_text(encoding="utf-8")
    found = SectionSplitter().split(text)

    if not found:
        console.print("[yellow]No text found.[/yellow]")
        raise typer.Exit(0)

    for key, body in found.items():
        console.print(f"[bold cyan]{key.upper()}[/bold cyan]")
        console.print(body, markup=False, highlight=False)
        console.print()

    if parse:
        drafts = ResumeImporter().parse_text(text)
        table = Table(title="Parsed Drafts")
        table.add_column("Kind", style="cyan")
        table.add_column("Count", justify="right", style="green")
        table.add_row("experiences", str(len(drafts.experiences)))
        table.add_row("educations", str(len(drafts.educations)))
        table.add_row("skills", str(len(drafts.skills)))
        table.add_row("projects", str(len(drafts.projects)))
        table.add_row("extracurriculars", str(len(drafts.extracurriculars)))
        table.add_row("languages", str(len(drafts.languages)))
        console.print(table)


@app.command()
def show(
    resume_file: Path = typer.Argument(..., help="Resume JSON file"),
    hidden: bool = typer.Option(False, "--hidden", help="Include hidden records"),
):
    """Show the records of a resume file."""
    from resumecraft.data import load_resume_file
    from resumecraft.utils.constants import CollectionKind
    from resumecraft.utils.dates import format_resume_date

    if not resume_file.exists():
        console.print(f"[red]Error: File not found: {resume_file}[/red]")
        raise typer.Exit(1)

    try:
        resume = load_resume_file(resume_file)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    personal = resume.personal
    console.print(f"[bold blue]{personal.full_name or 'Unnamed'}[/bold blue]")
    for value in (personal.email, personal.phone, personal.address, personal.linkedin,
                  personal.github, personal.website):
        if value:
            console.print(f"  {value}")

    def describe(kind: CollectionKind, record) -> str:
        if kind == CollectionKind.EXPERIENCES:
            end = "Present" if record.is_current else format_resume_date(record.end_date)
            return f"{record.title} at {record.company} ({format_resume_date(record.start_date)} - {end})"
        if kind == CollectionKind.EDUCATIONS:
            return f"{record.degree}, {record.school} ({format_resume_date(record.start_date)} - {format_resume_date(record.end_date)})"
        if kind == CollectionKind.SKILLS:
            return f"{record.category}: {record.name}" if record.category else record.name
        if kind == CollectionKind.EXTRACURRICULARS:
            return f"{record.title}, {record.organization}" if record.organization else record.title
        if kind == CollectionKind.LANGUAGES:
            return f"{record.name} ({record.proficiency})" if record.proficiency else record.name
        return record.name

    for kind in CollectionKind:
        records = [r for r in resume.sorted_collection(kind) if hidden or r.visible]
        if not records:
            continue

        table = Table(title=kind.value.capitalize())
        table.add_column("#", justify="right", style="dim")
        table.add_column("Entry", style="cyan")
        table.add_column("Visible", justify="center")
        for record in records:
            table.add_row(
                str(record.order_index),
                describe(kind, record),
                "[green]✓[/green]" if record.visible else "[red]✗[/red]",
            )
        console.print(table)


if __name__ == "__main__":
    app()
