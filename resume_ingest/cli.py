"""
resume-ingest Command Line Interface

Provides CLI commands for importing resume documents and inspecting how
the ingestion pipeline reads them.
"""

import asyncio
from dataclasses import fields
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="resume-ingest",
    help="Heuristic resume ingestion from PDF and DOCX",
    add_completion=False,
)
console = Console()

# Array sections shown by `parse`, in display order
PARSED_SECTIONS = (
    "work",
    "education",
    "skills",
    "projects",
    "certificates",
    "languages",
    "interests",
    "publications",
    "awards",
    "references",
)


def _require_supported_file(path: Path) -> None:
    from resume_ingest.ml.nlp import ExtractorFactory

    if not path.is_file():
        console.print(f"[red]Error: File not found: {path}[/red]")
        raise typer.Exit(1)

    if not ExtractorFactory.is_supported(path):
        console.print(f"[red]Error: Unsupported file format: {path.suffix}[/red]")
        console.print(
            f"[dim]Supported formats: {', '.join(ExtractorFactory.get_supported_extensions())}[/dim]"
        )
        raise typer.Exit(1)


def _print_messages(warnings: list[str], errors: list[str]) -> None:
    if warnings:
        console.print("\n[yellow]Warnings:[/yellow]")
        for warning in warnings:
            console.print(f"  [yellow]![/yellow] {warning}")
    if errors:
        console.print("\n[red]Errors:[/red]")
        for error in errors:
            console.print(f"  [red]✗[/red] {error}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging before any command runs."""
    from resume_ingest.utils.config import get_settings
    from resume_ingest.utils.logger import setup_logging

    settings = get_settings()
    if verbose:
        settings.logging.level = "DEBUG"
    else:
        settings.logging.console_output = False
    setup_logging()


@app.command()
def version():
    """Show application version."""
    from resume_ingest import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration used by the ingestion pipeline."""
    from resume_ingest.utils.config import get_settings

    settings = get_settings()
    ingest = settings.ingest

    table = Table(title="resume-ingest Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Max File Size", f"{ingest.max_file_size_mb} MB")
    table.add_row("Column Reorder Threshold", str(ingest.column_reorder_threshold))
    table.add_row("Min Chars per PDF Page", str(ingest.min_chars_per_page))
    table.add_row("Max Garbage Ratio", str(ingest.max_garbage_ratio))
    table.add_row("Low Confidence (PDF / DOCX)",
                  f"{ingest.pdf_low_confidence_threshold} / {ingest.docx_low_confidence_threshold}")
    table.add_row("Header Lines", str(ingest.header_max_lines))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def parse(
    path: Path = typer.Argument(..., help="Path to a PDF or DOCX resume"),
    as_json: bool = typer.Option(False, "--json", "-j", help="Print the full import result as JSON"),
    show_text: bool = typer.Option(False, "--show-text", "-t", help="Print the extracted text"),
):
    """Import a resume and show what was extracted."""
    from resume_ingest.ml.nlp import get_resume_parser

    _require_supported_file(path)

    result = get_resume_parser().parse_file(path)

    if as_json:
        console.print_json(result.model_dump_json(by_alias=True, exclude_none=True))
        raise typer.Exit(0 if result.success else 1)

    if not result.success:
        console.print(f"[red]Could not import {path.name}[/red]")
        _print_messages(result.warnings, result.errors)
        raise typer.Exit(1)

    data = result.data
    console.print(f"\n[bold]Imported:[/bold] [cyan]{path.name}[/cyan]")
    console.print(f"  Format: [cyan]{result.resume_format}[/cyan]")
    console.print(f"  Confidence: [cyan]{result.confidence.overall}%[/cyan]")

    if data.basics:
        basics_table = Table(title="Basics")
        basics_table.add_column("Field", style="cyan")
        basics_table.add_column("Value", style="green")
        for key, value in data.basics.to_dict().items():
            if key == "profiles":
                value = ", ".join(profile["url"] for profile in value if "url" in profile)
            elif key == "location":
                value = ", ".join(str(v) for v in value.values())
            basics_table.add_row(key, str(value))
        console.print(basics_table)

    sections_table = Table(title="Sections")
    sections_table.add_column("Section", style="cyan")
    sections_table.add_column("Entries", justify="right")
    sections_table.add_column("Confidence", justify="right", style="green")
    for name in PARSED_SECTIONS:
        entries = getattr(data, name)
        score = result.confidence.sections.get(name)
        if entries or score is not None:
            sections_table.add_row(name, str(len(entries)), f"{score}%" if score is not None else "-")
    console.print(sections_table)

    for entry in data.work:
        dates = f"{entry.start_date or '?'} - {entry.end_date or 'Present'}"
        console.print(f"  [bold]{entry.position or '?'}[/bold] at {entry.company or '?'} [dim]({dates})[/dim]")

    _print_messages(result.warnings, result.errors)

    if show_text:
        console.print("\n[bold]Extracted text:[/bold]")
        console.print(result.raw_text, markup=False, highlight=False)


@app.command()
def classify(
    path: Path = typer.Argument(..., help="Path to a PDF or DOCX resume"),
):
    """Show the detected layout format, sections and structural traits."""
    from resume_ingest.ml.nlp import get_resume_parser

    _require_supported_file(path)

    context = asyncio.run(get_resume_parser().process(path.read_bytes(), filename=path.name))
    if context.classification is None:
        console.print(f"[red]Could not read {path.name}[/red]")
        _print_messages(context.warnings, context.errors)
        raise typer.Exit(1)

    classification = context.classification
    console.print(
        f"\n[bold]{path.name}:[/bold] [cyan]{classification.format.value}[/cyan] "
        f"([green]{classification.confidence}%[/green])"
    )

    sections_table = Table(title="Detected Sections")
    sections_table.add_column("Section", style="cyan")
    sections_table.add_column("Heading")
    sections_table.add_column("Lines", justify="right")
    for section in context.sections:
        line_count = len([line for line in section.content.split("\n") if line.strip()])
        sections_table.add_row(section.name.value, section.title, str(line_count))
    console.print(sections_table)

    traits_table = Table(title="Traits")
    traits_table.add_column("Trait", style="cyan")
    traits_table.add_column("Value", style="green")
    for trait in fields(classification.traits):
        value = getattr(classification.traits, trait.name)
        if trait.name == "section_kinds":
            value = ", ".join(kind.value for kind in value)
        elif isinstance(value, float):
            value = f"{value:.2f}"
        traits_table.add_row(trait.name, str(value))
    console.print(traits_table)

    console.print(f"\n[dim]Stages: {' -> '.join(stage.value for stage in context.history)}[/dim]")


if __name__ == "__main__":
    app()
