"""CLI entry point for CV Refiner."""

import json
import logging
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv

# Load environment variables from .env.local
# Path: main.py -> cv_refiner/ -> src/ -> project root
load_dotenv(Path(__file__).parent.parent.parent / ".env.local")

import typer  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.panel import Panel  # noqa: E402
from rich.table import Table  # noqa: E402

from cv_refiner.config import get_settings  # noqa: E402
from cv_refiner.extractors.pattern_extractor import extract_formatting_patterns  # noqa: E402
from cv_refiner.generation.base import StaticSuggestionGenerator  # noqa: E402
from cv_refiner.output.report import (  # noqa: E402
    format_analysis,
    format_suggestions,
    save_markdown,
)
from cv_refiner.pipeline import optimize_resume  # noqa: E402
from cv_refiner.references.store import JsonReferenceStore  # noqa: E402

app = typer.Typer(
    name="cv-refiner",
    help="CV Refiner - resume formatting analysis and suggestion anchoring",
    add_completion=False,
)
console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging from settings."""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def read_file(path: Path) -> str:
    """Read file content as text."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def read_json(path: Path) -> object:
    """Read and parse a JSON file."""
    try:
        return json.loads(read_file(path))
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Invalid JSON in {path}: {e}")
        raise typer.Exit(1) from e


def score_color(score: int) -> str:
    return "green" if score >= 80 else "yellow" if score >= 60 else "red"


@app.command()
def extract(
    resume: Annotated[Path, typer.Argument(help="Path to resume text")],
    pages: Annotated[
        int | None, typer.Option("--pages", help="Known page count (estimated if omitted)")
    ] = None,
) -> None:
    """Print the formatting fingerprint of a resume as JSON."""
    patterns = extract_formatting_patterns(read_file(resume), pages)
    console.print_json(patterns.model_dump_json(by_alias=True))


@app.command()
def score(
    resume: Annotated[Path, typer.Argument(help="Path to resume text")],
    references: Annotated[
        Path | None,
        typer.Option("--references", "-r", help="JSON file of reference fingerprints"),
    ] = None,
    industry: Annotated[str | None, typer.Option("--industry", help="Cohort industry")] = None,
    role_level: Annotated[
        str | None, typer.Option("--role-level", help="Cohort role level")
    ] = None,
    pages: Annotated[int | None, typer.Option("--pages", help="Known page count")] = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write a markdown report here")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Score resume formatting, against a reference cohort when one is given."""
    setup_logging(verbose)
    settings = get_settings()
    console.print(
        Panel.fit("[bold blue]CV Refiner[/bold blue] - Formatting analysis", border_style="blue")
    )

    text = read_file(resume)
    references_path = references or settings.references_path
    store = (
        JsonReferenceStore(references_path, limit=settings.max_references)
        if references_path
        else None
    )
    result = optimize_resume(
        text,
        page_count=pages,
        reference_store=store,
        industry=industry,
        role_level=role_level,
        settings=settings,
    )
    analysis = result.analysis

    color = score_color(analysis.score)
    console.print(f"\n[bold]Formatting Score:[/bold] [{color}]{analysis.score}/100[/{color}]")
    console.print(
        f"[dim]Strategy: {analysis.strategy}, references: {analysis.reference_count}[/dim]\n"
    )

    if analysis.suggestions:
        table = Table(title="Findings")
        table.add_column("Severity")
        table.add_column("Aspect")
        table.add_column("Message")
        table.add_column("Support", justify="right")
        for s in analysis.suggestions:
            table.add_row(s.severity, s.aspect, s.message, f"{s.percentage_support}%")
        console.print(table)
    else:
        console.print("[green]No formatting issues found.[/green]")

    if output:
        save_markdown(format_analysis(analysis), output)
        console.print(f"\n[green]Report saved to:[/green] {output}")


@app.command()
def anchor(
    resume: Annotated[Path, typer.Argument(help="Path to resume text")],
    suggestions: Annotated[Path, typer.Argument(help="JSON file of generated suggestions")],
    keywords: Annotated[
        str, typer.Option("--keywords", "-k", help="Comma-separated job keywords")
    ] = "",
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write the anchored suggestions as JSON")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Anchor generated suggestions to the resume and merge them with alias findings."""
    setup_logging(verbose)
    text = read_file(resume)
    payload = read_json(suggestions)
    target_keywords = [k.strip() for k in keywords.split(",") if k.strip()]

    result = optimize_resume(
        text,
        target_keywords=target_keywords,
        generator=StaticSuggestionGenerator(payload),
    )
    console.print(format_suggestions(text, result.suggestions))

    if output:
        data = [s.model_dump(by_alias=True) for s in result.suggestions]
        output.write_text(json.dumps(data, indent=2), encoding="utf-8")
        console.print(f"[green]Anchored suggestions saved to:[/green] {output}")


@app.command()
def version() -> None:
    """Show version information."""
    from cv_refiner import __version__

    console.print(f"CV Refiner v{__version__}")


if __name__ == "__main__":
    app()
