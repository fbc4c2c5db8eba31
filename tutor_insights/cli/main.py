"""
Typer CLI for tutor-insights.

Commands:
    tutor-insights classify TEXT         - Classify one question
    tutor-insights analyze FILE          - Topic insights for a JSON question export
    tutor-insights themes                - List the built-in themes

Usage:
    tutor-insights --help
    tutor-insights classify "Explain Shor's algorithm" --theme quantum-computing
    tutor-insights analyze questions.json --theme pure-math --json
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from config import get_settings
from tutor_insights.analysis import (
    DifficultyTier,
    InsightAggregator,
    classify,
    list_themes,
    summarize,
)
from tutor_insights.content import QuestionFileError, QuestionLoader
from tutor_insights.core import configure_logging

app = typer.Typer(
    help="tutor-insights CLI: classify student questions and surface topic insights",
    no_args_is_help=True,
)

console = Console()

DIFFICULTY_STYLES = {
    DifficultyTier.BEGINNER: "green",
    DifficultyTier.INTERMEDIATE: "yellow",
    DifficultyTier.ADVANCED: "red",
}


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Question classification and topic insights."""
    settings = get_settings()
    configure_logging("DEBUG" if verbose else "WARNING", settings.log_file)


@app.command("classify")
def classify_command(
    text: str = typer.Argument(..., help="Question text"),
    theme: str = typer.Option(None, "--theme", "-t", help="Theme id (pure-math, quantum-computing, ...)"),
):
    """Classify a single question."""
    if not text.strip():
        console.print("[red]Question text cannot be empty[/red]")
        raise typer.Exit(1)

    theme = theme or get_settings().default_theme
    result = classify(text, theme)

    table = Table(title="Classification", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Theme", theme)
    table.add_row("Category", result.category)
    style = DIFFICULTY_STYLES[result.difficulty]
    table.add_row("Difficulty", f"[{style}]{result.difficulty.value}[/{style}]")
    table.add_row("Concepts", ", ".join(result.concepts) or "-")
    console.print(table)


@app.command("analyze")
def analyze_command(
    source: Path = typer.Argument(..., help="JSON file with a list of questions"),
    theme: str = typer.Option(None, "--theme", "-t", help="Theme for entries that name none"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
):
    """
    Build topic insights from a question export.

    Examples:
        tutor-insights analyze questions.json
        tutor-insights analyze questions.json --theme quantum-computing --json
    """
    settings = get_settings()
    loader = QuestionLoader(default_theme=theme or settings.default_theme)

    try:
        questions = loader.load_file(source)
    except QuestionFileError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    aggregator = InsightAggregator(sample_size=settings.insight_sample_size)
    insights = aggregator.analyze(questions)
    summary = summarize(questions, insights, settings.trending_threshold)

    if as_json:
        payload = {
            "insights": [insight.to_dict() for insight in insights],
            "summary": summary.to_dict(),
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    stats = Table(title="Question Summary", show_header=False)
    stats.add_column("Metric", style="cyan")
    stats.add_column("Value", justify="right")
    stats.add_row("Total Questions", str(summary.total_questions))
    stats.add_row("Unique Concepts", str(summary.unique_concepts))
    stats.add_row("Categories", str(summary.category_total))
    stats.add_row("Trending Topics", str(summary.trending_topics))
    console.print(stats)

    if not insights:
        console.print("[dim]No concepts detected yet.[/dim]")
        return

    table = Table(title="Topic Insights & Introduction Suggestions")
    table.add_column("Concept", style="bold")
    table.add_column("Questions", justify="right")
    table.add_column("Difficulty")
    table.add_column("Suggestion")
    table.add_column("Common Questions")

    for insight in insights:
        style = DIFFICULTY_STYLES[insight.difficulty]
        table.add_row(
            insight.concept,
            str(insight.frequency),
            f"[{style}]{insight.difficulty.value}[/{style}]",
            insight.suggested_introduction,
            "\n".join(f"- {q}" for q in insight.common_questions),
        )

    console.print(table)


@app.command("themes")
def themes_command():
    """List the built-in learning themes."""
    table = Table(title="Learning Themes")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Description")
    table.add_column("Concepts", style="dim")

    for info in list_themes():
        table.add_row(info.id.value, info.name, info.description, ", ".join(info.concepts))

    console.print(table)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
