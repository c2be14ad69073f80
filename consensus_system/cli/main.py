"""Interactive CLI for the consensus analysis system using Typer and Rich."""

import asyncio
import json
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from consensus_system import __version__
from consensus_system.config.logging import get_logger
from consensus_system.config.settings import resolve_current_year, settings
from consensus_system.data_management.analysis_store import AnalysisStore
from consensus_system.data_management.schemas import AnalysisResult, MisinformationRisk
from consensus_system.exceptions import InvalidStudyType
from consensus_system.pipeline import ClaimAnalysisPipeline

app = typer.Typer(
    help="Scientific consensus analysis for natural-language claims",
    add_completion=False,
)

console = Console()

logger = get_logger("cli")

RISK_STYLES = {
    MisinformationRisk.LOW: "green",
    MisinformationRisk.MEDIUM: "yellow",
    MisinformationRisk.HIGH: "red",
}


def _open_store() -> Optional[AnalysisStore]:
    if not settings.analysis_store_path:
        return None
    return AnalysisStore(persistence_path=settings.analysis_store_path)


def _render_result(result: AnalysisResult) -> None:
    outcome = result.outcome
    risk_style = RISK_STYLES[outcome.misinformation_risk]

    console.print(Panel(
        f"[bold]{result.claim_text}[/bold]\n\n"
        f"Consensus score: [bold]{outcome.consensus_score:.1f}[/bold] / 100\n"
        f"Misinformation risk: [bold {risk_style}]{outcome.misinformation_risk.value}[/bold {risk_style}]",
        title="Claim Analysis",
        border_style=risk_style,
    ))

    sources = Table(title="Sources", show_header=True, header_style="bold magenta")
    sources.add_column("Title", style="cyan")
    sources.add_column("Year", justify="right")
    sources.add_column("Citations", justify="right")
    sources.add_column("Study type", style="yellow")
    sources.add_column("Weight", justify="right", style="green")
    for s in sorted(result.sources, key=lambda s: s.credibility_weight, reverse=True):
        sources.add_row(
            s.title,
            str(s.year),
            f"{s.citation_count:,}",
            s.study_type.value,
            f"{s.credibility_weight:.3f}",
        )
    console.print(sources)

    breakdown = Table(title="Evidence Mix", show_header=True, header_style="bold magenta")
    breakdown.add_column("View", style="cyan", width=22)
    breakdown.add_column("Details", style="yellow")
    breakdown.add_row(
        "Study types",
        ", ".join(f"{d.study_type.value}: {d.count}" for d in outcome.study_type_distribution) or "-",
    )
    breakdown.add_row(
        "Credibility by year",
        ", ".join(f"{p.year}: {p.total_weight:.2f}" for p in outcome.credibility_over_time) or "-",
    )
    fo = outcome.fact_opinion_breakdown
    breakdown.add_row(
        "Fact / opinion weight",
        f"{fo.factual_weight_percent:.1f}% / {fo.opinion_weight_percent:.1f}%",
    )
    console.print(breakdown)

    console.print(Panel(outcome.knowledge_gaps_summary, title="Knowledge Gaps", border_style="blue"))


@app.command()
def analyze(
    claim: str = typer.Argument(..., help="Claim to analyze"),
    year: Optional[int] = typer.Option(None, "--year", help="Override the current year"),
    as_json: bool = typer.Option(False, "--json", help="Print the analysis as JSON"),
) -> None:
    """
    Analyze a claim and report its scientific consensus.

    Args:
        claim: Natural-language claim
        year: Calendar year used for recency weighting
        as_json: Emit the API payload instead of tables
    """
    logger.info("Analyze command invoked")
    try:
        pipeline = ClaimAnalysisPipeline(store=_open_store(), current_year=year)
        result = asyncio.run(pipeline.analyze(claim))
    except (InvalidStudyType, ValueError) as e:
        console.print(f"\n[red]✗[/red] Error: {e}")
        logger.error(f"Analysis failed: {e}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.to_api_dict(), indent=2, ensure_ascii=False))
    else:
        _render_result(result)


@app.command()
def history(
    limit: int = typer.Option(10, "--limit", min=1, help="Number of analyses to show"),
) -> None:
    """Show the most recent stored analyses."""
    store = _open_store()
    if store is None:
        console.print("[yellow]⚠[/yellow] No analysis store configured (set ANALYSIS_STORE_PATH)")
        raise typer.Exit(1)

    analyses = asyncio.run(store.list_analyses(limit=limit))
    table = Table(title="Recent Analyses", show_header=True, header_style="bold magenta")
    table.add_column("Created", style="dim")
    table.add_column("Claim", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Risk")
    for r in analyses:
        risk = r.outcome.misinformation_risk
        table.add_row(
            r.created_at.strftime("%Y-%m-%d %H:%M"),
            r.claim_text,
            f"{r.outcome.consensus_score:.1f}",
            f"[{RISK_STYLES[risk]}]{risk.value}[/{RISK_STYLES[risk]}]",
        )
    console.print(table)


@app.command()
def status() -> None:
    """
    Display system status and configuration.

    Shows the effective scoring year, provider bounds and logging settings.
    """
    logger.info("Displaying system status")

    table = Table(title="Consensus System Status", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="cyan", width=20)
    table.add_column("Status", style="green", width=15)
    table.add_column("Details", style="yellow")

    python_version = f"Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
    table.add_row("Environment", "✓ Ready", python_version)

    year_source = "override" if settings.current_year is not None else "system clock"
    table.add_row("Scoring year", "✓ Resolved", f"{resolve_current_year()} ({year_source})")

    table.add_row(
        "Source provider",
        "✓ Synthetic",
        f"{settings.min_sources}-{settings.max_sources} sources per claim",
    )

    store_status = "✓ Persistent" if settings.analysis_store_path else "✗ Disabled"
    table.add_row("Analysis store", store_status, settings.analysis_store_path or "memory only")

    log_details = f"Level: {settings.log_level}, Format: {settings.log_format}"
    table.add_row("Logging", "✓ Active", log_details)

    console.print(table)


@app.command()
def version() -> None:
    """Display version information."""
    console.print("[bold]Consensus Analysis System[/bold]")
    console.print(f"Version: {__version__}")


if __name__ == "__main__":
    app()
