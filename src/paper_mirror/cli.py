"""Command-line interface for PaperMirror."""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from paper_mirror import __version__

console = Console()

MODE_CHOICES = ["none", "fidelityOnly", "full"]


def _load(path: str) -> str:
    from paper_mirror.ingest.loader import load_document

    try:
        return load_document(Path(path))
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def _load_profile(path: str):
    from paper_mirror.analysis import DetailedMetrics

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        return DetailedMetrics.from_dict(data)
    except (ValueError, TypeError, AttributeError) as e:
        console.print(f"[red]Error:[/red] invalid metrics profile {path}: {e}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool) -> None:
    """PaperMirror - rewrite academic drafts in a sample paper's style."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@main.command()
def status() -> None:
    """Show configuration and LLM backend reachability."""
    from paper_mirror.config import get_settings
    from paper_mirror.llm import LLMClient

    settings = get_settings()
    client = LLMClient(settings=settings)

    console.print("[bold]PaperMirror Status[/bold]\n")
    console.print(f"LLM provider: {client.provider}")
    console.print(f"LLM model: {client.model}")
    console.print(f"Analysis mode: {settings.analysis_mode.value}")
    console.print(f"Chunk size: {settings.chunk_max_chars} chars")

    if client.is_available:
        console.print("[green]OK[/green] LLM backend reachable")
    else:
        console.print("[red]X[/red] LLM backend not reachable")


@main.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--output", "-o", type=click.Path(), help="Save the metrics profile as JSON")
def metrics(path: str, output: str | None) -> None:
    """Calculate the style metrics of one document.

    Example:
        paper-mirror metrics sample.md -o sample_metrics.json
    """
    from paper_mirror.analysis import calculate_metrics

    m = calculate_metrics(_load(path))

    table = Table(title=f"Style Metrics: {Path(path).name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Body characters", f"{m.text_length_chars:,}")
    table.add_row("Sentences", f"{m.sentence_count:,}")
    table.add_row("Mean sentence length", f"{m.sentence_length.mean}")
    table.add_row("P50 / P90", f"{m.sentence_length.p50} / {m.sentence_length.p90}")
    table.add_row("Long sentences (>50)", f"{m.sentence_length.long_rate_50}%")
    table.add_row("Commas / 1k", f"{m.punctuation_density.comma}")
    table.add_row("Semicolons / 1k", f"{m.punctuation_density.semicolon}")
    table.add_row("Parentheses / 1k", f"{m.punctuation_density.parenthesis}")
    cc = m.connector_counts
    table.add_row(
        "Connectors",
        f"{cc.total} (causal {cc.causal}, adversative {cc.adversative}, "
        f"additive {cc.additive}, emphatic {cc.emphatic})",
    )
    table.add_row(
        "Template phrases",
        f"{m.template_counts.count} ({m.template_counts.per_thousand_chars} / 1k)",
    )
    console.print(table)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(m.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        console.print(f"\n[green]OK[/green] Metrics saved to {output_path}")


@main.command()
@click.argument("sample", type=click.Path(exists=True))
@click.argument("draft", type=click.Path(exists=True))
@click.argument("standard", type=click.Path(exists=True))
@click.option("--json-input", "-j", is_flag=True, help="Inputs are JSON metrics profiles (not text)")
def compare(sample: str, draft: str, standard: str, json_input: bool) -> None:
    """Mirror-score draft and rewritten standard against the sample.

    Examples:
        paper-mirror compare sample.md draft.md standard.md
        paper-mirror compare sample.json draft.json standard.json -j
    """
    from paper_mirror.analysis import calculate_metrics, generate_mirror_score
    from paper_mirror.config import get_settings

    if json_input:
        profiles = [_load_profile(p) for p in (sample, draft, standard)]
    else:
        profiles = [calculate_metrics(_load(p)) for p in (sample, draft, standard)]

    score = generate_mirror_score(*profiles, weights=get_settings().mirror_weights)

    table = Table(title="Mirror Score")
    table.add_column("Comparison", style="cyan")
    table.add_column("Score", style="green")
    table.add_row("Draft vs sample", f"{score.draft_to_sample:.1f}")
    table.add_row("Standard vs sample", f"{score.standard_to_sample:.1f}")
    color = "green" if score.improvement >= 0 else "red"
    table.add_row("Improvement", f"[{color}]{score.improvement:+.1f}[/{color}]")
    console.print(table)


@main.command()
@click.argument("draft", type=click.Path(exists=True))
@click.argument("standard", type=click.Path(exists=True))
def fidelity(draft: str, standard: str) -> None:
    """Check that numbers and acronyms survived the rewrite."""
    from paper_mirror.analysis import calculate_fidelity_guardrails

    result = calculate_fidelity_guardrails(_load(draft), _load(standard))

    console.print(f"Number retention: {result.number_retention_rate:.1f}%")
    console.print(f"Acronym retention: {result.acronym_retention_rate:.1f}%")

    if not result.alerts:
        console.print("\n[green]OK[/green] No fidelity alerts")
        return

    table = Table(title="Fidelity Alerts")
    table.add_column("Type", style="yellow")
    table.add_column("Sentence")
    table.add_column("Detail")
    for alert in result.alerts:
        where = str(alert.sentence_index) if alert.sentence_index >= 0 else "-"
        table.add_row(alert.type.value, where, alert.detail)
    console.print(table)


@main.command()
@click.argument("draft", type=click.Path(exists=True))
def citations(draft: str) -> None:
    """List draft sentences that probably need a citation."""
    from paper_mirror.analysis import generate_citation_suggestions

    report = generate_citation_suggestions(_load(draft))

    console.print(f"[dim]Rules version {report.rules_version}[/dim]\n")
    if not report.items:
        console.print("No sentences flagged.")
        return

    for item in report.items:
        console.print(f"[bold cyan]#{item.sentence_index}[/bold cyan] [{item.reason.value}] {item.sentence_text}")
        for query in item.queries:
            console.print(f"    [dim]search:[/dim] {query}")


@main.command()
@click.argument("sample", type=click.Path(exists=True))
@click.argument("draft", type=click.Path(exists=True))
@click.argument("standard", type=click.Path(exists=True))
@click.option("--mode", "-m", type=click.Choice(MODE_CHOICES), default=None, help="Analysis mode")
@click.option("--output", "-o", type=click.Path(), help="Write report (.md or .json)")
def report(sample: str, draft: str, standard: str, mode: str | None, output: str | None) -> None:
    """Build the full analysis report for an existing rewrite.

    Example:
        paper-mirror report sample.md draft.md standard.md -o report.md
    """
    from paper_mirror.analysis import AnalysisMode, PaperAnalyzer, render_markdown
    from paper_mirror.config import get_settings

    settings = get_settings()
    analysis_mode = AnalysisMode(mode) if mode else settings.analysis_mode

    analyzer = PaperAnalyzer(weights=settings.mirror_weights)
    result = analyzer.analyze(_load(sample), _load(draft), _load(standard), analysis_mode)

    if not output:
        console.print(render_markdown(result))
        return

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix.lower() == ".json":
        output_path.write_text(result.to_json(), encoding="utf-8")
    else:
        output_path.write_text(render_markdown(result), encoding="utf-8")
    console.print(f"[green]OK[/green] Report saved to {output_path}")


@main.command()
@click.argument("sample", type=click.Path(exists=True))
@click.argument("draft", type=click.Path(exists=True))
@click.option("--output-dir", "-o", type=click.Path(), help="Directory for variants and report")
@click.option("--mode", "-m", type=click.Choice(MODE_CHOICES), default=None, help="Analysis mode")
def migrate(sample: str, draft: str, output_dir: str | None, mode: str | None) -> None:
    """Rewrite DRAFT in the style of SAMPLE via the LLM backend.

    Example:
        paper-mirror migrate sample.md draft.md -o output/
    """
    from paper_mirror.analysis import AnalysisMode, render_markdown
    from paper_mirror.config import get_settings
    from paper_mirror.llm import LLMError
    from paper_mirror.rewrite.workflow import MigrationWorkflow

    settings = get_settings()
    sample_text = _load(sample)
    draft_text = _load(draft)

    with console.status("Starting...") as spinner:
        def progress_callback(update):
            suffix = f" {update.current}/{update.total}" if update.total else ""
            spinner.update(f"{update.stage}{suffix}")

        workflow = MigrationWorkflow(settings=settings, progress_callback=progress_callback)
        try:
            result = workflow.run(sample_text, draft_text, AnalysisMode(mode) if mode else None)
        except LLMError as e:
            console.print(f"[red]Rewrite failed:[/red] {e}")
            sys.exit(1)

    out = Path(output_dir) if output_dir else settings.output_dir
    out.mkdir(parents=True, exist_ok=True)

    for name in ("conservative", "standard", "enhanced"):
        (out / f"{name}.md").write_text(getattr(result, name), encoding="utf-8")
    (out / "report.json").write_text(
        json.dumps(result.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
    )
    (out / "report.md").write_text(render_markdown(result.report), encoding="utf-8")

    console.print(f"[green]OK[/green] Wrote variants and report to {out}")
    if result.report.mirror_score:
        ms = result.report.mirror_score
        console.print(
            f"Mirror score: draft {ms.draft_to_sample:.1f} -> standard {ms.standard_to_sample:.1f} "
            f"({ms.improvement:+.1f})"
        )


if __name__ == "__main__":
    main()
