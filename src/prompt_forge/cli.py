"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from prompt_forge.clients.llm_client import LLMClient
from prompt_forge.config import load_config
from prompt_forge.engine.analyzer import analyze_input
from prompt_forge.engine.enhancer import enhance_input
from prompt_forge.errors import CompletionError, QuotaExceededError, RateLimitError
from prompt_forge.logging.cost_calculator import usage_report
from prompt_forge.models.template import Modality, PromptTemplate
from prompt_forge.pipeline.optimizer import MODALITY_PLATFORMS, PLATFORM_PROMPTS
from prompt_forge.pipeline.orchestrator import PromptPipeline

app = typer.Typer(
    name="prompt-forge",
    help="Turn vague requests into ready-to-use AI prompts",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _require_text(text: str) -> str:
    if not text.strip():
        console.print("[red]Please enter a request.[/red]")
        raise typer.Exit(1)
    return text


def _print_prompts(prompts: list[PromptTemplate]) -> None:
    for i, template in enumerate(prompts):
        title = f"Version {i + 1}: {template.title}"
        if i == 0:
            title += " [bold green](Recommended)[/bold green]"
        console.print(Panel(template.prompt, title=title, title_align="left"))


def _dump(prompts: list[PromptTemplate]) -> None:
    typer.echo(json.dumps([p.model_dump() for p in prompts], ensure_ascii=False, indent=2))


@app.command()
def analyze(text: str = typer.Argument(help="Request to classify")) -> None:
    """Show how a request is classified."""
    profile = analyze_input(_require_text(text))

    table = Table(title="Input profile", show_header=False)
    table.add_row("Topic", profile.topic)
    table.add_row("Intent", profile.intent.value)
    table.add_row("Specificity", profile.specificity.value)
    table.add_row("Domain", profile.domain.value)
    table.add_row("Style", profile.style.value)
    table.add_row("Confidence", f"{profile.confidence:.2f}")
    table.add_row("Keywords", ", ".join(profile.keywords) or "-")
    table.add_row("Context", ", ".join(sorted(f.value for f in profile.context)) or "-")
    console.print(table)


@app.command()
def enhance(text: str = typer.Argument(help="Request to clean up")) -> None:
    """Clean up and enrich a request before generation."""
    config = load_config()
    result = enhance_input(_require_text(text), config.enhancer)

    console.print(Panel(result.enhanced, title="Enhanced request", title_align="left"))
    for improvement in result.improvements:
        console.print(f"  [green]+[/green] {improvement}")


@app.command()
def generate(
    text: str = typer.Argument(help="Request to turn into prompts"),
    modality: str = typer.Option(None, "--modality", "-m", help="text | image | code | audio | video"),
    no_enhance: bool = typer.Option(False, "--no-enhance", help="Skip the enhancement pass"),
    as_json: bool = typer.Option(False, "--json", help="Print prompts as JSON"),
) -> None:
    """Generate three prompt variants with the local rule engine."""
    config = load_config()
    target = Modality.parse(modality or config.generator.default_modality)

    pipeline = PromptPipeline(enhancer_config=config.enhancer)
    result = pipeline.run(_require_text(text), target, enhance=not no_enhance)

    if as_json:
        _dump(result.prompts)
        return

    if result.enhancement is not None:
        console.print(f"[dim]Enhanced: {result.enhancement.enhanced}[/dim]")
    console.print(
        f"[dim]{target.value} | intent: {result.profile.intent.value} | "
        f"specificity: {result.profile.specificity.value}[/dim]\n"
    )
    _print_prompts(result.prompts)


@app.command()
def optimize(
    text: str = typer.Argument(help="Request to optimize"),
    platform: str = typer.Option(None, "--platform", "-p", help="Target platform or modality"),
    enhance_first: bool = typer.Option(False, "--enhance", help="Run the enhancement pass first"),
    as_json: bool = typer.Option(False, "--json", help="Print prompts as JSON"),
) -> None:
    """Generate three prompt variants with the remote LLM."""
    config = load_config()
    llm = LLMClient(timeout=config.llm.timeout, max_attempts=config.llm.max_attempts)
    pipeline = PromptPipeline(
        llm,
        enhancer_config=config.enhancer,
        model=config.llm.model,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
    )

    try:
        with console.status("Optimizing your prompt..."):
            result = asyncio.run(
                pipeline.run_remote(
                    _require_text(text),
                    platform or config.generator.default_platform,
                    enhance=enhance_first,
                )
            )
    except RateLimitError as exc:
        console.print(f"[yellow]{exc}[/yellow]")
        raise typer.Exit(2)
    except QuotaExceededError as exc:
        console.print(f"[yellow]{exc}[/yellow]")
        raise typer.Exit(3)
    except CompletionError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    if as_json:
        _dump(result.prompts)
        return

    _print_prompts(result.prompts)
    report = usage_report(llm.get_token_summary())
    console.print(f"[dim]{report.describe()}, {result.elapsed_seconds:.1f}s[/dim]")


@app.command()
def platforms() -> None:
    """List supported target platforms per modality."""
    table = Table(title="Platforms")
    table.add_column("Modality")
    table.add_column("Platforms")
    for modality, ids in MODALITY_PLATFORMS.items():
        table.add_row(modality.value, ", ".join(ids))
    console.print(table)
    console.print(f"[dim]{len(PLATFORM_PROMPTS)} platforms; the first in each row is the default.[/dim]")


if __name__ == "__main__":
    app()
