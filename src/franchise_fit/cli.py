"""CLI for the Franchise Fit Scoring Engine.

Provides command-line interface for ranking a franchise catalog against
a buyer profile and browsing the catalog.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .catalog import (
    FranchiseFitError,
    filter_catalog,
    find_franchise,
    list_categories,
    load_catalog,
    load_profile,
    validate_catalog,
    validate_profile,
)
from .config import find_config_file, get_config, load_config, save_default_config
from .explainer import FitExplainer
from .ranges import INVESTMENT_FILTERS
from .schema import FitExplanation, MatchTier, ScoredFranchise, ScoringModel, UserProfile
from .scorer import FranchiseScorer, resolve_model

console = Console()

TIER_COLORS = {
    MatchTier.EXCELLENT: "green",
    MatchTier.STRONG: "blue",
    MatchTier.FAIR: "yellow",
    MatchTier.WEAK: "bright_black",
}


def format_money(amount: float) -> str:
    """Format dollars as $850K or $1.2M."""
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.1f}M"
    return f"${round(amount / 1000)}K"


def format_investment(record) -> str:
    return f"{format_money(record.investment_min)}–{format_money(record.investment_max)}"


def score_color(value: int) -> str:
    if value >= 80:
        return "green"
    if value >= 60:
        return "blue"
    return "bright_black"


@click.group()
@click.version_option(version="1.0.0", prog_name="franchise-fit")
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True),
    help="Path to fit-config.yaml (default: searched automatically)"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable debug logging"
)
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str], verbose: bool):
    """Franchise Fit Scoring Engine.

    Ranks a franchise catalog against a buyer profile and explains
    every match score.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )

    # init-config writes a fresh file, so a broken one on disk must not block it
    if config_path:
        path = Path(config_path)
    elif ctx.invoked_subcommand != "init-config":
        path = find_config_file()
    else:
        path = None

    if path:
        try:
            load_config(path)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            console.print(f"[red]Error loading config {path}:[/red] {escape(str(e))}")
            sys.exit(1)


@main.command("score")
@click.option(
    "--catalog", "-c",
    required=True,
    type=click.Path(exists=True),
    help="Path to franchise catalog JSON"
)
@click.option(
    "--profile", "-p",
    required=True,
    type=click.Path(exists=True),
    help="Path to buyer profile JSON"
)
@click.option(
    "--out", "-o",
    type=click.Path(),
    help="Output file for JSON results (default: stdout)"
)
@click.option(
    "--max-results", "-n",
    type=int,
    help="Maximum number of matches to show"
)
@click.option(
    "--model", "-m",
    type=click.Choice([m.value for m in ScoringModel]),
    default=ScoringModel.AUTO.value,
    help="Scoring model: classic (4 dimensions), full (6) or auto"
)
@click.option(
    "--year",
    type=int,
    help="Year used for franchise age (default: current year)"
)
@click.option(
    "--json-output", "-j",
    is_flag=True,
    help="Output raw JSON instead of formatted text"
)
def score_cmd(
    catalog: str,
    profile: str,
    out: Optional[str],
    max_results: Optional[int],
    model: str,
    year: Optional[int],
    json_output: bool,
):
    """Rank the catalog against a buyer profile.

    Examples:
        franchise-fit score -c catalog.json -p profile.json
        franchise-fit score -c catalog.json -p profile.json -n 5 --model classic
        franchise-fit score -c catalog.json -p profile.json -j -o results.json
    """
    limit = max_results or get_config().output.max_results

    try:
        records = load_catalog(catalog)
        buyer = load_profile(profile)
    except FranchiseFitError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    scorer = FranchiseScorer(model=ScoringModel.from_string(model), current_year=year)
    ranked = scorer.score_all(buyer, records)
    explanations = FitExplainer().explain_all(ranked)

    if json_output or out:
        payload = {
            "scoring_model": resolve_model(buyer, scorer.model).value,
            "catalog_size": len(records),
            "results": [
                {
                    **scored.model_dump(mode="json", by_alias=True),
                    "explanation": explanation.model_dump(mode="json", by_alias=True),
                }
                for scored, explanation in zip(ranked[:limit], explanations[:limit])
            ],
        }
        json_str = json.dumps(payload, indent=2)
        if out:
            Path(out).write_text(json_str, encoding="utf-8")
            console.print(f"[green]✓[/green] Results written to {out}")
        else:
            print(json_str)
        return

    display_results(buyer, ranked[:limit], explanations[:limit], len(records), scorer)


def display_results(
    profile: UserProfile,
    ranked: list[ScoredFranchise],
    explanations: list[FitExplanation],
    catalog_size: int,
    scorer: FranchiseScorer,
):
    """Display ranked results in formatted text."""
    model = resolve_model(profile, scorer.model)
    highlight = get_config().output.highlight_count

    console.print(Panel(
        f"Budget: [cyan]{profile.budget or 'not given'}[/cyan] | "
        f"Style: [cyan]{profile.style or 'not given'}[/cyan] | "
        f"Risk: [cyan]{profile.risk_tolerance or 'not given'}[/cyan]\n"
        f"Interests: [cyan]{', '.join(profile.interests) or 'any'}[/cyan]\n"
        f"Scoring model: {model.value} | Catalog: {catalog_size} franchises",
        title="Your Top Franchise Matches",
    ))

    if not ranked:
        console.print("[yellow]No franchises to rank.[/yellow]")
        return

    for scored, explanation in zip(ranked[:highlight], explanations[:highlight]):
        color = TIER_COLORS[explanation.tier]
        badge = " [bold green]BEST MATCH[/bold green]" if explanation.is_best_match else ""
        console.print(
            f"\n[{color}][bold]{scored.score}[/bold][/{color}]  "
            f"[bold]{scored.name}[/bold]{badge}  [dim]{scored.category}[/dim]"
        )

        details = [format_investment(scored), f"{scored.unit_count:,} units"]
        if scored.avg_revenue:
            details.insert(1, f"Avg Rev: {format_money(scored.avg_revenue)}/yr")
        console.print(f"   [dim]{' | '.join(details)}[/dim]")

        console.print("   " + "  ".join(
            f"{dim.label}: [{score_color(value)}]{value}[/{score_color(value)}]"
            for dim, value in scored.score_breakdown.items()
        ))
        for line in explanation.strengths:
            console.print(f"   [green]+[/green] {line}")
        for line in explanation.concerns:
            console.print(f"   [red]-[/red] {line}")

    rest = list(zip(ranked[highlight:], explanations[highlight:]))
    if rest:
        console.print("\n[bold]More Matches[/bold]")
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Score", justify="right")
        table.add_column("Name")
        table.add_column("Category")
        table.add_column("Investment")
        table.add_column("Units", justify="right")

        for scored, explanation in rest:
            color = TIER_COLORS[explanation.tier]
            table.add_row(
                str(explanation.rank),
                f"[{color}]{scored.score}[/{color}]",
                scored.name,
                scored.category,
                format_investment(scored),
                f"{scored.unit_count:,}",
            )
        console.print(table)


@main.command("browse")
@click.option(
    "--catalog", "-c",
    required=True,
    type=click.Path(exists=True),
    help="Path to franchise catalog JSON"
)
@click.option("--search", "-s", help="Filter by name (case-insensitive)")
@click.option("--category", help="Filter by exact category")
@click.option(
    "--investment",
    type=click.Choice(list(INVESTMENT_FILTERS)),
    help="Filter by investment range"
)
def browse_cmd(catalog: str, search: Optional[str], category: Optional[str], investment: Optional[str]):
    """List catalog franchises with optional filters.

    Examples:
        franchise-fit browse -c catalog.json
        franchise-fit browse -c catalog.json --category "Home Services"
        franchise-fit browse -c catalog.json --investment 100000-250000
    """
    try:
        records = load_catalog(catalog)
    except FranchiseFitError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if category and category not in list_categories(records):
        console.print(f"[yellow]Unknown category: {category}[/yellow]")
        console.print(f"Categories: {', '.join(list_categories(records))}")

    filtered = filter_catalog(records, search=search, category=category, investment=investment)
    suffix = "" if len(filtered) == 1 else "s"
    console.print(f"{len(filtered)} franchise{suffix} found\n")

    if not filtered:
        console.print("[dim]No franchises match your filters. Try broadening your search.[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Investment")
    table.add_column("Units", justify="right")

    for record in filtered:
        table.add_row(
            record.slug,
            record.name,
            record.category,
            format_investment(record),
            f"{record.unit_count:,}",
        )
    console.print(table)


@main.command("show")
@click.argument("slug")
@click.option(
    "--catalog", "-c",
    required=True,
    type=click.Path(exists=True),
    help="Path to franchise catalog JSON"
)
@click.option(
    "--profile", "-p",
    type=click.Path(exists=True),
    help="Optional buyer profile to score this franchise against"
)
def show_cmd(slug: str, catalog: str, profile: Optional[str]):
    """Show details for one franchise.

    Examples:
        franchise-fit show mosquito-joe -c catalog.json
        franchise-fit show mosquito-joe -c catalog.json -p profile.json
    """
    try:
        records = load_catalog(catalog)
        buyer = load_profile(profile) if profile else None
    except FranchiseFitError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    record = find_franchise(records, slug)
    if record is None:
        console.print(f"[red]Franchise not found: {slug}[/red]")
        sys.exit(1)

    lines = [
        f"[dim]{record.category}[/dim]",
        record.description,
        "",
        f"Investment Range: {format_investment(record)}",
        f"Franchise Fee: {format_money(record.franchise_fee)}",
        f"Royalty: {record.royalty_pct}% | Ad Fund: {record.ad_fund_pct}%",
        f"Units: {record.unit_count:,} (+{record.units_opened} / -{record.units_closed} last year, "
        f"net growth {record.net_growth_rate:.1f}%)",
        f"Founded: {record.year_founded} | HQ: {record.headquarters or 'n/a'}",
    ]
    if record.avg_revenue:
        lines.insert(5, f"Avg Revenue: {format_money(record.avg_revenue)}/yr")
    if record.website:
        lines.append(f"Website: {record.website}")
    if record.tags:
        lines.append(f"Tags: {', '.join(record.tags)}")

    console.print(Panel("\n".join(lines), title=record.name))

    if buyer is not None:
        scorer = FranchiseScorer()
        scored = scorer.score_franchise(buyer, record)
        explanation = FitExplainer().explain(scored, rank=1)
        color = TIER_COLORS[explanation.tier]
        console.print(f"\nFit Score: [{color}][bold]{scored.score}[/bold][/{color}] ({explanation.tier.value})")
        for dim, value in scored.score_breakdown.items():
            console.print(f"  {dim.label:<12} [{score_color(value)}]{value:>3}[/{score_color(value)}]")


@main.command("validate")
@click.option(
    "--catalog", "-c",
    type=click.Path(),
    help="Path to franchise catalog JSON"
)
@click.option(
    "--profile", "-p",
    type=click.Path(),
    help="Path to buyer profile JSON"
)
def validate_cmd(catalog: Optional[str], profile: Optional[str]):
    """Validate catalog and/or profile files.

    Examples:
        franchise-fit validate -c catalog.json
        franchise-fit validate -c catalog.json -p profile.json
    """
    if not catalog and not profile:
        console.print("[yellow]Please specify --catalog and/or --profile to validate[/yellow]")
        return

    all_valid = True

    if catalog:
        is_valid, issues = validate_catalog(catalog)
        if is_valid:
            console.print(f"[green]✓ Catalog valid: {catalog}[/green]")
        else:
            console.print(f"[red]✗ Catalog invalid: {catalog}[/red]")
            for issue in issues:
                console.print(f"  - {escape(issue)}")
            all_valid = False

    if profile:
        is_valid, issues = validate_profile(profile)
        if is_valid:
            console.print(f"[green]✓ Profile valid: {profile}[/green]")
        else:
            console.print(f"[red]✗ Profile invalid: {profile}[/red]")
            for issue in issues:
                console.print(f"  - {escape(issue)}")
            all_valid = False

    sys.exit(0 if all_valid else 1)


@main.command("init-config")
@click.option(
    "--out", "-o",
    type=click.Path(),
    default="fit-config.yaml",
    help="Output path for the configuration file"
)
@click.option(
    "--force", "-f",
    is_flag=True,
    help="Overwrite existing config file"
)
def init_config_cmd(out: str, force: bool):
    """Write the default configuration to a YAML file."""
    out_path = Path(out)
    if out_path.exists() and not force:
        console.print(f"[red]Error:[/red] Config file already exists: {out} (use --force to overwrite)")
        sys.exit(1)

    try:
        save_default_config(out_path)
    except OSError as e:
        console.print(f"[red]Error creating config:[/red] {e}")
        sys.exit(1)
    console.print(f"[green]✓[/green] Config file created: {out}")


if __name__ == "__main__":
    main()
