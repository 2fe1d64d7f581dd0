"""Command line interface for the band name rater."""

import logging
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from bandrater.config import Settings, load_settings
from bandrater.scoring import BandNameScorer, BandScore, Genre

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

console = Console()

SIGNAL_LABELS = {
    "two_word": "Two-word band name",
    "the_sandwich": "\"X the Y\" pattern",
    "descriptor_uniqueness": "Word after \"the\"",
    "style": "Genre style match",
    "black_pink": "Colour contrast (black/pink)",
    "descriptor_words": "Filler descriptors",
    "juvenile_words": "Juvenile words",
    "randomness": "Random-looking tokens",
    "long_name": "Too many words",
    "nonsense": "Odd phrase",
}

REASON_LABELS = {
    "empty": "Empty name",
    "override": "Perfect name",
    "personal_name": "Personal name (anchored at 5)",
}


def parse_genre(ctx: click.Context, param: click.Parameter, value: str | None) -> Genre | None:
    """Click callback turning a genre label into a Genre."""
    if value is None:
        return None
    genre = Genre.parse(value)
    if genre is None:
        raise click.BadParameter(f"'{value}'. Choose from: {', '.join(Genre.labels())}")
    return genre


genre_option = click.option(
    "--genre",
    "-g",
    default=None,
    callback=parse_genre,
    help="Genre to match the name against (default: from config)",
)


def score_color(score: float, settings: Settings) -> str:
    if score >= settings.scoring.excellent_score:
        return "green"
    if score >= settings.scoring.min_acceptable_score:
        return "yellow"
    return "red"


def _resolve(ctx: click.Context, genre: Genre | None) -> tuple[Settings, BandNameScorer, Genre]:
    settings = ctx.obj["settings"]
    return settings, BandNameScorer(settings), genre or settings.genre


def _score_table(title: str, results: list[BandScore], settings: Settings) -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim")
    table.add_column("Name", style="bold cyan")
    table.add_column("Score", justify="right")
    table.add_column("Bonuses")
    table.add_column("Penalties")

    for i, result in enumerate(results, 1):
        color = score_color(result.score, settings)
        if result.reason in REASON_LABELS:
            bonuses = REASON_LABELS[result.reason]
        else:
            bonuses = ", ".join(SIGNAL_LABELS[b] for b in result.bonuses) or "-"
        penalties = ", ".join(SIGNAL_LABELS[p] for p in result.penalties) or "-"
        table.add_row(str(i), escape(result.name), f"[{color}]{result.score:.2f}[/{color}]", bonuses, penalties)
    return table


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    envvar="BANDRATER_CONFIG",
    help="Path to configuration file (default: config.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log the scoring breakdown")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """Rate band and artist names from 0 to 10.

    Scores combine name structure, genre style (bouba/kiki phonetics)
    and penalties for juvenile, generic or random-looking names.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    ctx.ensure_object(dict)
    try:
        ctx.obj["settings"] = load_settings(config)
    except ValueError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        ctx.exit(1)


@cli.command("rate")
@click.argument("name")
@genre_option
@click.option("--detail", "-d", is_flag=True, help="Show each signal's contribution")
@click.pass_context
def rate(ctx: click.Context, name: str, genre: Genre | None, detail: bool) -> None:
    """Rate a single band name.

    Examples:
        band-rater rate "Young the Giant"
        band-rater rate BLACKPINK --genre k-pop
    """
    settings, scorer, genre = _resolve(ctx, genre)
    result = scorer.evaluate(name, genre)

    color = score_color(result.score, settings)
    console.print(f"[bold cyan]{escape(name)}[/bold cyan] [dim]({genre.label})[/dim]")
    console.print(f"[bold]Score:[/bold] [{color}]{result.score:.2f}/10[/{color}]")

    if not detail:
        return

    if result.reason in REASON_LABELS:
        console.print(f"[dim]{REASON_LABELS[result.reason]}[/dim]")
        return

    table = Table(title="Breakdown")
    table.add_column("Signal", style="cyan")
    table.add_column("Value", justify="right")
    for key, value in result.contributions.items():
        value_color = "green" if value > 0 else "red"
        table.add_row(SIGNAL_LABELS[key], f"[{value_color}]{value:+.2f}[/{value_color}]")
    table.add_row("Positive total", f"{result.positive:.2f}", style="bold")
    table.add_row("Negative total", f"{result.negative:.2f}", style="bold")
    console.print(table)


@cli.command("compare")
@click.argument("names", nargs=-1, required=True)
@genre_option
@click.pass_context
def compare(ctx: click.Context, names: tuple[str, ...], genre: Genre | None) -> None:
    """Compare several names side by side.

    Examples:
        band-rater compare "Foo Fighters" "Arctic Monkeys" Coldplay
    """
    if len(names) < 2:
        raise click.UsageError("Give at least 2 names to compare.")

    settings, scorer, genre = _resolve(ctx, genre)
    results = scorer.score_batch(names, genre)

    console.print(_score_table(f"Comparison ({genre.label})", results, settings))

    winner = results[0]
    console.print(f"\n[bold green]Best name: {escape(winner.name)} ({winner.score:.2f}/10)[/bold green]")


@cli.command("genres")
def list_genres() -> None:
    """List available genres."""
    for label in Genre.labels():
        console.print(f"  {label}")


@cli.command("examples")
@genre_option
@click.pass_context
def examples(ctx: click.Context, genre: Genre | None) -> None:
    """Rate the built-in example names."""
    settings, scorer, genre = _resolve(ctx, genre)
    results = [scorer.evaluate(name, genre) for name in settings.examples]

    console.print(Panel(f"Example names rated as [bold]{genre.label}[/bold]", border_style="blue"))
    console.print(_score_table("Examples", results, settings))


def main() -> None:
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
