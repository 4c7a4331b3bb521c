"""ABOUTME: CLI entry point for typeresist commands.
ABOUTME: Provides resist, matchup, interactive, and types commands via Typer."""

from collections.abc import Iterable
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from typeresist.config import load_type_chart_config
from typeresist.logs import enable_debug_logging, init_logging
from typeresist.settings import settings
from typeresist.tools.resistance_finder import CombinationEnumerator
from typeresist.utils.effectiveness import EffectivenessCalculator, TypeCombination
from typeresist.utils.type_chart import PokemonType, TypeCatalog, UnknownTypeError, default_catalog

app = typer.Typer(
    name="typeresist",
    help="Find Pokemon type combinations that resist a set of attack types.",
    no_args_is_help=True,
)

console = Console()

DONE_KEYWORD = "done"


def _load_catalog(chart: Path | None) -> TypeCatalog:
    """Return the built-in catalog, or one loaded from a YAML chart file."""
    if chart is None:
        return default_catalog
    try:
        return load_type_chart_config(chart).to_catalog()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None


def _resolve_types(names: Iterable[str], catalog: TypeCatalog) -> list[PokemonType]:
    """Resolve names to types, dropping repeats but keeping first-seen order."""
    resolved: list[PokemonType] = []
    for name in names:
        try:
            atk_type = catalog.lookup(name)
        except UnknownTypeError as e:
            console.print(f"[red]Error:[/] {escape(str(e))}")
            raise typer.Exit(1) from None
        if atk_type not in resolved:
            resolved.append(atk_type)
    return resolved


def _print_resistant_combinations(attack_types: list[PokemonType], catalog: TypeCatalog) -> None:
    """Run the search and print each match, or a no-match line."""
    enumerator = CombinationEnumerator(EffectivenessCalculator(catalog))
    results = enumerator.find_all_resistant_combinations(attack_types)

    label = ", ".join(t.value for t in attack_types)
    console.print(f"\nThe following type combination(s) resist {label}:")
    if not results:
        console.print("No such type combination exists.")
        return
    for combo in results:
        console.print(str(combo))


def _format_band(band: dict[PokemonType, float]) -> str:
    if not band:
        return "-"
    return ", ".join(f"{atk_type.value} ({value:g}x)" for atk_type, value in band.items())


@app.callback()
def main(
    log_config: Path | None = typer.Option(
        None, "--log-config", help="Logging configuration yaml file (defaults to configs/logging.yml)"
    ),
) -> None:
    """Find Pokemon type combinations that resist a set of attack types."""
    if log_config is None:
        if settings.logging_config_path.exists():
            init_logging(settings.logging_config_path)
        return

    try:
        init_logging(log_config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None


@app.command()
def resist(
    types: list[str] = typer.Argument(..., help="Attack types every result must resist"),
    chart: Path | None = typer.Option(None, "--chart", "-c", help="YAML type chart to use instead of the built-in one"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show search details"),
) -> None:
    """List every type combination that resists or is immune to all given types."""
    if verbose:
        enable_debug_logging()

    catalog = _load_catalog(chart)
    attack_types = _resolve_types(types, catalog)
    _print_resistant_combinations(attack_types, catalog)


@app.command()
def matchup(
    type1: str = typer.Argument(..., help="Primary defending type"),
    type2: str | None = typer.Argument(None, help="Secondary defending type"),
    immune: list[str] | None = typer.Option(None, "--immune", "-i", help="Extra immunity, e.g. from an ability"),
    chart: Path | None = typer.Option(None, "--chart", "-c", help="YAML type chart to use instead of the built-in one"),
) -> None:
    """Show the weaknesses, resistances, and immunities of a type combination."""
    catalog = _load_catalog(chart)
    members = _resolve_types([type1] if type2 is None else [type1, type2], catalog)
    extras = _resolve_types(immune or [], catalog)

    combo = TypeCombination(members[0], members[1] if len(members) > 1 else None, frozenset(extras))
    calculator = EffectivenessCalculator(catalog)

    console.print(f"[bold]{combo}[/]")
    console.print(f"  Weaknesses: {_format_band(calculator.weaknesses(combo))}")
    console.print(f"  Resistances: {_format_band(calculator.resistances(combo))}")
    console.print(f"  Immunities: {_format_band(calculator.immunities(combo))}")


@app.command()
def interactive(
    chart: Path | None = typer.Option(None, "--chart", "-c", help="YAML type chart to use instead of the built-in one"),
) -> None:
    """Enter attack types one per line, then 'done' to run the search."""
    catalog = _load_catalog(chart)
    console.print(
        "Welcome to the Pokemon type resistance finder!\n\n"
        "Enter the name of a Pokemon type to add it to the list of types to check "
        f'and enter "{DONE_KEYWORD}" to finalize your list.\n'
    )

    attack_types: list[PokemonType] = []
    while True:
        entry = typer.prompt("Enter the name of a Pokemon type")
        if entry.strip().lower() == DONE_KEYWORD:
            break
        try:
            atk_type = catalog.lookup(entry)
        except UnknownTypeError as e:
            console.print(str(e), markup=False)
            continue
        if atk_type not in attack_types:
            attack_types.append(atk_type)

    if not attack_types:
        console.print("[yellow]No types entered, nothing to check.[/]")
        raise typer.Exit()

    _print_resistant_combinations(attack_types, catalog)


@app.command(name="types")
def list_types() -> None:
    """List the 18 types in canonical order."""
    for pokemon_type in default_catalog.all_types():
        console.print(pokemon_type.value)


if __name__ == "__main__":
    app()
