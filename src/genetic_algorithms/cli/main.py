"""
Main CLI application for the genetic algorithms framework.

Commands:
- run: Run the color matching genetic algorithm
- version: Show version information
"""

from __future__ import annotations

import json
from importlib import metadata
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich.markup import escape

from genetic_algorithms.utils.logging import get_console

app = typer.Typer(
    name="genetic-algorithms",
    help="""
Genetic Algorithms Framework

Evolves a population of random colors towards a hidden reference color,
using roulette wheel (or tournament) parent selection, channel averaging
and random channel mutation.

Quick start:
  genetic-algorithms run
  genetic-algorithms run --population-size 500 --generations 50 --seed 1

For help with any command: genetic-algorithms COMMAND --help
""",
    add_completion=False,
    no_args_is_help=True,
)

console = get_console()


@app.command()
def run(
    # Engine parameters
    population_size: Optional[int] = typer.Option(
        None,
        "--population-size", "-p",
        help="Number of solutions in every generation (at least 2). Default: 1000",
    ),
    mutation_probability: Optional[float] = typer.Option(
        None,
        "--mutation-probability", "-m",
        help="Chance that each offspring is mutated (0.0-1.0). Default: 0.1",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for the random source. Omit for a different run every time",
    ),

    # Problem parameters
    generations: Optional[int] = typer.Option(
        None,
        "--generations", "-g",
        help="Number of generations to run. Default: 100",
        min=1,
    ),
    selection: Optional[str] = typer.Option(
        None,
        "--selection",
        help="Parent selection: roulette (fitness-proportional) or tournament",
    ),
    progress_interval: Optional[int] = typer.Option(
        None,
        "--progress-interval",
        help="Report progress every N generations. Default: 10",
        min=1,
    ),

    # Configuration and output
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="YAML config file. Command-line options override its values",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Save a summary of the run to a JSON file",
    ),
    format: str = typer.Option(
        "text",
        "--format", "-f",
        help="Output format: text (human-readable) or json (structured)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Log every generation",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        help="Suppress all output except the final result",
    ),
):
    """
    Run the color matching genetic algorithm.

    A random reference color is chosen and hidden from the algorithm. A
    population of random colors then evolves towards it: parents are picked
    with probability proportional to their similarity to the reference,
    combined by averaging their channels and occasionally mutated.

    Examples:
        # Defaults: 1000 colors, 100 generations, 10% mutation
        genetic-algorithms run

        # Reproducible, smaller run
        genetic-algorithms run -p 200 -g 30 --seed 42

        # Save the outcome for analysis
        genetic-algorithms run --output result.json --format json
    """
    from genetic_algorithms.color_matching import ColorMatchingPolicy
    from genetic_algorithms.config import Config
    from genetic_algorithms.core import EvolutionEngine
    from genetic_algorithms.errors import InvalidArgumentError, InvalidStateError
    from genetic_algorithms.utils.logging import set_verbosity, print_header, print_result

    try:
        cfg = Config.from_yaml(config) if config else Config()
    except (ValueError, yaml.YAMLError) as e:
        # pydantic's ValidationError is a ValueError
        console.print(f"[red]Invalid config file {config}:[/red]\n{escape(str(e))}")
        raise typer.Exit(1)

    # Override config with CLI options
    if population_size is not None:
        cfg.engine.population_size = population_size
    if mutation_probability is not None:
        cfg.engine.mutation_probability = mutation_probability
    if seed is not None:
        cfg.engine.seed = seed
    if generations is not None:
        cfg.color_matching.generation_limit = generations
    if selection is not None:
        cfg.color_matching.selection = selection
    if progress_interval is not None:
        cfg.color_matching.progress_interval = progress_interval

    if format not in ("text", "json"):
        console.print(f"[red]Error: unknown format {format!r} (expected text or json)[/red]")
        raise typer.Exit(1)
    cfg.output.format = format

    if silent:
        cfg.output.verbosity = "silent"
    elif verbose:
        cfg.output.verbosity = "verbose"
    elif format == "json":
        cfg.output.verbosity = "minimal"
    set_verbosity(cfg.output.verbosity)

    show_progress = not silent and format == "text"
    interval = cfg.color_matching.progress_interval

    def report_progress(engine: EvolutionEngine) -> None:
        if engine.current_generation % interval == 0:
            best = policy.best_color(engine)
            console.print(f"Generation: {engine.current_generation}, Best solution: {best}")

    try:
        policy = ColorMatchingPolicy.from_config(cfg.color_matching)
        engine = EvolutionEngine.from_config(policy, cfg.engine)

        if show_progress:
            print_header("Color matching")
            console.print(f"Reference solution: {policy.reference_color}")
            console.print()
            console.print("Launching genetic algorithm...")

        result = engine.run(report_progress if show_progress else None)

        if show_progress:
            console.print("End of algorithm runtime reached...")

    except (InvalidArgumentError, ValidationError) as e:
        console.print(f"[red]Invalid argument: {e}[/red]")
        raise typer.Exit(1)

    except InvalidStateError as e:
        console.print(f"[red]Internal error: {e}[/red]")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(130)

    summary = {
        "reference": policy.reference.channels,
        "best": policy.best_channels(engine),
        "best_fitness": policy.best_fitness(engine),
        "generations": result.generations,
        "population_size": engine.population_size,
        "mutation_probability": engine.mutation_probability,
        "seed": cfg.engine.seed,
    }
    if cfg.output.save_history:
        summary["history"] = [vars(stats) for stats in result.history]

    if format == "json":
        console.print_json(data=summary)
    elif silent:
        console.print(policy.best_color(engine))
    else:
        console.print(f"Reference solution: {policy.reference_color}")
        print_result(
            f"Solution found by algorithm: {policy.best_color(engine)}",
            summary["best_fitness"],
            generations=result.generations,
        )

    if output:
        with open(output, "w", encoding="utf-8") as f:
            json.dump(summary, f, indent=2)
        if not silent and format == "text":
            console.print(f"[dim]Results saved to {output}[/dim]")


@app.command()
def version():
    """Show version and dependency information."""
    from genetic_algorithms import __version__

    console.print(f"\n[bold]genetic-algorithms[/bold] v{__version__}\n")

    for package in ("pydantic", "pyyaml", "rich", "typer"):
        try:
            console.print(f"  {package}: {metadata.version(package)}")
        except metadata.PackageNotFoundError:
            console.print(f"  {package}: [red]not installed[/red]")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
