"""Typer CLI for room furnishing."""

import logging
import random
from pathlib import Path
from typing import Annotated

import typer

from furnishing.application import FurnishRoomCommand
from furnishing.application.config import (
    ConfigError,
    config_to_request,
    config_to_schedule,
    load_config,
)
from furnishing.application.semantics import (
    FITTING_CATEGORIES,
    SPATIAL_SEMANTICS,
    build_room_semantics,
)
from furnishing.domain.errors import FurnishingCancelledError
from furnishing.domain.value_objects import RoomCategory
from furnishing.infrastructure import (
    InMemoryListingCatalog,
    LayoutSummaryFormatter,
    LoggingProgressSink,
    RoomConfigurationJsonExporter,
)

app = typer.Typer(
    name="furnishing",
    help="Furnish rooms from a listing catalog by simulated annealing.",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def furnish(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON room creation file"),
    ],
    catalog_file: Annotated[
        Path,
        typer.Option("--catalog", "-c", help="Path to the JSON listing catalog"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: summary, json"),
    ] = "summary",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the room configuration JSON to this file"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Random seed, overrides the configuration file"),
    ] = None,
    max_seconds: Annotated[
        float | None,
        typer.Option("--max-seconds", help="Wall-clock bound for the annealing loop"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log progress and debug output"),
    ] = False,
) -> None:
    """Furnish a room and print the resulting layout.

    Examples:
        furnishing furnish living-room.json --catalog catalog.json
        furnishing furnish living-room.json -c catalog.json --format json --seed 7
        furnishing furnish living-room.json -c catalog.json -o room.json
    """
    _configure_logging(verbose)

    if output_format not in ("summary", "json"):
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo("Available formats: summary, json", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
        chosen_seed = seed if seed is not None else config.seed
        rng = random.Random(chosen_seed)
        catalog = InMemoryListingCatalog.from_file(catalog_file, rng=rng)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    annealing = config.annealing
    if max_seconds is not None:
        annealing = annealing.model_copy(update={"max_seconds": max_seconds})

    command = FurnishRoomCommand(
        catalog,
        schedule=config_to_schedule(annealing),
        rng=rng,
        progress_sink=LoggingProgressSink(logging.DEBUG) if verbose else None,
    )

    try:
        result = command.execute(config_to_request(config))
    except FurnishingCancelledError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    exporter = RoomConfigurationJsonExporter()
    if output_file is not None:
        output_file.write_text(exporter.export(result.room_configuration), encoding="utf-8")
        typer.echo(f"Room configuration written to {output_file}")

    if output_format == "json":
        typer.echo(exporter.export_output(result))
    else:
        typer.echo(LayoutSummaryFormatter(include_cost_terms=verbose).format(result.layout))
        if result.result.timed_out:
            typer.echo("Note: stopped at the time bound, layout may be unsettled")
        if result.skipped_categories:
            typer.echo(
                f"Categories without a listing: {', '.join(result.skipped_categories)}"
            )


@app.command()
def validate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON room creation file to validate"),
    ],
) -> None:
    """Validate a room creation file.

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors

    Example:
        furnishing validate living-room.json
    """
    typer.echo(f"Validating {config_file}...")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    description = config.room_description
    typer.echo(
        f"Valid: {description.room_category.value}, "
        f"{description.width_in_meters}m x {description.depth_in_meters}m, "
        f"fill target {config.fill_target}"
    )
    schedule = config_to_schedule(config.annealing)
    typer.echo(f"Annealing iterations: {schedule.expected_iterations}")


@app.command()
def categories(
    room_category: Annotated[
        str | None,
        typer.Option("--room", "-r", help="Show fitting priorities for this room category"),
    ] = None,
) -> None:
    """List fitting categories, or the fitting priorities of a room category."""
    if room_category is None:
        typer.echo(f"{'Category':<20} {'Placement':<10} {'Orientedness':<12} Relations")
        for category in FITTING_CATEGORIES:
            semantics = SPATIAL_SEMANTICS[category.name]
            relations = ", ".join(
                relation.related_fitting_category for relation in semantics.spatial_relations
            )
            typer.echo(
                f"{category.name:<20} {category.placement_location.value:<10} "
                f"{semantics.orientedness.value:<12} {relations or '-'}"
            )
        return

    try:
        category = RoomCategory(room_category)
    except ValueError:
        valid = ", ".join(c.value for c in RoomCategory)
        typer.echo(f"Unknown room category: {room_category}", err=True)
        typer.echo(f"Available room categories: {valid}", err=True)
        raise typer.Exit(code=1)

    room_semantics = next(
        semantics for semantics in build_room_semantics() if semantics.room_category is category
    )
    typer.echo(f"{'Category':<20} {'Importance':>10} {'Factor':>8}")
    for priority in room_semantics.fitting_priorities:
        typer.echo(
            f"{priority.fitting_category:<20} {priority.initial_importance:>10.2f} "
            f"{priority.subsequent_importance_factor:>8.2f}"
        )


if __name__ == "__main__":
    app()
