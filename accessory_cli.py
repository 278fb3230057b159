"""Mini README: Command line helpers for inspecting character scene dumps.

This script exposes a Typer CLI for checking how the detector classifies a
character exported to JSON (see ``accessory_detector.scene.adapters.memory``
for the format), testing whether a given part counts as a headshot, and
printing the active attachment table. Settings come from environment
variables when available.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from accessory_detector.classification import AccessoryClassifier, load_attachment_table
from accessory_detector.configuration import build_attachment_table, get_settings
from accessory_detector.logging_utils import configure_root_logger
from accessory_detector.scene import load_scene
from accessory_detector.utils import load_entry_point_plugins

cli = typer.Typer(help="Inspect accessory classification and headshot detection.")


def _build_classifier(table: Optional[Path], log_level: Optional[str]) -> AccessoryClassifier:
    """Apply settings and overrides, exiting with code 2 on bad configuration."""

    try:
        settings = get_settings()
        configure_root_logger(log_level or settings.log_level)
        load_entry_point_plugins()
        if table is not None:
            attachment_table = load_attachment_table(table).with_priority(settings.category_priority)
        else:
            attachment_table = build_attachment_table(settings)
    except (OSError, ValueError) as error:
        typer.echo(f"Invalid configuration: {error}", err=True)
        raise typer.Exit(code=2) from error
    return AccessoryClassifier(attachment_table)


def _load_scene_or_exit(scene: Path):
    try:
        return load_scene(scene)
    except (OSError, ValueError) as error:
        typer.echo(f"Could not read scene: {error}", err=True)
        raise typer.Exit(code=2) from error


TABLE_OPTION = typer.Option(None, "--table", help="JSON attachment table for a custom rig.")
LOG_LEVEL_OPTION = typer.Option(None, "--log-level", help="Override the configured log level.")


@cli.command()
def inspect(
    scene: Path = typer.Argument(..., help="JSON dump of the character tree."),
    table: Optional[Path] = TABLE_OPTION,
    log_level: Optional[str] = LOG_LEVEL_OPTION,
    as_json: bool = typer.Option(False, "--json", help="Emit the breakdown as JSON."),
) -> None:
    """Print the character's head accessories grouped by category."""

    classifier = _build_classifier(table, log_level)
    character = _load_scene_or_exit(scene)
    info = classifier.get_character_accessory_info(character).as_dict()

    if as_json:
        typer.echo(json.dumps(info, indent=2))
        return

    typer.echo(f"Character: {character.name}")
    for category in ("Hair", "Hat", "Face"):
        names = ", ".join(info[category]) or "-"
        typer.echo(f"  {category}: {names}")
    typer.echo(f"  Total: {info['Total']}")


@cli.command()
def headshot(
    scene: Path = typer.Argument(..., help="JSON dump of the character tree."),
    hit_path: str = typer.Argument(..., help="Slash path of the hit part, e.g. 'Cap/Brim'."),
    table: Optional[Path] = TABLE_OPTION,
    log_level: Optional[str] = LOG_LEVEL_OPTION,
) -> None:
    """Report whether a hit on HIT_PATH counts as a headshot."""

    classifier = _build_classifier(table, log_level)
    character = _load_scene_or_exit(scene)
    hit_part = character.find_path(hit_path)
    if hit_part is None:
        typer.echo(f"No part at '{hit_path}' under {character.name}", err=True)
        raise typer.Exit(code=1)

    verdict = classifier.is_headshot(hit_part, character)
    typer.echo(f"{hit_part.full_name}: {'headshot' if verdict else 'not a headshot'}")


@cli.command()
def categories(
    table: Optional[Path] = TABLE_OPTION,
    log_level: Optional[str] = LOG_LEVEL_OPTION,
) -> None:
    """Print the active attachment table and classification priority."""

    classifier = _build_classifier(table, log_level)
    typer.echo(json.dumps(classifier.table.as_dict(), indent=2))


if __name__ == "__main__":
    cli()
