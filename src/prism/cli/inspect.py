"""CLI command: prism inspect -- display a compiled theme."""

from __future__ import annotations

import sys

import click

from prism.cli.loader import load_registry
from prism.config import PrismConfig
from prism.errors import ConfigurationError


def _format_value(value: object) -> str:
    text = repr(value)
    return text[:60] + "..." if len(text) > 60 else text


@click.command()
@click.argument("theme_ref")
@click.option(
    "--invariant",
    "invariants",
    multiple=True,
    help="Attribute name to extract from rules as an invariant.",
)
def inspect(theme_ref: str, invariants: tuple[str, ...]) -> None:
    """Compile a theme and display its colors, fonts, sizes and rules.

    THEME_REF is a 'module:attribute' reference to a theme mapping, a
    StyleRegistry, or a function returning either.
    """
    config = PrismConfig(invariants=[{"style_prop_name": name} for name in invariants])
    try:
        compiled = load_registry(theme_ref).compile(config)
    except ConfigurationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Registry version: {compiled.version}")
    click.echo(f"Platform: {compiled.platform}")
    click.echo(f"Colors: {len(compiled.colors)}")
    click.echo(f"Rules:  {len(compiled.rules)}")
    click.echo()

    if compiled.colors:
        click.echo("Colors:")
        for name, value in compiled.colors.items():
            click.echo(f"  {name} = {_format_value(value)}")
        click.echo()

    if compiled.fonts:
        click.echo("Fonts:")
        for name, value in compiled.fonts.items():
            click.echo(f"  {name} = {_format_value(value)}")
        click.echo()

    if compiled.sizes:
        click.echo("Sizes:")
        for name, value in compiled.sizes.items():
            click.echo(f"  {name} = {_format_value(value)}")
        click.echo()

    click.echo("Rules:")
    for name, rule in compiled.rules.items():
        parts = [f"  {name}"]
        parts.extend(f"{key}={_format_value(value)}" for key, value in rule.items())
        click.echo("  ".join(parts))

    if compiled.invariants:
        click.echo()
        click.echo("Invariants:")
        for name, invariant in compiled.invariants.items():
            click.echo(
                f"  {name}  {invariant.style_prop_name}={_format_value(invariant.value)}"
            )
