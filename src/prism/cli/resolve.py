"""CLI command: prism resolve -- resolve the style groups of a component."""

from __future__ import annotations

import json
import sys

import click

from prism.cli.loader import load_object, load_registry
from prism.config import PrismConfig
from prism.core import Prism, StyledType
from prism.errors import ConfigurationError
from prism.validation import validate_props


def _parse_prop(raw: str) -> tuple[str, object]:
    name, sep, value = raw.partition("=")
    if not sep or not name:
        raise click.BadParameter(f"expected name=value, got {raw!r}")
    try:
        return name, json.loads(value)
    except json.JSONDecodeError:
        return name, value


@click.command()
@click.argument("component_ref")
@click.option("--theme", "theme_ref", required=True, help="'module:attribute' theme reference.")
@click.option("--namespace", default="", help="Namespace the component is registered under.")
@click.option("--prop", "props", multiple=True, help="Component prop as name=value (JSON values allowed).")
@click.option("--extended", is_flag=True, help="Enable extended property plugins.")
@click.option("--font-properties", is_flag=True, help="Enable font property plugins.")
@click.option("--color-names", is_flag=True, help="Substitute registry color names.")
@click.option("--json", "as_json", is_flag=True, help="Print styles as JSON.")
def resolve(
    component_ref: str,
    theme_ref: str,
    namespace: str,
    props: tuple[str, ...],
    extended: bool,
    font_properties: bool,
    color_names: bool,
    as_json: bool,
) -> None:
    """Register a component type against a theme and print its resolved styles.

    COMPONENT_REF is a 'module:attribute' reference to a host component class.
    """
    component_type = load_object(component_ref)
    if isinstance(component_type, StyledType):
        component_type = component_type.component_type
    values = dict(_parse_prop(raw) for raw in props)

    prism = Prism()
    try:
        styled = prism.stylable(component_type, namespace=namespace)
        prism.configure(
            load_registry(theme_ref),
            PrismConfig(
                extended_properties=extended,
                font_properties=font_properties,
                color_names=color_names,
            ),
        )
        component = styled(values)
    except ConfigurationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    diagnostics = validate_props(component.definition, component.props)

    if as_json:
        payload = {
            "styles": {name: dict(style) for name, style in component.style_values.items()},
            "extracted": component.extracted,
            "diagnostics": [str(d) for d in diagnostics],
        }
        click.echo(json.dumps(payload, indent=2, sort_keys=True, default=str))
        return

    click.echo(f"Component: {component.definition.name}")
    click.echo(f"Groups: {', '.join(component.definition.group_names)}")
    click.echo()
    for group in component.groups.values():
        click.echo(f"{group.prop_name}: ({len(group.fragments)} fragment(s))")
        for key, value in group.style.items():
            click.echo(f"  {key} = {value!r}")
    if component.extracted:
        click.echo()
        click.echo("Extracted:")
        for key, value in component.extracted.items():
            click.echo(f"  {key} = {value!r}")
    if diagnostics:
        click.echo()
        for diag in diagnostics:
            click.echo(str(diag))
            if diag.fix:
                click.echo(f"  fix: {diag.fix}")
        warnings = sum(1 for d in diagnostics if d.is_warning)
        click.echo(f"\n{warnings} warning(s)")
