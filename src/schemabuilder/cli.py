"""
schemabuilder CLI - inspect and assemble fragment directories.

Commands:
    schemabuilder order PATH    Show the computed order for each kind
    schemabuilder build PATH    Assemble definitions, resolvers and directives

Usage::

    schemabuilder order schema/ --rules ordering.yaml
    schemabuilder --log-level debug build schema/ --format json
"""

import json
from pathlib import Path
from typing import Any, Optional

import click
import yaml
from pydantic import ValidationError

from schemabuilder.builder import SchemaBuilder
from schemabuilder.config import get_config
from schemabuilder.errors import SchemaBuilderError
from schemabuilder.log import configure_logging
from schemabuilder.ordering.loader import OrderingRulesLoader
from schemabuilder.types import FragmentKind


def _prepare(path: str, rules: Optional[str]) -> SchemaBuilder:
    """Create a builder, apply the rules file, and import ``path``."""
    builder = SchemaBuilder()
    try:
        if rules:
            builder.apply_rules(OrderingRulesLoader().load(Path(rules)))
        builder.import_from(path)
    except (SchemaBuilderError, ValidationError, yaml.YAMLError, TypeError) as exc:
        raise click.ClickException(str(exc)) from exc
    return builder


def _describe(value: Any) -> Any:
    """JSON-friendly view of a merged resolver/directive tree."""
    if isinstance(value, dict):
        return {key: _describe(v) for key, v in value.items()}
    if callable(value):
        return f"<{getattr(value, '__qualname__', type(value).__name__)}>"
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return repr(value)


def _leaf_paths(tree: dict, prefix: str = "") -> list[str]:
    paths = []
    for key, value in tree.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict) and value:
            paths.extend(_leaf_paths(value, f"{dotted}."))
        else:
            paths.append(dotted)
    return paths


@click.group()
@click.version_option(package_name="schemabuilder")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default=None,
    help="Logging level (default from SCHEMABUILDER_LOG_LEVEL).",
)
@click.option(
    "--log-format",
    type=click.Choice(["json", "text"]),
    default=None,
    help="Log output format (default from SCHEMABUILDER_LOG_FORMAT).",
)
def main(log_level, log_format):
    """schemabuilder - order and merge schema fragments."""
    config = get_config()
    configure_logging(log_level or config.log_level, log_format or config.log_format)


@main.command("order")
@click.argument("path", type=click.Path(exists=True, file_okay=False))
@click.option("--rules", "-r", type=click.Path(exists=True, dir_okay=False), help="Ordering rules YAML file")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text")
def order_cmd(path: str, rules: Optional[str], output_format: str):
    """Show the computed order of every fragment kind in PATH."""
    builder = _prepare(path, rules)
    try:
        orders = {kind.value: builder.order(kind) for kind in FragmentKind}
    except SchemaBuilderError as exc:
        raise click.ClickException(str(exc)) from exc

    if output_format == "json":
        click.echo(json.dumps(orders, indent=2))
        return
    for kind, ids in orders.items():
        click.echo(f"{kind}: {', '.join(ids) if ids else '(none)'}")


@main.command("build")
@click.argument("path", type=click.Path(exists=True, file_okay=False))
@click.option("--rules", "-r", type=click.Path(exists=True, dir_okay=False), help="Ordering rules YAML file")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text")
def build_cmd(path: str, rules: Optional[str], output_format: str):
    """Assemble the fragments in PATH into one schema payload."""
    builder = _prepare(path, rules)
    try:
        payload = builder.build()
    except (SchemaBuilderError, TypeError) as exc:
        raise click.ClickException(str(exc)) from exc

    if output_format == "json":
        click.echo(json.dumps({
            "definitions": [_describe(d) for d in payload.definitions],
            "resolvers": _describe(payload.resolvers),
            "directives": _describe(payload.directives),
        }, indent=2))
        return

    for definitions in payload.definitions:
        click.echo(definitions if isinstance(definitions, str) else repr(definitions))
    click.echo(f"# resolvers: {', '.join(_leaf_paths(payload.resolvers)) or '(none)'}")
    click.echo(f"# directives: {', '.join(_leaf_paths(payload.directives)) or '(none)'}")


if __name__ == "__main__":
    main()
