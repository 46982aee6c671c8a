"""CLI entry point for route-docs."""

import json
import logging

import click
import yaml

from route_docs.contexts.defaults import Defaults
from route_docs.schema.types import TypeResolver
from route_docs.service.base import HttpMethod


def _response_table(defaults: Defaults, method: str | None) -> dict:
    """Default responses as plain data, keyed by method name."""
    if method:
        try:
            methods = [HttpMethod(method.upper())]
        except ValueError:
            raise click.BadParameter(f"unknown HTTP method '{method}'", param_hint="--method")
    else:
        methods = list(defaults.default_response_messages())

    return {
        m.value: [
            {"code": msg.code, "message": msg.message}
            for msg in defaults.response_messages_for(m)
        ]
        for m in methods
    }


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """route-docs: inspect the defaults used when documenting routes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = Defaults()


@main.command()
@click.option("--method", default=None, help="Only show this HTTP method.")
@click.option("--format", "fmt", default="yaml", type=click.Choice(["yaml", "json"]), help="Output format.")
@click.pass_obj
def responses(defaults: Defaults, method: str | None, fmt: str):
    """Print the default response messages per HTTP method."""
    table = _response_table(defaults, method)
    if fmt == "json":
        click.echo(json.dumps(table, indent=2))
    else:
        click.echo(yaml.safe_dump(table, sort_keys=False), nl=False)


@main.command()
@click.pass_obj
def ignored(defaults: Defaults):
    """Print the parameter types left out of the docs."""
    names = sorted(f"{t.__module__}.{t.__qualname__}" for t in defaults.default_ignorable_parameter_types())
    for name in names:
        click.echo(name)


@main.command()
@click.pass_obj
def rules(defaults: Defaults):
    """Print the alternate type rules in the order they are tried."""
    for index, rule in enumerate(defaults.default_rules(TypeResolver()), start=1):
        click.echo(f"{index}. {rule}")
