"""Get command - fetch and display resources."""

from typing import Dict, Optional, Tuple

import click

from ..client import APIError, OpenSocialClient
from ..output import format_json, format_yaml
from . import parse_params


@click.command("get")
@click.argument("service")
@click.argument("path", nargs=-1)
@click.option(
    "-p",
    "--param",
    "params",
    multiple=True,
    callback=parse_params,
    help="Extra query parameter as KEY=VALUE (repeatable)",
)
@click.option(
    "-o", "--output", type=click.Choice(["yaml", "json"]), help="Output format"
)
@click.pass_context
def get_cmd(
    ctx: click.Context,
    service: str,
    path: Tuple[str, ...],
    params: Dict[str, str],
    output: Optional[str],
):
    """Fetch a service path.

    \b
    Examples:
      opensocial get people @me @self      # Current user
      opensocial get people @me @friends   # Friends of current user
      opensocial get appdata @me @self @app -o json
      opensocial get activities @me @self -p count=5
    """
    client: OpenSocialClient = ctx.obj["client"]

    try:
        result = client.fetch(service, *path, params=params)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    except APIError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)

    if output == "json":
        click.echo(format_json(result))
    else:
        click.echo(format_yaml(result))
