"""Update command - change stored resources."""

from typing import Dict, Optional

import click

from ..client import APIError, OpenSocialClient
from ..config import get_user_id
from . import parse_params


@click.group("update")
def update_cmd():
    """Update resources."""


@update_cmd.command("appdata")
@click.argument("values", nargs=-1, required=True, callback=parse_params)
@click.option("-u", "--user", default=None, help="User id (default: from config)")
@click.option("--app", default="@app", show_default=True, help="Application id")
@click.pass_context
def update_appdata_cmd(
    ctx: click.Context, values: Dict[str, str], user: Optional[str], app: str
):
    """Store application data as KEY=VALUE pairs.

    \b
    Examples:
      opensocial update appdata score=42 level=3
    """
    client: OpenSocialClient = ctx.obj["client"]

    try:
        client.update_app_data(values, user_id=user or get_user_id(), app_id=app)
    except APIError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)
    click.echo(f"appdata updated: {', '.join(values)}")
