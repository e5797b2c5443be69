"""Create command - post new resources."""

from typing import Optional

import click

from ..client import APIError, OpenSocialClient
from ..config import get_user_id
from ..output import format_yaml


@click.group("create")
def create_cmd():
    """Create resources."""


@create_cmd.command("activity")
@click.option("--title", required=True, help="Activity title")
@click.option("--body", default=None, help="Activity body")
@click.option("-u", "--user", default=None, help="User id (default: from config)")
@click.option("--app", default="@app", show_default=True, help="Application id")
@click.option("--dry-run", is_flag=True, help="Print request without sending")
@click.pass_context
def create_activity_cmd(
    ctx: click.Context,
    title: str,
    body: Optional[str],
    user: Optional[str],
    app: str,
    dry_run: bool,
):
    """Post an activity to a user's stream.

    \b
    Examples:
      opensocial create activity --title "Reached level 3"
      opensocial create activity --title Hi --body "Hello" --dry-run
    """
    client: OpenSocialClient = ctx.obj["client"]
    user_id = user or get_user_id()
    activity = {"title": title}
    if body is not None:
        activity["body"] = body

    if dry_run:
        url = client.build_url("activities", user_id, "@self", app)
        # Token stays off stdout
        url.query_params.pop("oauth_token", None)
        click.echo(f"POST {url}")
        click.echo(format_yaml(client.wrap_body("activities", activity)))
        return

    try:
        client.create_activity(activity, user_id=user_id, app_id=app)
    except APIError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)
    click.echo("activity created")
