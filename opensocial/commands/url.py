"""Url command - build a request URL without sending it."""

from typing import Dict, Tuple

import click

from ..url import MalformedUrlError, UrlBuilder
from . import parse_params


@click.command("url")
@click.argument("base")
@click.argument("segments", nargs=-1)
@click.option(
    "-p",
    "--param",
    "params",
    multiple=True,
    callback=parse_params,
    help="Query parameter as KEY=VALUE (repeatable)",
)
@click.option("--check", is_flag=True, help="Fail if the result is not a valid URL")
def url_cmd(base: str, segments: Tuple[str, ...], params: Dict[str, str], check: bool):
    """Build a URL from a base, path segments and query parameters.

    \b
    Examples:
      opensocial url https://api.example.com people @me @self
      opensocial url http://x/ appdata @me -p fields=score --check
    """
    url = UrlBuilder(base)
    for segment in segments:
        url.add_segment(segment)
    for key, value in params.items():
        url.add_query_param(key, value)

    if check:
        try:
            url.to_url()
        except MalformedUrlError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)

    click.echo(url.serialize())
