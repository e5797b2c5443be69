"""Main CLI entry point."""

import logging

import click

from . import __version__
from .client import OpenSocialClient
from .commands.config import config_cmd
from .commands.create import create_cmd
from .commands.get import get_cmd
from .commands.update import update_cmd
from .commands.url import url_cmd
from .output import format_table
from .services import REGISTRY

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="opensocial")
@click.option("-s", "--server", envvar="OPENSOCIAL_SERVER", help="API base URL")
@click.option("-t", "--token", envvar="OPENSOCIAL_TOKEN", help="OAuth token")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, server: str, token: str, verbose: bool):
    """opensocial - OpenSocial REST command line tool.

    \b
    Quick start:
      opensocial config set server http://localhost:8080/social/rest
      opensocial services
      opensocial get people @me @self
      opensocial url http://localhost:8080/social/rest people @me @friends

    \b
    Environment variables:
      OPENSOCIAL_SERVER     - API base URL
      OPENSOCIAL_TOKEN      - OAuth token
      OPENSOCIAL_USER_ID    - Default user id
      OPENSOCIAL_CONFIG_DIR - Configuration directory
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    ctx.ensure_object(dict)
    ctx.obj["client"] = OpenSocialClient(server=server, token=token)


# Register commands
cli.add_command(url_cmd)
cli.add_command(get_cmd)
cli.add_command(update_cmd)
cli.add_command(create_cmd)
cli.add_command(config_cmd)


@cli.command("services")
def services():
    """List known services with their path templates and aliases."""
    rows = [
        [name, REGISTRY.get_template(name), REGISTRY.get_alias(name) or "-"]
        for name in REGISTRY.services
    ]
    click.echo(format_table(["service", "template", "alias"], rows))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
