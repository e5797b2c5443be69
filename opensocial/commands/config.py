"""Config command - view and change CLI configuration."""

import click

from ..config import CONFIG_KEYS, get_config_path, load_config, save_config
from ..output import format_yaml


@click.group("config")
def config_cmd():
    """Manage configuration."""


@config_cmd.command("view")
def config_view():
    """Show current configuration."""
    click.echo(f"# {get_config_path()}")
    click.echo(format_yaml(load_config()))


@config_cmd.command("set")
@click.argument("key", type=click.Choice(CONFIG_KEYS))
@click.argument("value")
def config_set(key: str, value: str):
    """Set a configuration value.

    \b
    Examples:
      opensocial config set server https://api.example.com/social/rest
      opensocial config set token my-oauth-token
    """
    config = load_config()
    config[key] = value
    save_config(config)
    click.echo(f"{key} set")
