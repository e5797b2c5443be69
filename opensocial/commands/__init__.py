"""CLI subcommands."""

from typing import Dict, Tuple

import click


def parse_params(
    ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]
) -> Dict[str, str]:
    """Click callback turning repeated KEY=VALUE options into a dict."""
    params = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}")
        params[key] = value
    return params
