"""Output formatting for CLI."""

import json
from typing import Any, List

import yaml


def format_yaml(data: Any) -> str:
    return yaml.dump(
        data, default_flow_style=False, allow_unicode=True, sort_keys=False
    ).rstrip("\n")


def format_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_table(headers: List[str], rows: List[List[str]]) -> str:
    """Format rows as a left-aligned table with upper-cased headers."""
    if not rows:
        return "No resources found."

    headers = [h.upper() for h in headers]
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["   ".join(h.ljust(widths[i]) for i, h in enumerate(headers)).rstrip()]
    for row in rows:
        lines.append(
            "   ".join(str(cell).ljust(widths[i]) for i, cell in enumerate(row)).rstrip()
        )
    return "\n".join(lines)
