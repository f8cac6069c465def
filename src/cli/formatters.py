"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Rich tables for the pattern catalog
- List formatting for detailed views
- JSON and YAML dumps for everything else
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_table([data["pattern"]])
    # Fallback to JSON for unknown data structures
    return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_list([data["pattern"]])
    elif isinstance(data, dict):
        return "\n".join(_flatten_lines(data))
    return json.dumps(data, indent=2, default=str)


def format_patterns_table(patterns: List[Dict]) -> str:
    """Format patterns as a table using Rich."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Category", style="green")
    table.add_column("Interactive", style="yellow", justify="center")
    table.add_column("Summary", style="white")

    for pattern in patterns:
        table.add_row(
            str(pattern.get("name", "N/A")),
            str(pattern.get("category", "N/A")),
            "yes" if pattern.get("interactive") else "no",
            str(pattern.get("summary", "")),
        )

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_patterns_list(patterns: List[Dict]) -> str:
    """Format patterns as a detailed list."""
    if not patterns:
        return "No patterns found."

    blocks = []
    for pattern in patterns:
        lines = [
            f"Pattern: {pattern.get('name', 'N/A')}",
            f"  Category: {pattern.get('category', 'N/A')}",
            f"  Interactive: {'yes' if pattern.get('interactive') else 'no'}",
            f"  Summary: {pattern.get('summary', '')}",
        ]
        description = pattern.get("description")
        if description:
            lines.append("  Description:")
            lines.extend(f"    {line}" if line else "" for line in description.splitlines())
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def _flatten_lines(data: Dict[str, Any], prefix: str = "") -> List[str]:
    lines = []
    for key, value in data.items():
        path = f"{prefix}{key}"
        if isinstance(value, dict):
            lines.extend(_flatten_lines(value, f"{path}."))
        else:
            lines.append(f"{path}: {value}")
    return lines
