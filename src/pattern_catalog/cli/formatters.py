"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps of command results
- Rich tables for demo listings and run summaries
- Plain list formatting for transcripts and detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

from pattern_catalog.config.defaults import OutputFormat
from pattern_catalog.domain.core.exceptions import UnsupportedFormatError


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == OutputFormat.JSON.value:
        return json.dumps(data, indent=2, default=str)
    elif format_type == OutputFormat.YAML.value:
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == OutputFormat.TABLE.value:
        return format_table_output(data)
    elif format_type == OutputFormat.LIST.value:
        return format_list_output(data)
    raise UnsupportedFormatError(format_type, [f.value for f in OutputFormat])


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    elif isinstance(data, dict) and "demo" in data:
        return format_demos_table([data["demo"]])
    elif isinstance(data, dict) and "runs" in data:
        return format_runs_table(data["runs"])
    elif isinstance(data, dict) and "config" in data:
        return format_config_table(data["config"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_list(data["demos"])
    elif isinstance(data, dict) and "demo" in data:
        return format_demos_list([data["demo"]])
    elif isinstance(data, dict) and "runs" in data:
        return format_runs_list(data["runs"])
    elif isinstance(data, dict) and "config" in data:
        return format_config_list(data["config"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    """Capture Rich output as string."""
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_demos_table(demos: List[Dict]) -> str:
    """Format demo summaries as a Rich table."""
    if not demos:
        return "No demos found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Name", style="cyan", width=24)
    table.add_column("Pattern", style="green", width=24)
    table.add_column("Category", style="blue", width=14)
    table.add_column("Summary", style="white")

    for demo in demos:
        table.add_row(
            str(demo.get("name", "N/A")),
            str(demo.get("title", "N/A")),
            str(demo.get("category", "N/A")),
            str(demo.get("summary", "")),
        )

    return _render(table)


def format_runs_table(runs: List[Dict]) -> str:
    """Format run results as a Rich table; transcripts are left to list/json output."""
    if not runs:
        return "No demos were run."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", width=24)
    table.add_column("Status", width=8)
    table.add_column("Sections", style="yellow", justify="right", width=8)
    table.add_column("Lines", style="yellow", justify="right", width=6)
    table.add_column("Time (ms)", style="yellow", justify="right", width=10)
    table.add_column("Error", style="red")

    for run in runs:
        table.add_row(
            str(run.get("name", "N/A")),
            "ok" if run.get("success") else "failed",
            str(len(run.get("sections") or [])),
            str(len(run.get("lines") or [])),
            f"{float(run.get('duration_ms') or 0.0):.1f}",
            str(run.get("error") or ""),
        )

    return _render(table)


def format_config_table(config: Dict[str, Any]) -> str:
    """Format flattened configuration as a key/value table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for key, value in _flatten(config):
        table.add_row(key, str(value))
    return _render(table)


def format_demos_list(demos: List[Dict]) -> str:
    """Format demo summaries as a detailed list."""
    if not demos:
        return "No demos found."

    lines = []
    for i, demo in enumerate(demos):
        if i > 0:
            lines.append("")  # Blank line between demos
        lines.append(f"Demo: {demo.get('name', 'N/A')}")
        lines.append(f"  Pattern: {demo.get('title', 'N/A')}")
        lines.append(f"  Category: {demo.get('category', 'N/A')}")
        lines.append(f"  Summary: {demo.get('summary', '')}")
        if demo.get("seeded"):
            lines.append("  Seeded: yes")
        if demo.get("options"):
            lines.append(f"  Config: {', '.join(demo['options'])}")
    return "\n".join(lines)


def format_runs_list(runs: List[Dict]) -> str:
    """Format run results with their transcripts."""
    if not runs:
        return "No demos were run."

    lines = []
    for i, run in enumerate(runs):
        if i > 0:
            lines.append("")
        header = f"=== {run.get('title', run.get('name', 'N/A'))} ==="
        if run.get("seed") is not None:
            header += f" (seed {run['seed']})"
        lines.append(header)
        lines.extend(run.get("lines") or [])
        if not run.get("success"):
            lines.append(f"FAILED: {run.get('error')}")
    return "\n".join(lines)


def format_config_list(config: Dict[str, Any]) -> str:
    """Format configuration as dotted key/value lines."""
    return "\n".join(f"{key}: {value}" for key, value in _flatten(config))


def _flatten(data: Dict[str, Any], prefix: str = "") -> List[tuple]:
    items = []
    for key, value in data.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            items.extend(_flatten(value, path))
        else:
            items.append((path, value))
    return items
