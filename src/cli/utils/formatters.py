"""Output formatting utilities for CLI."""

from typing import List, Sequence

import click


def format_success(message: str) -> str:
    """Format a success message in green."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message in red."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message in yellow."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message in blue."""
    return click.style(f"ℹ {message}", fg="blue")


def format_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    numeric_columns: Sequence[int] = (),
    max_width: int = 40,
) -> str:
    """Format rows as a plain-text table.

    Args:
        headers: Column headers
        rows: Data rows, each the same length as ``headers``
        numeric_columns: Indexes of columns to right-align
        max_width: Cells longer than this are truncated

    Returns:
        The table as a single string, or "" without headers
    """
    if not headers:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(widths)]):
            widths[i] = max(widths[i], len(str(cell)))
    widths = [min(w, max_width) for w in widths]

    def render(cells: Sequence[str]) -> str:
        parts: List[str] = []
        for i, width in enumerate(widths):
            text = str(cells[i])[:width] if i < len(cells) else ""
            align = ">" if i in numeric_columns else "<"
            parts.append(f" {text:{align}{width}} ")
        return "|" + "|".join(parts) + "|"

    separator = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    table = [separator, render(headers), separator]
    if rows:
        table.extend(render(row) for row in rows)
        table.append(separator)

    return "\n".join(table)
