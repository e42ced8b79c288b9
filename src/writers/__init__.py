"""Writers that render grouped timesheet lines.

This module renders day/rate code groupings as HTML tables and writes
them to files.
"""

from src.writers.html_table_writer import (
    format_amount,
    render_day_groups_as_html_table,
    write_html_table,
)

__all__ = [
    "format_amount",
    "render_day_groups_as_html_table",
    "write_html_table",
]
