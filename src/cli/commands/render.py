"""Render the day/rate code grouping as an HTML table."""

from typing import Optional

import click

from src.aggregators.rate_code_aggregator import group_by_day_then_rate_code
from src.cli.commands.common import debug_enabled, resolve_strict
from src.cli.error_handlers import with_error_handling
from src.cli.utils.formatters import format_success
from src.cli.utils.loading import FILE_OPTION_HELP, load_lines
from src.config.settings import get_config
from src.utils.logging_utils import LogContext
from src.writers.html_table_writer import (
    render_day_groups_as_html_table,
    write_html_table,
)


@click.command(name="render-html")
@click.option(
    "--file", "file_path", type=click.Path(dir_okay=False), help=FILE_OPTION_HELP
)
@click.option(
    "--output",
    "-o",
    type=str,
    default=None,
    help="Write the table to this file (relative to HTML_OUTPUT_DIR)",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail when lines of one rate code disagree on description or rate",
)
@click.pass_context
def render_html(
    ctx: click.Context,
    file_path: Optional[str],
    output: Optional[str],
    strict: Optional[bool],
):
    """Render volumes per day and rate code as an HTML table.

    Prints the markup unless --output is given.

    Example:
        timesheet-groups render-html
        timesheet-groups render-html --file lines.csv -o report.htm
    """
    with with_error_handling(debug_enabled(ctx)), LogContext(command="render-html"):
        lines = load_lines(file_path)
        day_groups = group_by_day_then_rate_code(lines, strict=resolve_strict(strict))

        if output is None:
            click.echo(render_day_groups_as_html_table(day_groups), nl=False)
            return

        target = write_html_table(day_groups, get_config().resolve_output_path(output))
        click.echo(format_success(f"HTML table written to {target}"))
