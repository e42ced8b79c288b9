"""Commands that print grouped timesheet lines as text tables."""

import logging
from decimal import Decimal
from typing import Optional

import click

from src.aggregators.rate_code_aggregator import (
    group_by_day_then_rate_code,
    group_by_rate_code,
)
from src.cli.commands.common import debug_enabled, resolve_strict
from src.cli.error_handlers import with_error_handling
from src.cli.utils.formatters import format_info, format_table
from src.cli.utils.loading import FILE_OPTION_HELP, load_lines
from src.utils.logging_utils import LogContext
from src.writers.html_table_writer import DAY_FORMAT, format_amount

logger = logging.getLogger(__name__)

file_option = click.option(
    "--file", "file_path", type=click.Path(dir_okay=False), help=FILE_OPTION_HELP
)
strict_option = click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail when lines of one rate code disagree on description or rate",
)


@click.command(name="by-rate-code")
@file_option
@strict_option
@click.pass_context
def by_rate_code(ctx: click.Context, file_path: Optional[str], strict: Optional[bool]):
    """Sum volumes per rate code.

    Example:
        timesheet-groups by-rate-code
        timesheet-groups by-rate-code --file lines.csv --strict
    """
    with with_error_handling(debug_enabled(ctx)), LogContext(command="by-rate-code"):
        lines = load_lines(file_path)
        groups = group_by_rate_code(lines, strict=resolve_strict(strict))

        if not groups:
            click.echo(format_info("No timesheet lines to group."))
            return

        rows = [
            [
                g.rate_code,
                g.rate_description,
                format_amount(g.rate),
                format_amount(g.total_volume),
                str(g.line_count),
            ]
            for g in groups
        ]
        click.echo(
            format_table(
                ["Rate Code", "Rate Description", "Rate", "Volume", "Lines"],
                rows,
                numeric_columns=(2, 3, 4),
            )
        )
        total = sum((g.total_volume for g in groups), Decimal("0"))
        click.echo(f"Total volume: {format_amount(total)}")


@click.command(name="by-day")
@file_option
@strict_option
@click.pass_context
def by_day(ctx: click.Context, file_path: Optional[str], strict: Optional[bool]):
    """Sum volumes per rate code within each day.

    The day is printed on the first row of its block only.

    Example:
        timesheet-groups by-day --file lines.csv
    """
    with with_error_handling(debug_enabled(ctx)), LogContext(command="by-day"):
        lines = load_lines(file_path)
        day_groups = group_by_day_then_rate_code(lines, strict=resolve_strict(strict))

        if not day_groups:
            click.echo(format_info("No timesheet lines to group."))
            return

        rows = []
        for day_group in day_groups:
            for position, g in enumerate(day_group.lines):
                rows.append(
                    [
                        day_group.day.strftime(DAY_FORMAT) if position == 0 else "",
                        g.rate_code,
                        g.rate_description,
                        format_amount(g.rate),
                        format_amount(g.total_volume),
                    ]
                )
        click.echo(
            format_table(
                ["Day", "Rate Code", "Rate Description", "Rate", "Volume"],
                rows,
                numeric_columns=(3, 4),
            )
        )
