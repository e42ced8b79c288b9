"""Report lines that disagree with their rate code's first line."""

from typing import Optional

import click

from src.cli.commands.common import debug_enabled
from src.cli.error_handlers import with_error_handling
from src.cli.utils.formatters import format_success, format_warning
from src.cli.utils.loading import FILE_OPTION_HELP, load_lines
from src.utils.logging_utils import LogContext
from src.validators.consistency_validator import find_representative_conflicts


@click.command(name="check")
@click.option(
    "--file", "file_path", type=click.Path(dir_okay=False), help=FILE_OPTION_HELP
)
@click.pass_context
def check(ctx: click.Context, file_path: Optional[str]):
    """Check that each rate code has one description and one rate.

    Exits with status 1 when conflicts are found.

    Example:
        timesheet-groups check --file lines.csv
    """
    with with_error_handling(debug_enabled(ctx)), LogContext(command="check"):
        lines = load_lines(file_path)
        report = find_representative_conflicts(lines)

    if not report.issues:
        click.echo(format_success(f"{len(lines)} lines checked, no conflicts"))
        return

    click.echo(format_warning(report.summary()))
    click.echo(report.format())
    ctx.exit(1)
