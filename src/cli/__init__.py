"""Timesheet grouping CLI.

Commands to group timesheet lines by rate code, per day, render the
nested grouping as HTML and check rate code consistency.
"""

import os

import click

from src.cli.commands import by_day, by_rate_code, check, render_html
from src.cli.error_handlers import ConfigurationError, with_error_handling
from src.config.logging_config import LoggingConfig, configure_logging
from src.config.settings import get_config

__version__ = "1.0.0"


@click.group(help="Group timesheet lines by day and rate code")
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Verbose logging and stack traces")
@click.option(
    "--log-format",
    type=click.Choice(["standard", "json"]),
    default=None,
    help="Log output format (default: LOG_FORMAT, json in production)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, log_format):
    """Timesheet grouping CLI main entry point."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug

    with with_error_handling(debug):
        try:
            settings = get_config()
            logging_config = LoggingConfig.from_env()
        except ValueError as e:
            raise ConfigurationError(
                str(e),
                recovery_hint="Check LOG_LEVEL, LOG_FORMAT and ENVIRONMENT "
                "in your environment or .env file",
            ) from e

        # LOG_LEVEL and DEBUG may come from .env, which only the settings read
        logging_config.log_level = (
            "DEBUG" if debug or settings.debug else settings.log_level
        )
        if log_format:
            logging_config.log_format = log_format
        elif not os.getenv("LOG_FORMAT") and settings.environment == "production":
            logging_config.log_format = "json"

        configure_logging(logging_config)


cli.add_command(by_rate_code)
cli.add_command(by_day)
cli.add_command(render_html)
cli.add_command(check)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
