"""CLI commands."""

from src.cli.commands.check import check
from src.cli.commands.grouping import by_day, by_rate_code
from src.cli.commands.render import render_html

__all__ = ["by_day", "by_rate_code", "check", "render_html"]
