"""Helpers shared by the CLI commands."""

from typing import Optional

import click

from src.config.settings import get_config


def debug_enabled(ctx: click.Context) -> bool:
    """Whether the top-level ``--debug`` flag was given."""
    obj = ctx.find_root().obj or {}
    return bool(obj.get("debug", False))


def resolve_strict(strict: Optional[bool]) -> bool:
    """Use the command-line flag if given, else STRICT_REPRESENTATIVES."""
    if strict is not None:
        return strict
    return get_config().strict_representatives
