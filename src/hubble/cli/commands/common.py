"""Helpers shared by CLI commands."""

import logging

import click

from hubble.exceptions import HubbleError, format_error_for_display
from hubble.models import HubbleConfig

logger = logging.getLogger(__name__)


def report_error(error: Exception) -> None:
    """Print a user-facing error and its recovery hint to stderr."""
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)


def load_config(ctx: click.Context) -> HubbleConfig:
    """Load the configuration selected by the --config option.

    Exits with status 1 if an existing config file is invalid. The failure
    is shown once, through ``report_error``.
    """
    path = ctx.obj["config_path"]
    try:
        return HubbleConfig.load_or_default(path)
    except HubbleError as e:
        logger.debug(f"Failed to load configuration from {path}: {e.technical_message}")
        report_error(e)
        ctx.exit(1)
