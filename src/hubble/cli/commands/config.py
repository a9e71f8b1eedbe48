"""Config command implementations."""

import logging

import click
from pydantic import ValidationError

from hubble.exceptions import wrap_pydantic_error
from hubble.models import HubbleConfig

from .common import load_config, report_error

logger = logging.getLogger(__name__)


@click.group(name="config")
def config_group():
    """Show or change Hubble settings."""
    pass


@config_group.command(name="show")
@click.pass_context
def show_config(ctx):
    """Display configuration values."""
    config = load_config(ctx)
    click.echo(f"Config file: {ctx.obj['config_path']}\n")
    for field, value in config.model_dump().items():
        click.echo(f"{field}: {value}")


@config_group.command(name="set")
@click.option("--fallback-color", type=str, default=None, help="Hex color used when decoding fails")
@click.option("--include-alpha/--no-include-alpha", default=None, help="Encode colors with alpha")
@click.option("--random-seed", type=int, default=None, help="Seed for random colors")
@click.option("--clear-random-seed", is_flag=True, help="Remove the seed so random colors vary per run")
@click.pass_context
def set_config(
    ctx,
    fallback_color: str | None,
    include_alpha: bool | None,
    random_seed: int | None,
    clear_random_seed: bool,
):
    """Update configuration values and save them."""
    if clear_random_seed and random_seed is not None:
        raise click.UsageError("--random-seed and --clear-random-seed cannot be used together")

    updates = {
        "fallback_color": fallback_color,
        "include_alpha": include_alpha,
        "random_seed": random_seed,
    }
    updates = {field: value for field, value in updates.items() if value is not None}
    if clear_random_seed:
        updates["random_seed"] = None
    if not updates:
        click.echo("Nothing to update. Pass at least one option, see 'hubble config set --help'.")
        return

    path = ctx.obj["config_path"]
    config = load_config(ctx)
    try:
        updated = HubbleConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as e:
        report_error(wrap_pydantic_error(e, str(path)))
        ctx.exit(1)

    updated.save(path)
    logger.info(f"Saved configuration to {path}")
    for field, value in updates.items():
        click.echo(f"{field}: {value}")
    click.echo(f"\nSaved to {path}")
