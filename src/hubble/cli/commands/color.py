"""Color command implementations."""

import random

import click

from hubble.colors import decode, decode_or_default, encode, random_color
from hubble.exceptions import collect_errors
from hubble.models import Color

from .common import load_config


@click.group(name="color")
def color_group():
    """Hex color commands."""
    pass


def _describe(value: str, color: Color) -> str:
    red, green, blue, alpha = color.to_rgba_tuple()
    return (
        f"{value}  rgb({red}, {green}, {blue})  alpha={color.alpha:.3f} ({alpha})"
        f"  -> {encode(color, include_alpha=True)}"
    )


@color_group.command(name="decode")
@click.argument("values", nargs=-1, required=True)
@click.pass_context
def decode_colors(ctx, values: tuple[str, ...]):
    """Decode hex colors (#RGB, #RGBA, #RRGGBB or #RRGGBBAA).

    Every value is attempted; failures are reported together at the end.
    """
    collector = collect_errors("decode colors")

    for value in values:
        with collector.try_operation(f"decode {value}"):
            click.echo(_describe(value, decode(value)))

    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        ctx.exit(1)


@color_group.command(name="encode")
@click.argument("red", type=click.IntRange(0, 255))
@click.argument("green", type=click.IntRange(0, 255))
@click.argument("blue", type=click.IntRange(0, 255))
@click.option("--alpha", "-a", type=click.FloatRange(0.0, 1.0), default=1.0, help="Alpha (0.0-1.0)")
@click.option(
    "--include-alpha/--no-include-alpha",
    default=None,
    help="Output #RRGGBBAA (default from config)",
)
@click.pass_context
def encode_color(ctx, red: int, green: int, blue: int, alpha: float, include_alpha: bool | None):
    """Encode 8-bit RED GREEN BLUE channels as a hex string."""
    if include_alpha is None:
        include_alpha = load_config(ctx).include_alpha

    color = Color.from_rgb(red, green, blue, transparency=alpha)
    click.echo(encode(color, include_alpha=include_alpha))


@color_group.command(name="normalize")
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--include-alpha/--no-include-alpha",
    default=None,
    help="Output #RRGGBBAA (default from config)",
)
@click.pass_context
def normalize_colors(ctx, values: tuple[str, ...], include_alpha: bool | None):
    """Rewrite hex colors in canonical uppercase form.

    Values that cannot be decoded are replaced by the configured fallback color.
    """
    config = load_config(ctx)
    if include_alpha is None:
        include_alpha = config.include_alpha

    for value in values:
        color = decode_or_default(value, config.fallback)
        click.echo(encode(color, include_alpha=include_alpha))


@color_group.command(name="random")
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, help="Number of colors")
@click.option("--seed", type=int, default=None, help="Random seed (default from config)")
@click.pass_context
def random_colors(ctx, count: int, seed: int | None):
    """Print random opaque colors."""
    config = load_config(ctx)
    rng = random.Random(seed if seed is not None else config.random_seed)

    for _ in range(count):
        click.echo(encode(random_color(rng), include_alpha=config.include_alpha))
