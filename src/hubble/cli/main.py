"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from hubble import __version__
from hubble.models import DEFAULT_CONFIG_PATH

from .commands import color_group, config_group

logger = logging.getLogger(__name__)

_handler: Optional[logging.Handler] = None


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    global _handler

    if debug:
        level = logging.DEBUG
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins for a custom log file
    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "hubble-debug.log"
    else:
        log_path = log_file

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_path:
        # Keeps last 5 files, max 10MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    else:
        handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)
        _handler.close()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _handler = handler

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


@click.group()
@click.version_option(version=__version__, prog_name="hubble")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f'Config file (default: {DEFAULT_CONFIG_PATH})'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./hubble-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
@click.pass_context
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Hubble - hex color codec and safe-access utilities.

    \b
    Examples:
      # Decode colors in any supported hex form
      hubble color decode '#F00' '#FF000080'

      # Encode 8-bit channels
      hubble color encode 255 128 0 --include-alpha

      # Canonical form, invalid values replaced by the fallback color
      hubble color normalize '#abc' 'not-a-color'

      # Reproducible random colors
      hubble color random --count 5 --seed 42

      # Change the fallback color
      hubble config set --fallback-color '#FF00FF'
    """
    setup_logging(verbose, debug, log_file, log_level)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path or DEFAULT_CONFIG_PATH


cli.add_command(color_group)
cli.add_command(config_group)

if __name__ == "__main__":
    cli()
