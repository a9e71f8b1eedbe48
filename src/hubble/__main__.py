"""Main entry point for ``python -m hubble``."""

from hubble.cli.main import cli

if __name__ == "__main__":
    cli()
