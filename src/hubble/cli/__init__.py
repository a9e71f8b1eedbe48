"""Command line interface for Hubble."""
