"""CLI commands package."""
from flowviz.cli.properties import properties_cli

__all__ = ["properties_cli"]
