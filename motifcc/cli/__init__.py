"""
Command-line interface for motifcc.

This module provides the main entry point for the motifcc CLI.
"""

import click
import importlib
import logging
import pkgutil
from pathlib import Path

LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


# Create the main Click group
@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="motifcc")
@click.option("-v", "--verbose", count=True, help="Log progress (-v) or every sampler trial (-vv)")
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    """Motif clustering coefficients and null-model z-scores."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    logging.basicConfig(level=LOG_LEVELS.get(verbose, logging.DEBUG), format="%(message)s")


# Dynamically load all command modules
def register_commands() -> None:
    """Dynamically discover and register all command modules."""
    commands_pkg = Path(__file__).parent / "commands"

    # Import all modules in the commands package
    for _, module_name, _ in pkgutil.iter_modules([str(commands_pkg)]):
        module = importlib.import_module(f"motifcc.cli.commands.{module_name}")

        # Look for register_*_commands functions and call them
        for name, func in module.__dict__.items():
            if name.startswith("register_") and name.endswith("_commands"):
                func(cli)


# Register all commands
register_commands()


# Main entry point
def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})
