"""YAML configuration commands."""

import logging
import sys
import click
from pathlib import Path

from ...config import RunConfig
from ...exceptions import MotifClusteringError
from ...factory import run_from_config
from .mcc import _report


def register_pipeline_commands(cli: click.Group) -> None:
    """Register YAML configuration commands."""
    @cli.command("run", help="Run motif clustering analysis from YAML configuration")
    @click.argument("config", type=click.Path(exists=True, path_type=Path))
    @click.option(
        "--validate-only",
        is_flag=True,
        help="Only validate configuration, don't run analysis"
    )
    @click.pass_context
    def run(ctx: click.Context, config: Path, validate_only: bool):
        """Run analysis from a YAML configuration file.

        Examples:

        \b
            motifcc run configs/ecoli_ffl.yaml
            motifcc run configs/ecoli_ffl.yaml --validate-only
        """
        try:
            cfg = RunConfig.from_yaml(config)
        except (ValueError, TypeError, FileNotFoundError) as e:
            click.echo(f"Configuration error: {e}", err=True)
            sys.exit(1)

        if validate_only:
            click.echo(f"Configuration valid: {config}")
            click.echo(f"  Graph: {cfg.graph.path}")
            click.echo(f"  Motif: size={cfg.motif.size}, isoclass={cfg.motif.isoclass}")
            click.echo(f"  Samples: {cfg.sampling.n_samples}, trials: {cfg.sampling.max_trials}")
            click.echo(f"  Output: {cfg.output.prefix or 'none'}")
            return

        if not ctx.obj.get("verbose"):
            logging.getLogger("motifcc").setLevel(cfg.logging.level)

        try:
            _, result = run_from_config(cfg)
        except (MotifClusteringError, ValueError, FileNotFoundError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        _report(result)
