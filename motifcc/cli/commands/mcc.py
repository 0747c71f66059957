"""Motif clustering coefficient and z-score commands."""

import sys
import click
from typing import Optional

from ...config import GraphConfig, LoggingConfig, MotifConfig, OutputConfig, RunConfig, SamplingConfig
from ...exceptions import MotifClusteringError
from ...factory import run_from_config


def _report(result) -> None:
    click.echo(str(result))
    if result.status != "ok":
        click.echo(f"Warning: z-score undefined ({result.status.replace('_', ' ')})", err=True)


def register_mcc_commands(cli: click.Group) -> None:
    """Register motif clustering commands."""
    @cli.command("mcc", help="Motif clustering coefficient and null-model z-score")
    @click.argument("graph", type=click.Path(exists=True, dir_okay=False))
    @click.argument("prefix")
    @click.argument("sample", type=click.IntRange(min=0))
    @click.argument("trials", type=click.IntRange(min=1))
    @click.argument("motif_size", type=int)
    @click.argument("motif_id", type=click.IntRange(min=0))
    @click.option("--seed", type=int, default=None, help="Root random seed (default: fresh entropy)")
    @click.option("--n-jobs", type=int, default=1, show_default=True,
                  help="Worker processes for samples (-1 = all cores but one)")
    @click.option("--progress", is_flag=True, help="Show a progress bar over samples")
    def mcc(graph: str, prefix: str, sample: int, trials: int, motif_size: int, motif_id: int,
            seed: Optional[int], n_jobs: int, progress: bool):
        """Calculate the motif clustering coefficient of GRAPH (GML) and its z-score.

        Writes PREFIX_samples.txt (one coefficient per sample, -1 for samples
        that did not converge) and PREFIX_stats.txt.

        Examples:

        \b
            motifcc mcc network.gml results/net 100 200 3 3
            motifcc mcc network.gml results/net 100 200 4 7 --n-jobs -1
        """
        try:
            config = RunConfig(
                graph=GraphConfig(path=graph),
                motif=MotifConfig(size=motif_size, isoclass=motif_id),
                sampling=SamplingConfig(
                    n_samples=sample, max_trials=trials, seed=seed, n_jobs=n_jobs, progress=progress
                ),
                output=OutputConfig(prefix=prefix),
                logging=LoggingConfig(),
            )
            _, result = run_from_config(config)
        except (MotifClusteringError, ValueError, FileNotFoundError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        _report(result)
