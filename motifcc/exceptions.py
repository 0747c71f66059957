"""
Exceptions raised by motifcc.

Degenerate statistics (fewer than two motif instances, zero variance) are
not errors: they are reported as NaN with a status on the result object.
Only failures that leave a run without an answer are raised.
"""

from typing import Optional

import numpy as np


class MotifClusteringError(Exception):
    """Base class for motifcc errors."""


class MotifError(MotifClusteringError, ValueError):
    """Invalid motif specification or host/motif directedness mismatch."""


class SamplerConvergenceError(MotifClusteringError, RuntimeError):
    """A null-model sample did not reach its exact motif count."""

    def __init__(self, target: int, reached: int, trials: int):
        self.target = target
        self.reached = reached
        self.trials = trials
        super().__init__(
            f"Could not place exactly {target} motifs "
            f"(stuck at {reached} after {trials} stalled trials)"
        )


class NoValidSamplesError(MotifClusteringError, RuntimeError):
    """Every null-model sample failed or had an undefined coefficient."""

    def __init__(self, n_samples: int, samples: Optional[np.ndarray] = None):
        self.n_samples = n_samples
        self.samples = samples
        super().__init__(
            f"None of the {n_samples} null-model samples produced a valid "
            f"clustering coefficient; z-score is undefined"
        )
