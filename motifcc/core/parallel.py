"""
Parallel processing utilities.

Null-model samples and row blocks of the pairwise overlap count are
independent, so they are mapped over a process pool when ``n_jobs != 1``.
"""

from typing import Any, Callable, List, Optional, Sequence
import multiprocessing as mp

from tqdm.auto import tqdm


def resolve_n_jobs(n_jobs: int, n_tasks: int) -> int:
    """Number of worker processes to use for ``n_tasks`` tasks.

    ``-1`` means all available cores but one.
    """
    if n_jobs == 0 or n_jobs < -1:
        raise ValueError(f"n_jobs must be -1 or >= 1, got {n_jobs}")
    if n_jobs == -1:
        n_jobs = max(1, mp.cpu_count() - 1)
    return max(1, min(n_jobs, n_tasks))


def _apply(job):
    fn, args = job
    return fn(*args)


def parallel_map(
    fn: Callable[..., Any],
    tasks: Sequence[tuple],
    n_jobs: int = 1,
    progress: bool = False,
    desc: Optional[str] = None,
) -> List[Any]:
    """Apply ``fn(*task)`` to every task, in order.

    Parameters:
    -----------
    fn : callable
        Module-level function (must be picklable when ``n_jobs != 1``).
    tasks : sequence of tuples
        Positional arguments for each call.
    n_jobs : int, default=1
        Number of jobs to run in parallel. -1 means using all available cores.
    progress : bool, default=False
        Show a tqdm progress bar.
    desc : str, optional
        Progress bar label.

    Returns:
    --------
    results : list
        One result per task, in task order.
    """
    if not tasks:
        return []

    n_jobs = resolve_n_jobs(n_jobs, len(tasks))

    if n_jobs == 1:
        # Run in serial for small inputs or when n_jobs=1
        return [fn(*task) for task in tqdm(tasks, desc=desc, disable=not progress)]

    with mp.Pool(processes=n_jobs) as pool:
        results = pool.imap(_apply, [(fn, task) for task in tasks])
        return list(tqdm(results, total=len(tasks), desc=desc, disable=not progress))
