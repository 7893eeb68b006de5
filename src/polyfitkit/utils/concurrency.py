"""Concurrency management for fitting several degrees of one sample set.

Fits only read the shared :class:`~polyfitkit.samples.SampleStore` and each
one allocates its own normal-equations matrix, so independent fits can run
on a thread pool without locking.
"""

from __future__ import annotations

import contextvars
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Sequence, Tuple

__all__ = [
    "DEFAULT_WORKERS",
    "normalize_workers",
    "resolve_workers",
    "parallel_execute",
]


DEFAULT_WORKERS: int = 1


def _int_env(name: str) -> int | None:
    """Reads a positive integer from an environment variable, or None if unset/invalid.

    Args:
        name: Environment variable name.

    Returns:
        Positive integer value, or None.
    """
    v = os.getenv(name)
    if not v:
        return None
    try:
        i = int(v)
        return i if i > 0 else None
    except ValueError:
        return None


def normalize_workers(n_workers: Any) -> int:
    """Ensures n_workers is a positive integer, defaulting to 1.

    Args:
        n_workers: Input number of workers (can be None, float, negative, etc.)

    Returns:
        int: A positive integer number of workers (at least 1).
    """
    try:
        n = int(n_workers)
    except (TypeError, ValueError):
        n = 1
    return 1 if n < 1 else n


def resolve_workers(n_workers: Any, n_tasks: int) -> int:
    """Decides how many threads to use for ``n_tasks`` independent fits.

    ``None`` falls back to ``POLYFITKIT_WORKERS`` from the environment and
    then to :data:`DEFAULT_WORKERS`. The result never exceeds the number of
    tasks.

    Args:
        n_workers: Requested number of workers, or ``None``.
        n_tasks: Number of independent tasks.

    Returns:
        Number of worker threads (at least 1).
    """
    if n_workers is None:
        n_workers = _int_env("POLYFITKIT_WORKERS") or DEFAULT_WORKERS
    return max(1, min(normalize_workers(n_workers), n_tasks))


def parallel_execute(
    worker: Callable[..., Any],
    arg_tuples: Sequence[Tuple[Any, ...]],
    *,
    n_workers: int = 1,
) -> list[Any]:
    """Runs ``worker(*args)`` for each tuple in arg_tuples, preserving order.

    With ``n_workers > 1`` the calls run on a thread pool, each in a copy of
    the caller's context. Exceptions raised by a worker propagate to the
    caller.
    """
    if n_workers > 1:
        with ThreadPoolExecutor(max_workers=n_workers) as ex:
            futures = []
            for args in arg_tuples:
                ctx = contextvars.copy_context()
                futures.append(ex.submit(ctx.run, worker, *args))
            return [f.result() for f in futures]
    return [worker(*args) for args in arg_tuples]
