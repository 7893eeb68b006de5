"""Pytest configuration file with shared sample data and a thread spawning check."""

from concurrent.futures import ThreadPoolExecutor, TimeoutError

import pytest

from polyfitkit import PolyfitKit

__all__ = ["REFERENCE_X", "REFERENCE_Y", "REFERENCE_DEGREE", "extra_threads_ok"]

REFERENCE_X = [-1, 0, 1, 2, 3, 5, 7, 9]
REFERENCE_Y = [-1, 3, 2.5, 5, 4, 2, 5, 4]
REFERENCE_DEGREE = 6


@pytest.fixture
def reference_kit():
    """PolyfitKit over the eight-point reference samples."""
    return PolyfitKit(REFERENCE_X, REFERENCE_Y)


@pytest.fixture
def reference_terms(reference_kit):
    """Degree-6 coefficients of the reference samples."""
    return reference_kit.compute_coefficients(REFERENCE_DEGREE)


@pytest.fixture(scope="session")
def threads_ok():
    """Return a callable that checks thread-spawning capability.

    The returned function has signature `check(n=2, timeout=1.0) -> bool` and
    returns True if at least `n` threads can be started and joined within `timeout`.
    """
    def _can_spawn(n: int = 2, timeout: float = 1.0) -> bool:
        try:
            with ThreadPoolExecutor(max_workers=n) as ex:
                futs = [ex.submit(lambda: None) for _ in range(n)]
                for f in futs:
                    f.result(timeout=timeout)
            return True
        except (RuntimeError, MemoryError, OSError, TimeoutError):
            return False
    return _can_spawn


@pytest.fixture(scope="session")
def extra_threads_ok(threads_ok):
    """Convenience: True iff we can start >= 2 threads (common case)."""
    return threads_ok(2)
