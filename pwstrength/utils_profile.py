"""cProfile / wall-clock helpers for ``pwstrength bench``.

    with profile_section("numpy"):
        for p in passwords:
            backend.max_sequence_length(p)

Profiling is off unless ``PWSTRENGTH_PROFILE=1`` (or
``utils_profile.PROFILING_ENABLED = True``); off = 오버헤드 없음.
"""
from __future__ import annotations
import cProfile
import logging
import os
import pstats
import time
from contextlib import contextmanager
from io import StringIO
from typing import Any, Callable, Tuple

LOGGER = logging.getLogger("pwstrength.profile")
LOGGER.addHandler(logging.NullHandler())

PROFILING_ENABLED: bool = bool(int(os.getenv("PWSTRENGTH_PROFILE", "0")))


def timed(fn: Callable[..., Any], *a, **kw) -> Tuple[float, Any]:
    """(elapsed ms, result)"""
    t0 = time.perf_counter()
    out = fn(*a, **kw)
    return (time.perf_counter() - t0) * 1000, out


@contextmanager
def profile_section(name: str, top: int = 15):
    if not PROFILING_ENABLED:
        yield
        return

    pr = cProfile.Profile()
    t0 = time.perf_counter()
    pr.enable()
    try:
        yield
    finally:
        pr.disable()
        dt = (time.perf_counter() - t0) * 1000
        buf = StringIO()
        pstats.Stats(pr, stream=buf).sort_stats("cumulative").print_stats(top)
        LOGGER.info("[%s] %.1f ms\n%s", name, dt, buf.getvalue())
