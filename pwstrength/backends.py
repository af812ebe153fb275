"""Backend registry: name → (repetition fn, sequence fn)."""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from . import analyzer, vectorized
from .errors import UnknownBackendError

LOGGER = logging.getLogger("pwstrength.backends")
LOGGER.addHandler(logging.NullHandler())

Metric = Callable[[Optional[str]], int]


@dataclass(frozen=True)
class Backend:
    name: str
    max_repetition_count: Metric
    max_sequence_length: Metric


# -----------------------------------------------------------------------------
# Back‑end registry
# -----------------------------------------------------------------------------
BACKENDS: Dict[str, Backend] = {
    "python": Backend("python", analyzer.max_repetition_count, analyzer.max_sequence_length),
    "numpy":  Backend("numpy", vectorized.max_repetition_count, vectorized.max_sequence_length),
}


def get_backend(name: str) -> Backend:
    if name not in BACKENDS:
        raise UnknownBackendError(name, BACKENDS)
    LOGGER.debug("backend selected: %s", name)
    return BACKENDS[name]
