"""NumPy backend: code-point array + alnum mask → run lengths.

Same results as :mod:`pwstrength.analyzer`; the sequence search is done with
array ops instead of a Python loop, which pays off on long inputs
(passphrases, key files, bulk audits of generated secrets).
"""
from __future__ import annotations
from typing import Optional, Tuple

import numpy as np

from .analyzer import as_text, fold

__all__ = ["encode", "longest_true_run", "max_repetition_count", "max_sequence_length"]


def encode(password: str) -> Tuple[np.ndarray, np.ndarray]:
    """Return (folded code points uint32, alnum mask bool)."""
    n = len(password)
    codes = np.fromiter((fold(c) for c in password), dtype=np.uint32, count=n)
    mask = np.fromiter((c.isalnum() for c in password), dtype=bool, count=n)
    return codes, mask


def longest_true_run(flags: np.ndarray) -> int:
    if not flags.any():
        return 0
    padded = np.concatenate(([0], flags.astype(np.int8), [0]))
    edges = np.flatnonzero(np.diff(padded))
    starts, ends = edges[::2], edges[1::2]
    return int((ends - starts).max())


def max_repetition_count(password: Optional[str]) -> int:
    password = as_text(password)
    if not password:
        return 0
    raw = np.fromiter(map(ord, password), dtype=np.uint32, count=len(password))
    _, counts = np.unique(raw, return_counts=True)
    return int(counts.max())


def max_sequence_length(password: Optional[str]) -> int:
    password = as_text(password)
    if not password:
        return 0
    codes, mask = encode(password)
    if not mask.any():
        return 0

    # 인접 쌍: 둘 다 alnum 이어야 run 이 이어짐
    pair_ok = mask[1:] & mask[:-1]
    step = codes[1:].astype(np.int64) - codes[:-1].astype(np.int64)
    asc = longest_true_run(pair_ok & (step == 1))
    desc = longest_true_run(pair_ok & (step == -1))

    # transitions → characters (+1); lone alnum = 1
    return max(asc, desc) + 1
