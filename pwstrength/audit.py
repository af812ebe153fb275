"""Batch audit of many passwords, optionally across worker processes."""
from __future__ import annotations
import logging
import multiprocessing as mp
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .checker import PasswordChecker
from .config import POLICY_CONFIG
from .models import PasswordPolicy, StrengthReport

LOGGER = logging.getLogger("pwstrength.audit")
LOGGER.addHandler(logging.NullHandler())


def _audit_chunk(args) -> List[StrengthReport]:
    policy, chunk = args
    checker = PasswordChecker(policy)
    return [checker.report(p) for p in chunk]


def audit(
    passwords: Iterable[Optional[str]],
    policy: Optional[PasswordPolicy] = None,
    processes: Optional[int] = None,
    chunk_size: Optional[int] = None,
) -> List[StrengthReport]:
    """Report for every password, in input order.

    ``processes`` None/1 → inline, 0 → ``default_processes()``; otherwise
    chunks are mapped over a ``multiprocessing.Pool`` (pickle IPC, order
    preserved by ``map``).  Negative counts raise ``ValueError``.
    """
    if processes is not None and processes < 0:
        raise ValueError(f"processes must be >= 0, got {processes}")
    if processes == 0:
        processes = default_processes()

    policy = policy or PasswordPolicy()
    items: Sequence[Optional[str]] = list(passwords)
    chunk = chunk_size or POLICY_CONFIG["chunk_size"]

    if processes in (None, 1) or len(items) <= chunk:
        return _audit_chunk((policy, items))

    chunks = [items[i : i + chunk] for i in range(0, len(items), chunk)]
    LOGGER.debug("audit: %d passwords, %d chunks, %d processes",
                 len(items), len(chunks), processes)
    with mp.Pool(processes) as pool:
        results = pool.map(_audit_chunk, [(policy, c) for c in chunks])
    return [r for part in results for r in part]


def default_processes() -> int:
    return POLICY_CONFIG["processes"] or max(mp.cpu_count() - 1, 1)


def summarize(reports: Iterable[StrengthReport]) -> Dict[str, Any]:
    out = {
        "total": 0,
        "permissible": 0,
        "rejected": 0,
        "rejected_repetition": 0,
        "rejected_sequence": 0,
        "max_repetition_seen": 0,
        "max_sequence_seen": 0,
    }
    for r in reports:
        out["total"] += 1
        out["max_repetition_seen"] = max(out["max_repetition_seen"], r.repetition_count)
        out["max_sequence_seen"] = max(out["max_sequence_seen"], r.sequence_length)
        if r.permissible:
            out["permissible"] += 1
            continue
        out["rejected"] += 1
        if not r.repetition_ok:
            out["rejected_repetition"] += 1
        if not r.sequence_ok:
            out["rejected_sequence"] += 1
    return out
