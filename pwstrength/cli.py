"""Command‑line interface: **pwstrength check / audit / bench**"""
from __future__ import annotations

import argparse
import logging
import random
import string
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from . import utils_profile
from .audit import audit, summarize
from .backends import BACKENDS
from .checker import PasswordChecker
from .errors import UnknownBackendError
from .json_util import dumps
from .models import PasswordPolicy
from .utils_profile import profile_section, timed

# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # root 에 이미 handler 가 있으면 basicConfig 는 no-op
    logging.getLogger("pwstrength").setLevel(level)


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _policy(ns) -> PasswordPolicy:
    return PasswordPolicy.from_config(dict(
        max_repetition=ns.max_repetition,
        max_sequence=ns.max_sequence,
        backend=ns.backend,
    ))


def _checker(ns) -> PasswordChecker:
    try:
        return PasswordChecker(_policy(ns))
    except UnknownBackendError as e:
        sys.exit(f"❌ {e}")


def _read_passwords(path: Path) -> List[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        sys.exit(f"❌ cannot read {path}: {e.strerror}")
    except UnicodeDecodeError as e:
        sys.exit(f"❌ cannot read {path}: not valid UTF-8 at byte {e.start}")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    # 비밀번호 안의 공백은 유지, 줄끝(\r\n)만 제거
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------

def cmd_check(ns) -> int:
    checker = _checker(ns)
    rep = checker.report(ns.password)

    if ns.json:
        print(dumps(rep.to_dict()))
    else:
        mark = "✓" if rep.permissible else "✗"
        print(
            f"{mark} repetition {rep.repetition_count} (max {rep.max_repetition}) | "
            f"sequence {rep.sequence_length} (max {rep.max_sequence})"
        )
    return 0 if rep.permissible else 1


def cmd_audit(ns) -> int:
    passwords = _read_passwords(ns.input)
    policy = _policy(ns)
    try:
        if ns.progress:
            # 진행률 바는 inline(단일 프로세스) 경로에서만
            checker = PasswordChecker(policy)
            reports = [checker.report(p) for p in tqdm(passwords, desc="Audit", unit="pw")]
        else:
            reports = audit(passwords, policy, processes=ns.processes)
    except UnknownBackendError as e:
        sys.exit(f"❌ {e}")

    summary = summarize(reports)
    out = dict(summary=summary, reports=[r.to_dict() for r in reports])

    if ns.output:
        ns.output.write_text(dumps(out, pretty=ns.pretty), encoding="utf-8")
        print(f"✓ audited {summary['total']:,} passwords → {ns.output}")
    else:
        print(dumps(out, pretty=ns.pretty))

    print(
        f"permissible {summary['permissible']:,} | rejected {summary['rejected']:,} "
        f"(repetition {summary['rejected_repetition']:,}, "
        f"sequence {summary['rejected_sequence']:,})",
        file=sys.stderr,
    )
    return 0 if summary["rejected"] == 0 else 1


def cmd_bench(ns) -> int:
    """Time every backend on the same synthetic passwords."""
    rand = random.Random(ns.seed)
    alphabet = string.ascii_letters + string.digits + string.punctuation
    data = ["".join(rand.choice(alphabet) for _ in range(ns.length)) for _ in range(ns.n)]

    names = list(BACKENDS) if ns.backend is None else [ns.backend]
    for name in names:
        be = BACKENDS[name]
        with profile_section(name):
            rep_ms, _ = timed(lambda: [be.max_repetition_count(p) for p in data])
            seq_ms, _ = timed(lambda: [be.max_sequence_length(p) for p in data])
        print(f"n={ns.n:,} len={ns.length} | {name:7} repetition {rep_ms:8.2f} ms | sequence {seq_ms:8.2f} ms")
    return 0


# -----------------------------------------------------------------------------
# Argument parsing
# -----------------------------------------------------------------------------

def _add_policy_args(sp) -> None:
    sp.add_argument("--max-repetition", "-r", type=int, default=None,
                    help="max allowed occurrences of one character")
    sp.add_argument("--max-sequence", "-s", type=int, default=None,
                    help="max allowed ascending/descending run length")
    sp.add_argument("--backend", "-b", default=None, choices=list(BACKENDS))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="pwstrength", description="password repetition / sequence checks")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    # check ----------------------------------------------------------
    sp = sub.add_parser("check", help="check one password")
    sp.add_argument("password")
    _add_policy_args(sp)
    sp.add_argument("--json", action="store_true", help="print report as JSON")
    sp.set_defaults(func=cmd_check)

    # audit ----------------------------------------------------------
    sp = sub.add_parser("audit", help="check a file with one password per line")
    sp.add_argument("--input", "-i", type=Path, required=True)
    sp.add_argument("--output", "-o", type=Path, default=None)
    _add_policy_args(sp)
    sp.add_argument("--processes", "-p", type=_non_negative_int, default=1,
                    help="worker processes (0 = cpu_count - 1)")
    sp.add_argument("--progress", action="store_true", help="show progress bar with tqdm")
    sp.add_argument("--pretty", action="store_true", help="indent JSON output")
    sp.set_defaults(func=cmd_audit)

    # bench ----------------------------------------------------------
    sp = sub.add_parser("bench", help="quick backend benchmark")
    sp.add_argument("--n", type=int, default=10000, help="synthetic password count")
    sp.add_argument("--length", type=int, default=64, help="synthetic password length")
    sp.add_argument("--seed", type=int, default=0)
    sp.add_argument("--backend", "-b", default=None, choices=list(BACKENDS))
    sp.set_defaults(func=cmd_bench)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ns = build_parser().parse_args(argv)
    _setup_logging(ns.verbose or utils_profile.PROFILING_ENABLED)
    return ns.func(ns)


if __name__ == "__main__":
    sys.exit(main())
