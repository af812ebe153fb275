from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from .backends import get_backend
from .models import PasswordPolicy, StrengthReport

# ── logger (무소음 기본) ───────────────────────────────
LOGGER = logging.getLogger("pwstrength.checker")
LOGGER.addHandler(logging.NullHandler())


class PasswordChecker:
    """Applies a :class:`PasswordPolicy` and keeps rejection statistics."""

    def __init__(self, policy: Optional[PasswordPolicy] = None):
        self.policy = policy or PasswordPolicy()
        self.backend = get_backend(self.policy.backend)
        self.stats = {
            "checked": 0,
            "rejected": 0,
            "rejected_repetition": 0,
            "rejected_sequence": 0,
        }

    # ─────────────────────────────────────────────────────────────
    def report(self, password: Optional[str]) -> StrengthReport:
        rep = StrengthReport(
            repetition_count=self.backend.max_repetition_count(password),
            sequence_length=self.backend.max_sequence_length(password),
            max_repetition=self.policy.max_repetition,
            max_sequence=self.policy.max_sequence,
        )
        self._record(rep)
        return rep

    def is_permissible(self, password: Optional[str]) -> bool:
        return self.report(password).permissible

    def _record(self, rep: StrengthReport) -> None:
        self.stats["checked"] += 1
        if rep.permissible:
            return
        self.stats["rejected"] += 1
        if not rep.repetition_ok:
            self.stats["rejected_repetition"] += 1
        if not rep.sequence_ok:
            self.stats["rejected_sequence"] += 1
        # 비밀번호 자체는 절대 로그에 남기지 않음
        LOGGER.debug(
            "rejected: repetition %d/%d, sequence %d/%d",
            rep.repetition_count, rep.max_repetition,
            rep.sequence_length, rep.max_sequence,
        )

    def get_stats(self) -> Dict[str, Any]:
        """검사 통계 반환"""
        return self.stats.copy()
