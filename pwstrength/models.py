from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Mapping, Optional

from .config import POLICY_CONFIG


@dataclass
class PasswordPolicy:
    max_repetition: int = field(default_factory=lambda: POLICY_CONFIG["max_repetition"])
    max_sequence: int = field(default_factory=lambda: POLICY_CONFIG["max_sequence"])
    backend: str = field(default_factory=lambda: POLICY_CONFIG["backend"])

    @classmethod
    def from_config(cls, overrides: Optional[Mapping[str, Any]] = None) -> "PasswordPolicy":
        """POLICY_CONFIG 위에 overrides(None 값은 무시)를 덮어쓴 정책"""
        cfg = dict(POLICY_CONFIG)
        for k, v in (overrides or {}).items():
            if v is not None:
                cfg[k] = v
        return cls(
            max_repetition=int(cfg["max_repetition"]),
            max_sequence=int(cfg["max_sequence"]),
            backend=cfg["backend"],
        )


@dataclass
class StrengthReport:
    """Metrics + verdict for one password (the password itself is not kept)."""
    repetition_count: int
    sequence_length: int
    max_repetition: int
    max_sequence: int
    permissible: bool = field(init=False)

    def __post_init__(self):
        self.permissible = (
            self.repetition_count <= self.max_repetition
            and self.sequence_length <= self.max_sequence
        )

    @property
    def repetition_ok(self) -> bool:
        return self.repetition_count <= self.max_repetition

    @property
    def sequence_ok(self) -> bool:
        return self.sequence_length <= self.max_sequence

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
